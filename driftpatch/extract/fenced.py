import re
from typing import List, Optional

from ..models.blocks import DiffBlock
from ..utils.text import strip_think_blocks
from .grammar import SEARCH_MARKER

# Opening fence with optional language, body, closing fence on its own line.
_FENCE_RE = re.compile(
    r"(?P<fence>`{3,}|~{3,})(?P<lang>[\w+-]*)[ \t]*\n"
    r"(?P<body>.*?)\n"
    r"[ \t]*(?P=fence)[ \t]*(?=\n|$)",
    re.DOTALL,
)
_STANDALONE_PATH_RE = re.compile(r"^([\w\-./\\]+\.\w+)$")
_EMBEDDED_PATH_RE = re.compile(r"([\w\-./\\]+\.\w+)")


def _path_hint_before(text: str, fence_start: int) -> Optional[str]:
    """Look at the last few lines before a fence for something that looks like a file path."""
    lines_before = text[:fence_start].split("\n")
    for line in reversed(lines_before[-5:]):
        line = line.strip().strip("`*:")
        if not line or line.startswith(("```", "~~~")):
            continue
        m = _STANDALONE_PATH_RE.match(line) or _EMBEDDED_PATH_RE.search(line)
        if m:
            return m.group(1).replace("\\", "/")
    return None


def extract_search_replace_blocks(text: str) -> List[DiffBlock]:
    """
    Pull SEARCH/REPLACE diffs out of markdown-style LLM output.

    Every code fence whose body contains a SEARCH marker becomes one
    :class:`DiffBlock`. Its ``diff`` is the raw fence body, so several blocks
    aimed at one file stay together and in order. ``start``/``end`` are offsets
    into the text after ``<think>`` sections were removed.

    Example:
        path/to/file.py
        ```python
        <<<<<<< SEARCH
        old
        =======
        new
        >>>>>>> REPLACE
        ```
    """
    cleaned = strip_think_blocks(text)
    results: List[DiffBlock] = []
    for m in _FENCE_RE.finditer(cleaned):
        body = m.group("body")
        if not any(ln.strip() == SEARCH_MARKER for ln in body.splitlines()):
            continue
        results.append(DiffBlock(
            diff=body,
            start=m.start(),
            end=m.end(),
            language=m.group("lang") or "plain",
            file_path=_path_hint_before(cleaned, m.start()),
        ))
    return results

import re
from typing import List, Tuple

_LINE_BREAK_RE = re.compile(r"\r\n|\n")
_LINE_WITH_END_RE = re.compile(r"([^\n]*?)(\r\n|\n|$)")
_LEADING_WS_RE = re.compile(r"^[\t ]*")


def detect_eol(s: str) -> str:
    """
    Return the most common line terminator in ``s``: ``"\\r\\n"`` when CRLF
    lines outnumber LF lines, ``"\\n"`` otherwise. A lone ``\\r`` is not a
    terminator.
    """
    crlf = s.count("\r\n")
    lf = s.count("\n") - crlf
    return "\r\n" if crlf > lf else "\n"


def split_lines(s: str) -> List[str]:
    """
    Split text into lines without terminators.

    Lines end at ``\\n`` or ``\\r\\n``; a lone ``\\r`` stays part of its line.
    A single trailing terminator does not produce an empty last line, so
    ``"a\\nb\\n"`` and ``"a\\nb"`` both give ``["a", "b"]``. Empty input gives ``[]``.
    """
    if not s:
        return []
    lines = _LINE_BREAK_RE.split(s)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def split_lines_keepends(s: str) -> Tuple[List[str], List[str]]:
    """
    Like :func:`split_lines`, but also return each line's own terminator.

    The two lists have the same length. The last terminator is ``""`` when
    the text does not end with a line break.
    """
    lines: List[str] = []
    ends: List[str] = []
    for m in _LINE_WITH_END_RE.finditer(s):
        if not m.group(2):
            if m.group(1):
                lines.append(m.group(1))
                ends.append("")
            break
        lines.append(m.group(1))
        ends.append(m.group(2))
    return lines, ends


def join_lines(lines: List[str], ends: List[str]) -> str:
    """Inverse of :func:`split_lines_keepends`."""
    return "".join(ln + end for ln, end in zip(lines, ends))


def leading_ws(s: str) -> str:
    """Return the exact leading whitespace (tabs/spaces)."""
    m = _LEADING_WS_RE.match(s)
    return m.group(0) if m else ""


def strip_think_blocks(content: str) -> str:
    """Remove ``<think>...</think>`` sections that reasoning models emit before their answer."""
    if not content:
        return ""
    return re.sub(r"<think>.*?</think>", "", content, flags=re.DOTALL)

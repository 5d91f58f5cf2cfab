# driftpatch/commit/splice.py
from __future__ import annotations

from typing import List, Sequence, Tuple

from ..utils.text import leading_ws

__all__ = ["reindent_relative", "apply_replacement", "splice_line_endings"]


def reindent_relative(
    replace_lines: Sequence[str],
    search_first: str,
    matched_first: str,
) -> List[str]:
    """
    Re-indent replacement lines so they sit at the matched location's depth.

    The first search line's indentation is the nominal level and the first
    matched buffer line's indentation is the base. A line indented less than
    (or as much as) nominal gets the base shortened by the difference; a line
    indented deeper gets the base plus its extra whitespace. Content is trimmed
    and blank lines stay empty.
    """
    nominal = leading_ws(search_first)
    base = leading_ws(matched_first)

    adjusted: List[str] = []
    for ln in replace_lines:
        body = ln.strip()
        if not body:
            adjusted.append("")
            continue
        ws = leading_ws(ln)
        relative_level = len(ws) - len(nominal)
        if relative_level <= 0:
            indent = base[:max(0, len(base) + relative_level)]
        else:
            indent = base + ws[len(nominal):]
        adjusted.append(indent + body)
    return adjusted


def apply_replacement(
    lines: Sequence[str],
    match_index: int,
    search_lines: Sequence[str],
    replace_lines: Sequence[str],
) -> Tuple[List[str], int]:
    """
    Swap ``len(search_lines)`` lines at ``match_index`` for the re-indented
    replacement.

    Returns a new buffer and the line-count delta later hints must be shifted by.
    """
    m = len(search_lines)
    matched_first = lines[match_index] if match_index < len(lines) else ""
    search_first = search_lines[0] if search_lines else ""
    new_block = reindent_relative(replace_lines, search_first, matched_first)
    out = list(lines[:match_index]) + new_block + list(lines[match_index + m:])
    return out, len(replace_lines) - m


def splice_line_endings(
    ends: Sequence[str],
    match_index: int,
    removed: int,
    added: int,
    eol: str,
) -> List[str]:
    """
    Terminators to go with the buffer :func:`apply_replacement` produced.

    Replacement lines reuse the terminators of the lines they overwrite, the
    last one always taking the terminator of the last removed line. Lines
    beyond what was removed get ``eol``. Lines outside the replaced region
    keep theirs untouched.
    """
    head = list(ends[:match_index])
    old = list(ends[match_index:match_index + removed])
    tail = list(ends[match_index + removed:])
    if added:
        new = [old[k] if k < len(old) - 1 else eol for k in range(added - 1)]
        new.append(old[-1] if old else eol)
    else:
        new = []
        # Deleted the unterminated last line: the new last line loses its break.
        if not tail and head and old and old[-1] == "":
            head[-1] = ""
    return head + new + tail

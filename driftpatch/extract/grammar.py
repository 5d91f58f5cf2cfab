# driftpatch/extract/grammar.py
"""
SEARCH/REPLACE diff grammar.

    <<<<<<< SEARCH
    :start_line:<int>        (optional, any order)
    :end_line:<int>          (optional, any order)
    -------                  (optional)
    <search payload>
    =======
    <replace payload>
    >>>>>>> REPLACE

Markers are recognised after trimming surrounding whitespace. A payload line
that must contain literal marker text is escaped with one leading backslash.
"""
from __future__ import annotations

import enum
import re
from typing import List

from ..errors.grammar import GrammarError
from ..models.blocks import ReplacementBlock
from ..utils.text import split_lines

__all__ = [
    "SEARCH_MARKER",
    "SEPARATOR_MARKER",
    "REPLACE_MARKER",
    "validate_marker_sequence",
    "parse_replacement_blocks",
    "unescape_markers",
    "has_line_numbers",
    "strip_line_numbers",
]

SEARCH_MARKER = "<<<<<<< SEARCH"
SEPARATOR_MARKER = "======="
REPLACE_MARKER = ">>>>>>> REPLACE"
DASH_SEPARATOR = "-------"

_DIRECTIVE_RE = re.compile(r"^:(start_line|end_line):\s*(\d+)$")
_ESCAPED_MARKER_RE = re.compile(r"^\\(<<<<<<<|=======|>>>>>>>)")
_LINE_NUMBER_RE = re.compile(r"^\d+\|")


class _State(enum.Enum):
    START = "start"
    AFTER_SEARCH = "after_search"
    AFTER_SEPARATOR = "after_separator"


# state -> marker that moves us forward, and the state it moves to
_TRANSITIONS = {
    _State.START: (SEARCH_MARKER, _State.AFTER_SEARCH),
    _State.AFTER_SEARCH: (SEPARATOR_MARKER, _State.AFTER_SEPARATOR),
    _State.AFTER_SEPARATOR: (REPLACE_MARKER, _State.START),
}
_MARKERS = (SEARCH_MARKER, SEPARATOR_MARKER, REPLACE_MARKER)


def validate_marker_sequence(diff_content: str) -> None:
    """
    Check that markers form complete SEARCH, SEPARATOR, REPLACE triples.

    Non-marker lines are payload and ignored here.

    Raises:
        GrammarError: on the first out-of-order marker, or if the text ends
            inside a block.
    """
    state = _State.START
    last_marker_line = 0
    for line_num, line in enumerate(split_lines(diff_content), 1):
        marker = line.strip()
        if marker not in _MARKERS:
            continue
        expected, next_state = _TRANSITIONS[state]
        if marker != expected:
            raise GrammarError(
                f"Unexpected '{marker}' at line {line_num}. Expected '{expected}'.",
                line_number=line_num,
                found=marker,
                expected=expected,
            )
        state = next_state
        last_marker_line = line_num

    if state is not _State.START:
        expected, _ = _TRANSITIONS[state]
        raise GrammarError(
            f"Unexpected end of sequence: Expected '{expected}' after line "
            f"{last_marker_line} was not found.",
            line_number=last_marker_line,
            expected=expected,
        )


def parse_replacement_blocks(diff_content: str) -> List[ReplacementBlock]:
    """
    Parse every block of an already-validated diff, in document order.

    Payload lines are kept verbatim, blank lines included. Line hints are
    returned as written; correcting them for earlier edits is the caller's job.
    """
    blocks: List[ReplacementBlock] = []
    lines = split_lines(diff_content)
    n = len(lines)
    i = 0
    while i < n:
        if lines[i].strip() != SEARCH_MARKER:
            i += 1
            continue
        i += 1

        hints: dict[str, int] = {}
        while i < n:
            m = _DIRECTIVE_RE.match(lines[i].strip())
            if not m:
                break
            hints[m.group(1)] = int(m.group(2))
            i += 1

        if i < n and lines[i].strip() == DASH_SEPARATOR:
            i += 1

        search_lines: List[str] = []
        while i < n and lines[i].strip() != SEPARATOR_MARKER:
            search_lines.append(lines[i])
            i += 1
        i += 1

        replace_lines: List[str] = []
        while i < n and lines[i].strip() != REPLACE_MARKER:
            replace_lines.append(lines[i])
            i += 1
        i += 1

        blocks.append(ReplacementBlock(
            search_lines=search_lines,
            replace_lines=replace_lines,
            start_line=hints.get("start_line"),
            end_line=hints.get("end_line"),
        ))
    return blocks


def unescape_markers(lines: List[str]) -> List[str]:
    """Drop exactly one leading backslash in front of literal marker text."""
    return [_ESCAPED_MARKER_RE.sub(r"\1", ln) for ln in lines]


def has_line_numbers(lines: List[str]) -> bool:
    """True when every non-blank line starts with a ``<digits>|`` prefix."""
    return all(_LINE_NUMBER_RE.match(ln) for ln in lines if ln.strip())


def strip_line_numbers(lines: List[str]) -> List[str]:
    return [_LINE_NUMBER_RE.sub("", ln) for ln in lines]

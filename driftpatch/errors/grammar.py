from __future__ import annotations


class DiffError(Exception):
    """Base class for every error raised by driftpatch."""


class GrammarError(DiffError):
    """
    Marker sequencing in the diff text is malformed.

    Fatal for the whole call: nothing is applied when this is raised.
    ``line_number`` is 1-based. When the input ends inside a block it is the
    line of the last marker seen.
    """

    def __init__(self, message: str, *, line_number: int | None = None,
                 found: str | None = None, expected: str | None = None):
        super().__init__(message)
        self.line_number = line_number
        self.found = found
        self.expected = expected

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ReplacementBlock:
    """One SEARCH/REPLACE block as written in the diff text."""

    search_lines: List[str]
    replace_lines: List[str]
    start_line: Optional[int] = None  # 1-based, relative to the pre-edit document
    end_line: Optional[int] = None


@dataclass(frozen=True)
class MatchCandidate:
    """A buffer position and how well the search lines score there."""

    index: int  # 0-based start of the slice
    score: float


@dataclass
class BlockOutcome:
    """What happened to a single block during apply_diff."""

    block_index: int
    applied: bool
    match_index: Optional[int] = None
    score: Optional[float] = None
    error: Optional[str] = None
    start_line: Optional[int] = None


@dataclass
class ApplyResult:
    """
    Result of one apply_diff call.

    ``success`` is true when at least one block applied; ``content`` is only
    set in that case. Inspect ``outcomes`` for partial failures.
    """

    success: bool
    content: Optional[str] = None
    outcomes: List[BlockOutcome] = field(default_factory=list)

    @property
    def applied_count(self) -> int:
        return sum(1 for o in self.outcomes if o.applied)

    @property
    def failed_outcomes(self) -> List[BlockOutcome]:
        return [o for o in self.outcomes if not o.applied]


@dataclass
class DiffBlock:
    """A fenced region of LLM output holding SEARCH/REPLACE blocks."""

    diff: str
    start: int
    end: int
    language: str = "plain"
    file_path: Optional[str] = None

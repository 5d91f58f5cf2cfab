from __future__ import annotations

from typing import TYPE_CHECKING

from .grammar import DiffError

if TYPE_CHECKING:
    from ..models.blocks import MatchCandidate


class BlockError(DiffError):
    """A single replacement block could not be applied. Siblings are unaffected."""


class BlockSkipped(BlockError):
    """The block has empty search content or would not change anything."""


class NoMatchFound(BlockError):
    """No slice of the buffer scored high enough for the block's search lines."""

    def __init__(self, message: str, *, best: MatchCandidate | None = None):
        super().__init__(message)
        self.best = best

    @property
    def best_score(self) -> float | None:
        return self.best.score if self.best is not None else None

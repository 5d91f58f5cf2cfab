from .grammar import DiffError, GrammarError
from .patch import BlockError, BlockSkipped, NoMatchFound
from .path import PathViolation

__all__ = [
    "DiffError",
    "GrammarError",
    "BlockError",
    "BlockSkipped",
    "NoMatchFound",
    "PathViolation",
]

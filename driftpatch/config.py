# driftpatch/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_FUZZY_THRESHOLD = 1.0
DEFAULT_BUFFER_LINES = 40
DEFAULT_MIN_WINDOW_SCORE = 0.5


@dataclass(frozen=True)
class EngineConfig:
    """
    Per-engine matching configuration.

    Args:
        fuzzy_threshold: Score the slice at the hinted line must reach to be
            accepted without a window scan. 1.0 means exact (after normalization).
        buffer_lines: Lines scanned on each side of the hint before falling back
            to the whole buffer.
        min_window_score: Score the best window or whole-buffer candidate must
            reach to be accepted.
        max_unanchored_lines: Skip the whole-buffer fallback for buffers longer
            than this. ``None`` never skips it.
    """

    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD
    buffer_lines: int = DEFAULT_BUFFER_LINES
    min_window_score: float = DEFAULT_MIN_WINDOW_SCORE
    max_unanchored_lines: Optional[int] = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.fuzzy_threshold <= 1.0:
            raise ValueError("fuzzy_threshold must be within [0, 1]")
        if not 0.0 <= self.min_window_score <= 1.0:
            raise ValueError("min_window_score must be within [0, 1]")
        if self.buffer_lines < 0:
            raise ValueError("buffer_lines must be >= 0")
        if self.max_unanchored_lines is not None and self.max_unanchored_lines < 0:
            raise ValueError("max_unanchored_lines must be >= 0 or None")

# driftpatch/commit/locate.py
from __future__ import annotations

import logging
from typing import Optional, Sequence

from .._logging import resolve_logger
from ..config import EngineConfig
from ..errors.patch import NoMatchFound
from ..models.blocks import MatchCandidate
from ..similarity import chunk_similarity

__all__ = ["FuzzyLocator", "middle_out_search"]


def middle_out_search(
    lines: Sequence[str],
    search_lines: Sequence[str],
    lo: int,
    hi: int,
) -> Optional[MatchCandidate]:
    """
    Score every full-length slice starting in [lo, hi - len(search_lines)],
    working outward from the middle of the window: mid, mid + 1, mid - 1,
    mid + 2, and so on.

    Returns the best candidate, or None when no slice fits or none scores above 0.
    Ties go to the candidate scored first, so on equal distance the right-hand
    one wins.
    """
    m = len(search_lines)
    lo = max(0, lo)
    hi = min(len(lines), hi)
    last = hi - m
    if m == 0 or last < lo:
        return None

    best: Optional[MatchCandidate] = None

    def consider(pos: int) -> None:
        nonlocal best
        score = chunk_similarity(lines[pos:pos + m], search_lines)
        if score > (best.score if best is not None else 0.0):
            best = MatchCandidate(index=pos, score=score)

    left = (lo + hi) // 2
    right = left + 1
    while left >= lo or right <= last:
        if left >= lo:
            # mid can sit past the last full slice when the search is long
            if left <= last:
                consider(left)
            left -= 1
        if right <= last:
            consider(right)
            right += 1
    return best


class FuzzyLocator:
    """
    Find where a block's search lines sit in the current buffer.

    Anchored lookups first try the exact hinted position, then scan a window
    of ``buffer_lines`` around it. Unanchored lookups scan the whole buffer.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        *,
        logger: logging.Logger | None = None,
        log: bool = False,
    ):
        self.config = config or EngineConfig()
        self._log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    def locate(
        self,
        lines: Sequence[str],
        search_lines: Sequence[str],
        start_line: int | None = None,
        *,
        anchored: bool | None = None,
    ) -> MatchCandidate:
        """
        Return the accepted match for ``search_lines``.

        Args:
            lines: Current buffer.
            search_lines: Lines to look for.
            start_line: 1-based hint, already corrected for earlier edits.
            anchored: Defaults to True when a hint is given.

        Raises:
            NoMatchFound: nothing reached the acceptance score. ``best`` holds the
                highest-scoring candidate seen, if any.
            ValueError: anchored lookup requested without a hint.
        """
        if anchored is None:
            anchored = start_line is not None
        if anchored and start_line is None:
            raise ValueError("anchored lookup needs a start_line")

        cfg = self.config
        m = len(search_lines)

        if anchored:
            exact = start_line - 1
            if 0 <= exact and exact + m <= len(lines):
                score = chunk_similarity(lines[exact:exact + m], search_lines)
                self._log.debug("exact slice at line %d scored %.3f", start_line, score)
                if score >= cfg.fuzzy_threshold:
                    return MatchCandidate(index=exact, score=score)
            lo = exact - cfg.buffer_lines
            hi = exact + m + cfg.buffer_lines
        else:
            lo, hi = 0, len(lines)

        best = middle_out_search(lines, search_lines, lo, hi)
        mode = "anchored" if anchored else "unanchored"
        if best is not None and best.score >= cfg.min_window_score:
            self._log.debug(
                "%s scan accepted index %d (score %.3f)", mode, best.index, best.score
            )
            return best

        if best is None:
            msg = f"No match found ({mode} search, no candidate scored above 0)"
        else:
            msg = (
                f"No sufficiently similar match found ({mode} search, "
                f"best score {best.score:.2f} at line {best.index + 1}, "
                f"needed {cfg.min_window_score:.2f})"
            )
        self._log.debug(msg)
        raise NoMatchFound(msg, best=best)

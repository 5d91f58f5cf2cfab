# driftpatch/commit/patch.py
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .._logging import resolve_logger
from ..config import EngineConfig
from ..errors.patch import BlockError, BlockSkipped, NoMatchFound
from ..extract.grammar import (
    has_line_numbers,
    parse_replacement_blocks,
    strip_line_numbers,
    unescape_markers,
    validate_marker_sequence,
)
from ..models.blocks import ApplyResult, BlockOutcome, MatchCandidate, ReplacementBlock
from ..similarity import normalize
from ..utils.text import detect_eol, join_lines, split_lines_keepends
from .locate import FuzzyLocator
from .splice import apply_replacement, splice_line_endings

__all__ = ["DiffEngine", "apply_diff"]


def _prepare_payloads(block: ReplacementBlock) -> Tuple[List[str], List[str]]:
    """Unescape marker text and drop ``<digits>|`` scaffolding when every line carries it."""
    search = unescape_markers(block.search_lines)
    replace = unescape_markers(block.replace_lines)
    if any(ln.strip() for ln in search) and has_line_numbers(search) and has_line_numbers(replace):
        search = strip_line_numbers(search)
        replace = strip_line_numbers(replace)
    return search, replace


def _check_applicable(search: List[str], replace: List[str]) -> None:
    if not any(ln.strip() for ln in search):
        raise BlockSkipped("Empty search content is not allowed")
    if normalize("\n".join(search)) == normalize("\n".join(replace)):
        raise BlockSkipped("Search and replace content are identical")


class DiffEngine:
    """
    Apply SEARCH/REPLACE diffs to drifted content.

    Engines are cheap and hold only their configuration, so differently tuned
    engines can be used side by side.

    Example:
        >>> engine = DiffEngine(EngineConfig(buffer_lines=20))
        >>> result = engine.apply_diff(text, diff)
        >>> result.success, result.failed_outcomes
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
        self._locator = FuzzyLocator(self.config, logger=logger, log=log)

    @property
    def fuzzy_threshold(self) -> float:
        return self.config.fuzzy_threshold

    @property
    def buffer_lines(self) -> int:
        return self.config.buffer_lines

    def _locate(self, lines: List[str], search: List[str], hint: Optional[int]) -> MatchCandidate:
        if hint is None:
            return self._locator.locate(lines, search, anchored=False)
        try:
            return self._locator.locate(lines, search, hint, anchored=True)
        except NoMatchFound as anchored_err:
            guard = self.config.max_unanchored_lines
            if guard is not None and len(lines) > guard:
                self._log.debug(
                    "  buffer has %d lines (> %d), not retrying unanchored", len(lines), guard
                )
                raise
            self._log.debug("  anchored search failed, retrying unanchored")
            try:
                return self._locator.locate(lines, search, anchored=False)
            except NoMatchFound as err:
                best = max(
                    (c for c in (anchored_err.best, err.best) if c is not None),
                    key=lambda c: c.score,
                    default=None,
                )
                raise NoMatchFound(str(err), best=best) from None

    def apply_diff(self, original_content: str, diff_content: str) -> ApplyResult:
        """
        Apply every block of ``diff_content`` to ``original_content`` in order.

        Each applied block shifts later blocks' line hints by its net line-count
        change. A block that cannot be applied is recorded in ``outcomes`` and
        the rest still run.

        Raises:
            GrammarError: the markers are malformed; nothing is applied.
        """
        log = self._log
        validate_marker_sequence(diff_content)
        blocks = parse_replacement_blocks(diff_content)
        log.debug("parsed %d replacement block(s)", len(blocks))

        eol = detect_eol(original_content)
        lines, ends = split_lines_keepends(original_content)

        delta = 0
        outcomes: List[BlockOutcome] = []
        for i, block in enumerate(blocks):
            hint = block.start_line + delta if block.start_line is not None else None
            log.debug("block #%d: hint=%s delta=%d", i + 1, block.start_line, delta)
            try:
                search, replace = _prepare_payloads(block)
                _check_applicable(search, replace)
                match = self._locate(lines, search, hint)
            except BlockError as e:
                best = e.best if isinstance(e, NoMatchFound) else None
                log.debug("  block #%d not applied: %s", i + 1, e)
                outcomes.append(BlockOutcome(
                    block_index=i,
                    applied=False,
                    match_index=best.index if best is not None else None,
                    score=best.score if best is not None else None,
                    error=str(e),
                    start_line=block.start_line,
                ))
                continue

            lines, block_delta = apply_replacement(lines, match.index, search, replace)
            ends = splice_line_endings(ends, match.index, len(search), len(replace), eol)
            delta += block_delta
            log.debug(
                "  block #%d applied at line %d (score %.3f, delta %+d)",
                i + 1, match.index + 1, match.score, block_delta,
            )
            outcomes.append(BlockOutcome(
                block_index=i,
                applied=True,
                match_index=match.index,
                score=match.score,
                start_line=block.start_line,
            ))

        result = ApplyResult(success=False, outcomes=outcomes)
        if result.applied_count:
            result.success = True
            result.content = join_lines(lines, ends)
        log.debug("applied %d of %d block(s)", result.applied_count, len(blocks))
        return result


def apply_diff(
    original_content: str,
    diff_content: str,
    *,
    fuzzy_threshold: float = 1.0,
    buffer_lines: int = 40,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> ApplyResult:
    """One-shot helper around :class:`DiffEngine`."""
    config = EngineConfig(fuzzy_threshold=fuzzy_threshold, buffer_lines=buffer_lines)
    return DiffEngine(config, logger=logger, log=log).apply_diff(original_content, diff_content)

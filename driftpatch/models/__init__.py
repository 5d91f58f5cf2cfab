from .blocks import ApplyResult, BlockOutcome, DiffBlock, MatchCandidate, ReplacementBlock

__all__ = ["ReplacementBlock", "MatchCandidate", "BlockOutcome", "ApplyResult", "DiffBlock"]

from .commit import (
    DiffEngine,
    FilePatch,
    FuzzyLocator,
    PatchSummary,
    apply_diff,
    apply_replacement,
    patch_file,
    patch_files,
)
from .config import EngineConfig
from .errors import (
    BlockError,
    BlockSkipped,
    DiffError,
    GrammarError,
    NoMatchFound,
    PathViolation,
)
from .extract import (
    extract_search_replace_blocks,
    parse_replacement_blocks,
    validate_marker_sequence,
)
from .models import ApplyResult, BlockOutcome, DiffBlock, MatchCandidate, ReplacementBlock
from .similarity import chunk_similarity, edit_distance, normalize, similarity

__all__ = [
    "apply_diff",
    "DiffEngine",
    "EngineConfig",
    "FuzzyLocator",
    "apply_replacement",
    "patch_file",
    "patch_files",
    "FilePatch",
    "PatchSummary",
    "validate_marker_sequence",
    "parse_replacement_blocks",
    "extract_search_replace_blocks",
    "normalize",
    "similarity",
    "edit_distance",
    "chunk_similarity",
    "ReplacementBlock",
    "MatchCandidate",
    "BlockOutcome",
    "ApplyResult",
    "DiffBlock",
    "DiffError",
    "GrammarError",
    "BlockError",
    "BlockSkipped",
    "NoMatchFound",
    "PathViolation",
]

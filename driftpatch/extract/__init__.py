from .fenced import extract_search_replace_blocks
from .grammar import (
    parse_replacement_blocks,
    strip_line_numbers,
    unescape_markers,
    validate_marker_sequence,
)

__all__ = [
    "extract_search_replace_blocks",
    "parse_replacement_blocks",
    "validate_marker_sequence",
    "unescape_markers",
    "strip_line_numbers",
]

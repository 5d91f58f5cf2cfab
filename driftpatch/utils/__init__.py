from .text import (
    detect_eol,
    join_lines,
    leading_ws,
    split_lines,
    split_lines_keepends,
    strip_think_blocks,
)

__all__ = [
    "detect_eol",
    "join_lines",
    "leading_ws",
    "split_lines",
    "split_lines_keepends",
    "strip_think_blocks",
]

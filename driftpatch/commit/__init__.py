from .core import FilePatch, PatchSummary, patch_file, patch_files
from .locate import FuzzyLocator
from .patch import DiffEngine, apply_diff
from .splice import apply_replacement

__all__ = [
    "DiffEngine",
    "apply_diff",
    "FuzzyLocator",
    "apply_replacement",
    "FilePatch",
    "PatchSummary",
    "patch_file",
    "patch_files",
]

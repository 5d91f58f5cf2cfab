from .grammar import DiffError


class PathViolation(DiffError):
    """A patch target resolved outside of its base directory."""

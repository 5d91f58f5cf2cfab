# conftest.py - shared fixtures
import pytest

from driftpatch import DiffEngine


@pytest.fixture
def engine():
    return DiffEngine()


@pytest.fixture
def make_diff():
    """Build a single SEARCH/REPLACE block from line lists."""

    def _make(search, replace, start_line=None, end_line=None):
        out = ["<<<<<<< SEARCH"]
        if start_line is not None:
            out.append(f":start_line:{start_line}")
        if end_line is not None:
            out.append(f":end_line:{end_line}")
        if start_line is not None or end_line is not None:
            out.append("-------")
        out.extend(search)
        out.append("=======")
        out.extend(replace)
        out.append(">>>>>>> REPLACE")
        return "\n".join(out)

    return _make

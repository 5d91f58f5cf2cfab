# driftpatch/similarity.py
"""
Line similarity scoring used to locate search blocks in drifted content.

Scores are in [0, 1]: 1.0 for lines that are equal after normalization,
otherwise one minus the normalized Levenshtein distance.
"""
from __future__ import annotations

from typing import Sequence

__all__ = ["normalize", "edit_distance", "similarity", "chunk_similarity"]


_QUOTE_TABLE = str.maketrans({
    "‘": "'", "’": "'", "‚": "'", "‛": "'",
    "“": '"', "”": '"', "„": '"', "‟": '"',
})


def normalize(s: str) -> str:
    """Map smart quotes to ASCII quotes and trim surrounding whitespace."""
    return s.translate(_QUOTE_TABLE).strip()


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance over characters (code points, not bytes).

    Keeps two rows sized by the shorter input.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    prev = list(range(len(b) + 1))
    curr = [0] * (len(b) + 1)
    for i, ca in enumerate(a, 1):
        curr[0] = i
        for j, cb in enumerate(b, 1):
            cost = 0 if ca == cb else 1
            curr[j] = min(
                curr[j - 1] + 1,     # insertion
                prev[j] + 1,         # deletion
                prev[j - 1] + cost,  # substitution
            )
        prev, curr = curr, prev
    return prev[len(b)]


def similarity(a: str, b: str) -> float:
    """Score how closely line ``a`` (from the file) matches line ``b`` (from the search)."""
    na, nb = normalize(a), normalize(b)
    if na == nb:
        return 1.0
    if not nb:
        return 0.0
    dist = edit_distance(na, nb)
    return 1.0 - dist / max(len(na), len(nb))


def chunk_similarity(original_slice: Sequence[str], search_lines: Sequence[str]) -> float:
    """Mean per-line similarity of a same-length buffer slice and search block."""
    n = len(search_lines)
    if n == 0:
        return 0.0
    total = 0.0
    for orig, search in zip(original_slice, search_lines):
        total += similarity(orig, search)
    return total / n

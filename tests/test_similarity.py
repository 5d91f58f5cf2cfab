"""
Tests for driftpatch.similarity: normalization, Levenshtein distance,
per-line and per-chunk scoring.
"""
import pytest

from driftpatch.similarity import chunk_similarity, edit_distance, normalize, similarity

SAMPLES = ["", "a", "   indented", "def foo():", "héllo wörld", "日本語のテキスト", "\t\ttabs"]


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------


def test_normalize_straightens_smart_quotes():
    assert normalize("  “hi” ‘x’ ") == "\"hi\" 'x'"


def test_normalize_trims_surrounding_whitespace_only():
    assert normalize("\t  a  b \n") == "a  b"


# ---------------------------------------------------------------------------
# edit_distance
# ---------------------------------------------------------------------------


def test_edit_distance_classic_example():
    assert edit_distance("kitten", "sitting") == 3


@pytest.mark.parametrize("a,b", [("kitten", "sitting"), ("", "abc"), ("flaw", "lawn"), ("abc", "abc")])
def test_edit_distance_is_symmetric(a, b):
    assert edit_distance(a, b) == edit_distance(b, a)


@pytest.mark.parametrize("s", SAMPLES)
def test_edit_distance_zero_on_equal_inputs(s):
    assert edit_distance(s, s) == 0


@pytest.mark.parametrize("s", SAMPLES)
def test_edit_distance_from_empty_is_length(s):
    assert edit_distance("", s) == len(s)


def test_edit_distance_counts_characters_not_bytes():
    assert edit_distance("héllo", "hello") == 1
    assert edit_distance("日本語", "日本") == 1


# ---------------------------------------------------------------------------
# similarity
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("s", SAMPLES)
def test_similarity_of_identical_strings_is_one(s):
    assert similarity(s, s) == 1.0


@pytest.mark.parametrize(
    "a,b",
    [("abc", "xyz"), ("", "abc"), ("abc", ""), ("short", "a much longer line"), ("日本", "日本語")],
)
def test_similarity_is_bounded(a, b):
    assert 0.0 <= similarity(a, b) <= 1.0


def test_similarity_single_substitution():
    assert similarity("abc", "abd") == pytest.approx(2 / 3)


def test_similarity_ignores_indentation_and_quote_style():
    assert similarity("    print(“hi”)", 'print("hi")') == 1.0


def test_similarity_empty_search_scores_zero():
    assert similarity("x", "") == 0.0


def test_similarity_whitespace_only_matches_empty():
    assert similarity("   ", "") == 1.0


def test_similarity_is_case_sensitive():
    assert similarity("B", "b") == 0.0


# ---------------------------------------------------------------------------
# chunk_similarity
# ---------------------------------------------------------------------------


def test_chunk_similarity_identical_sequences():
    lines = ["def foo():", "    return 1", ""]
    assert chunk_similarity(lines, list(lines)) == 1.0


def test_chunk_similarity_is_mean_of_lines():
    assert chunk_similarity(["abc", "xyz"], ["abc", "xyq"]) == pytest.approx((1 + 2 / 3) / 2)


def test_chunk_similarity_empty_search_is_zero():
    assert chunk_similarity(["anything"], []) == 0.0

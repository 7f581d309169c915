import pytest

from fuzzscore import SCORER_REGISTRY, InvalidArgument, partial_ratio, ratio

S1 = "new york mets"
S1A = "new york mets"
S2 = "new YORK mets"
S3 = "the wonderful new york mets"
S4 = "new york mets vs atlanta braves"
S5 = "atlanta braves vs new york mets"


def test_perfect_match():
    assert ratio(S1, S1A) == 100


def test_case_sensitive():
    # "new " and " mets" match, "york"/"YORK" share nothing: 200 * 9 / 26
    assert ratio(S1, S2) == 69


def test_empty_strings():
    assert ratio("", "") == 100
    assert ratio("", "abc") == 0
    assert ratio("abc", "") == 0


def test_simple_fraction():
    # "abc" matched out of 8 characters
    assert ratio("abcd", "abce") == 75


def test_prefix_of_longer_string():
    assert ratio(S1, S4) == 59


def test_half_rounds_down():
    # one matched character out of 16 -> 12.5
    assert ratio("a", "a" + "x" * 14) == 12


def test_symmetric():
    pairs = [(S1, S2), (S1, S3), (S4, S5), ("abxcd", "abcd"), ("", "x")]
    for a, b in pairs:
        assert ratio(a, b) == ratio(b, a)


def test_deterministic_and_in_range():
    for a, b in [(S3, S4), (S4, S5), (S2, S5)]:
        first = ratio(a, b)
        assert first == ratio(a, b)
        assert 0 <= first <= 100
        assert isinstance(first, int)


def test_partial_ratio_containment():
    assert partial_ratio(S1, S3) == 100
    assert partial_ratio(S3, S1) == 100


def test_partial_ratio_empty_shorter_is_zero():
    assert partial_ratio("", "abc") == 0
    assert partial_ratio("abc", "") == 0
    assert partial_ratio("", "") == 0


def test_partial_ratio_no_common_characters():
    assert partial_ratio("xyz", "abc") == 0


def test_partial_ratio_identical():
    assert partial_ratio("abc", "abc") == 100


def test_none_rejected():
    with pytest.raises(InvalidArgument):
        ratio(None, "abc")
    with pytest.raises(InvalidArgument):
        partial_ratio("abc", 42)


def test_registered():
    assert SCORER_REGISTRY["ratio"] is ratio
    assert SCORER_REGISTRY["partial_ratio"] is partial_ratio

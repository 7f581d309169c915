import pytest

from fuzzscore import (
    SCORER_REGISTRY,
    InvalidArgument,
    partial_token_set_ratio,
    partial_token_sort_ratio,
    ratio,
    token_set_ratio,
    token_sort_ratio,
)

S1 = "new york mets"
S2 = "new YORK mets"
S4 = "new york mets vs atlanta braves"
S5 = "atlanta braves vs new york mets"
S6 = "new york mets - atlanta braves"


def test_token_sort_ignores_order_and_case():
    assert token_sort_ratio(S1, "mets new YORK") == 100
    assert token_sort_ratio(S4, S5) == 100


def test_token_sort_empty():
    assert token_sort_ratio("", "") == 100


def test_token_sort_without_processing_is_case_sensitive():
    assert token_sort_ratio(S1, S2, full_process=False) < 100


def test_token_set_tolerates_extra_tokens():
    score = token_set_ratio(S1, S4)
    assert score >= 90
    assert score > ratio(S1, S4)


def test_token_set_collapses_duplicates():
    assert token_set_ratio("mets mets new york", S1) == 100


def test_token_set_punctuation_and_order():
    assert token_set_ratio(S6, S5) == 100


def test_token_set_empty_sides():
    assert token_set_ratio("", "") == 100
    assert token_set_ratio("", S1) == 0
    assert token_set_ratio(S1, "--") == 0


def test_token_set_unrelated_low():
    assert token_set_ratio("valvula esfera", "cable ethernet cat6") < 50


def test_partial_token_variants():
    assert partial_token_sort_ratio(S4, S5) == 100
    assert partial_token_set_ratio(S1, S4) == 100


def test_bad_input_rejected():
    with pytest.raises(InvalidArgument):
        token_set_ratio(S1, None)
    with pytest.raises(InvalidArgument):
        token_sort_ratio(b"new york", S1)


def test_registered():
    for key in (
        "token_sort_ratio",
        "token_set_ratio",
        "partial_token_sort_ratio",
        "partial_token_set_ratio",
    ):
        assert key in SCORER_REGISTRY
    f = SCORER_REGISTRY["token_set_ratio"]
    assert f("valvula acero inoxidable", "inoxidable acero valvula") == 100

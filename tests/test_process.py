import logging

import pytest

from fuzzscore import InvalidArgument, process

BASEBALL = [
    "new york mets vs chicago cubs",
    "chicago cubs vs chicago white sox",
    "philladelphia phillies vs atlanta braves",
    "braves vs mets",
]


def test_extract_one_finds_best_choice():
    best = process.extract_one("new york mets at chicago cubs", BASEBALL)
    assert best[0] == BASEBALL[0]
    assert best[1] >= 90


def test_extract_limit_and_order():
    results = process.extract("new york mets at atlanta braves", BASEBALL, limit=2)
    assert len(results) == 2
    assert results[0][1] >= results[1][1]


def test_extract_all_with_none_limit_skips_none_choices():
    results = process.extract("braves", BASEBALL + [None], limit=None)
    assert len(results) == len(BASEBALL)


def test_extract_dict_returns_keys():
    choices = {"a": "new york mets", "b": "atlanta braves"}
    best = process.extract_one("mets new york", choices, scorer="token_sort_ratio")
    assert best == ("new york mets", 100, "a")


def test_extract_one_cutoff():
    assert process.extract_one("zzz", BASEBALL, score_cutoff=100) is None


def test_scorer_by_unknown_name():
    with pytest.raises(InvalidArgument):
        process.extract_one("mets", BASEBALL, scorer="nope")


def test_processor_none_keeps_raw_strings():
    best = process.extract_one("new YORK mets", ["new york mets"], processor=None, scorer="ratio")
    assert best[1] < 100


def test_empty_query_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="fuzzscore.process"):
        results = process.extract("???", BASEBALL)
    assert all(score == 0 for _, score in results)
    assert "empty string" in caplog.text


def test_dedupe_collapses_variants():
    contains_dupes = [
        "Frodo Baggins",
        "Tom Sawyer",
        "Bilbo Baggin",
        "Samuel L. Jackson",
        "F. Baggins",
        "Frody Baggins",
        "Bilbo Baggins",
    ]
    result = process.dedupe(contains_dupes)
    assert len(result) < len(contains_dupes)
    assert "Tom Sawyer" in result


def test_dedupe_without_duplicates_returns_input():
    items = ["abc", "xyz"]
    assert process.dedupe(items) is items

from __future__ import annotations

from bpq_helper.matching import find_matches, match_fields, match_status
from bpq_helper.models import MatchStatus, RiddleRecord

PORTRAITS = [
    RiddleRecord(region_id="X", text="a portrait of a sleeping cat"),
    RiddleRecord(region_id="Y", text="a portrait of a sleeping dog"),
]


def test_single_record_prefix_matching() -> None:
    corpus = [RiddleRecord(region_id="A", text="the cold stare lady")]

    assert find_matches("cold", corpus) == {"A"}
    assert find_matches("col", corpus) == {"A"}
    assert find_matches("coldx", corpus) == frozenset()
    assert find_matches("lady cold", corpus) == {"A"}


def test_blank_query_matches_nothing() -> None:
    assert find_matches("", PORTRAITS) == frozenset()
    assert find_matches("   ", PORTRAITS) == frozenset()
    assert find_matches("?!", PORTRAITS) == frozenset()


def test_query_token_must_prefix_a_word_not_a_substring() -> None:
    assert find_matches("trait", PORTRAITS) == frozenset()
    assert find_matches("sleep", PORTRAITS) == {"X", "Y"}


def test_every_query_token_must_match() -> None:
    assert find_matches("portrait", PORTRAITS) == {"X", "Y"}
    assert find_matches("portrait cat", PORTRAITS) == {"X"}
    assert find_matches("cat dog", PORTRAITS) == frozenset()


def test_query_is_normalized_before_matching() -> None:
    corpus = [RiddleRecord(region_id="A", text="I shan't stop ticking")]

    assert find_matches("SHAN'T", corpus) == {"A"}
    assert find_matches("shant stop", corpus) == {"A"}
    assert find_matches("shan", corpus) == {"A"}


def test_duplicate_regions_collapse() -> None:
    corpus = [
        RiddleRecord(region_id="A", text="a silver tray"),
        RiddleRecord(region_id="A", text="a silver spoon"),
        RiddleRecord(region_id="B", text="a golden key"),
    ]

    assert find_matches("silver", corpus) == {"A"}
    assert find_matches("a", corpus) == {"A", "B"}


def test_adding_a_token_never_widens_the_result() -> None:
    corpus = PORTRAITS + [
        RiddleRecord(region_id="Z", text="the sleeping butler keeps a cat"),
        RiddleRecord(region_id="W", text="portraits of dogs line the hall"),
    ]
    pairs = [
        ("portrait", "portrait cat"),
        ("sleep", "sleep dog"),
        ("a", "a cat"),
        ("cat", "cat butler"),
        ("p", "p h"),
    ]
    for broad, narrow in pairs:
        assert find_matches(narrow, corpus) <= find_matches(broad, corpus)


def test_match_fields_keeps_field_order() -> None:
    results = match_fields(["portrait cat", "", "dog", "portrait"], PORTRAITS)

    assert results == [{"X"}, frozenset(), {"Y"}, {"X", "Y"}]


def test_match_status_reports_ambiguity() -> None:
    assert match_status("", frozenset()) == MatchStatus.EMPTY
    assert match_status("  ", frozenset()) == MatchStatus.EMPTY
    assert match_status("zebra", frozenset()) == MatchStatus.NONE
    assert match_status("portrait cat", frozenset({"X"})) == MatchStatus.UNIQUE
    assert match_status("portrait", frozenset({"X", "Y"})) == MatchStatus.AMBIGUOUS

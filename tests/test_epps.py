from __future__ import annotations

from psikogram_core.epps import (
    CONSISTENCY_PAIRS,
    TRAITS,
    consistency_count,
    raw_totals,
    score_epps,
    split_choices,
    weighted_score,
)

from tests.conftest import build_choices

ALL_A_WEIGHTED = {
    "ach": 8, "def": 14, "ord": 10, "exh": 12, "aut": 13, "aff": 10, "int": 9, "suc": 11,
    "dom": 12, "aba": 8, "nur": 9, "chg": 10, "end": 9, "het": 14, "agg": 11,
}


def test_all_a_scores_direct_sets_only():
    res = score_epps(build_choices("A"))
    assert res.raw == {t: 14 for t in TRAITS}
    assert res.weighted == ALL_A_WEIGHTED
    assert res.consistency == 15


def test_all_b_scores_complement_sets_only():
    res = score_epps(build_choices("B"))
    assert res.raw == {t: 14 for t in TRAITS}
    assert res.consistency == 15


def test_empty_sequence_scores_zero_raw():
    res = score_epps([])
    assert res.raw == {t: 0 for t in TRAITS}
    assert res.consistency == 0
    # tables with a 0 threshold still award their floor weight
    assert res.weighted["ord"] == 1 and res.weighted["het"] == 5 and res.weighted["agg"] == 1
    assert res.weighted["aff"] == 0 and res.weighted["ach"] == 0


def test_short_sequence_is_padded_with_no_match():
    res = score_epps(["A"] * 10)
    assert res.consistency == 0
    assert res.raw["ach"] == 1  # position 5 only
    assert res.raw["def"] == 1  # position 1 only


def test_item_counts_for_different_traits_by_choice():
    blank = build_choices("", at={1: "A"})
    assert raw_totals(blank)["def"] == 1 and raw_totals(blank)["ach"] == 0
    blank = build_choices("", at={1: "B"})
    assert raw_totals(blank)["ach"] == 1 and raw_totals(blank)["def"] == 0


def test_consistency_counts_matching_non_empty_pairs():
    a, b = CONSISTENCY_PAIRS[0]
    c, d = CONSISTENCY_PAIRS[1]
    e, _ = CONSISTENCY_PAIRS[2]
    # a blank partner never matches
    seq = build_choices("", at={a: "A", b: "A", c: "A", d: "B", e: "B"})
    assert consistency_count(seq) == 1
    assert consistency_count(build_choices("A", at={a: "B"})) == 14
    assert consistency_count(build_choices("B", at={b: "A", d: "A"})) == 13


def test_weighted_score_threshold_scan():
    assert weighted_score(28, "ach") == 20
    assert weighted_score(100, "ach") == 20
    assert weighted_score(14, "ach") == 8
    assert weighted_score(0, "aff") == 0
    assert weighted_score(1, "aff") == 0
    assert weighted_score(3, "aff") == 1
    assert weighted_score(-1, "het") == 0
    assert weighted_score(10, "unknown") == 0


def test_split_choices_trims_tokens():
    assert split_choices(" A ; B;;A ") == ["A", "B", "", "A"]
    assert split_choices(None) == [""]

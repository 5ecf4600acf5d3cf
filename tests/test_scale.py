from __future__ import annotations

import pytest

from psikogram_core.scale import CRITERIA, MetricKind, criteria_for, to_scale


@pytest.mark.parametrize(
    "value,kind,expected",
    [
        (60, MetricKind.IQ, 1),
        (61, MetricKind.IQ, 2),
        (137, MetricKind.IQ, 9),
        (139, MetricKind.IQ, 9),
        (140, MetricKind.IQ, 10),
        (0, MetricKind.CFIT, 1),
        (8, MetricKind.CFIT, 6),
        (8.5, MetricKind.CFIT, 7),
        (12, MetricKind.CFIT, 10),
        (25, MetricKind.TKD3, 5),
        (12, MetricKind.TKD6, 4),
        (14, MetricKind.ACH, 7),
        (19, "ach", 10),
    ],
)
def test_boundaries(value, kind, expected):
    assert to_scale(value, kind) == expected


@pytest.mark.parametrize("kind", sorted(CRITERIA))
def test_scale_is_monotone_and_bounded(kind):
    prev = 0
    for value in range(-5, 200):
        score = to_scale(value, kind)
        assert 1 <= score <= 10
        assert score >= prev
        prev = score


def test_unknown_kind_uses_personality_table():
    assert criteria_for("whatever") is CRITERIA["ach"]
    assert to_scale(5, "whatever") == to_scale(5, MetricKind.ACH) == 3


def test_nan_falls_through_to_top_band():
    assert to_scale(float("nan"), MetricKind.IQ) == 10

from __future__ import annotations

import json
import math

from psikogram_core.catalog import ASPECTS, INTERESTS, TRAITS, interest_by_code, resolve_report
from psikogram_core.engine import TRAIT_KEYS, compute_psikogram
from psikogram_core.export import _to_basic, to_json
from psikogram_core.rmib import CATEGORIES
from psikogram_core.scale import MetricKind

from tests.conftest import build_manual, build_record


def test_tables_cover_every_slot_and_category():
    assert [t.key for t in TRAITS] == list(TRAIT_KEYS)
    assert len(ASPECTS) == len(TRAIT_KEYS)
    assert sorted(c.code for c in INTERESTS) == sorted(CATEGORIES)
    assert [a.section for a in ASPECTS if a.section] == ["KEMAMPUAN", "KEPRIBADIAN", "SIKAP KERJA"]


def test_interest_lookup():
    assert interest_by_code("MED").name == "MEDICAL"
    assert interest_by_code("SOS. WERV").name == "SOCIAL SERVICE"
    assert interest_by_code("nope") is None


def test_resolve_fills_defaults_from_rankings(jane_record):
    res = compute_psikogram(jane_record)
    report = resolve_report(res)
    assert [a["score"] for a in report["aspects"]] == list(res.scores)
    assert report["strengths"] == [TRAITS[0].strength, TRAITS[2].strength, TRAITS[3].strength]
    assert report["weaknesses"] == [TRAITS[5].weakness, TRAITS[6].weakness, TRAITS[4].weakness]
    assert report["recommendations"][0] == TRAITS[5].recommendation
    assert [i["name"] for i in report["interests"]] == ["OUTDOOR", "MECHANICAL", "COMPUTATIONAL"]


def test_resolve_prefers_overrides():
    manual = build_manual("", "", "Teliti", ";Gugup", "", "Kedokteran;;", ";Seni rupa")
    report = resolve_report(compute_psikogram(build_record(manual=manual)))
    assert report["strengths"][0] == "Teliti"
    assert report["strengths"][1] == TRAITS[2].strength
    assert report["weaknesses"][1] == "Gugup"
    first, second, _ = report["interests"]
    assert first["name"] == "Kedokteran"
    assert first["description"] == interest_by_code("OUT").description
    assert second == {"code": "MECH", "name": "MECHANICAL", "description": "Seni rupa"}


def test_to_json_is_plain_data(jane_record):
    payload = to_json(compute_psikogram(jane_record))
    text = json.dumps(payload)
    assert json.loads(text) == payload
    assert payload["identity"]["name"] == "Jane Doe"
    assert payload["ranked_desc"][0] == {"value": 9, "index": 0}
    assert payload["interests"][0]["code"] == "OUT"
    assert "resolved" not in payload


def test_to_json_resolved_block(jane_record):
    payload = to_json(compute_psikogram(jane_record), resolve=True)
    assert payload["resolved"]["aspects"][0]["name"] == "Kemampuan Umum"
    assert len(payload["resolved"]["strengths"]) == 3
    json.dumps(payload)


def test_to_basic_edge_values():
    assert _to_basic(math.nan) is None
    assert _to_basic(MetricKind.IQ) == "iq"
    assert _to_basic(INTERESTS[0])["code"] == "OUT"
    assert _to_basic({1: (2, 3)}) == {"1": [2, 3]}

from __future__ import annotations

import json
import logging

from psikogram_core.parsers import (
    KeyedObject,
    LegacyDelimited,
    detect_format,
    group_cell,
    parse_aptitude,
    parse_float,
    parse_groups,
    parse_int,
    parse_inventory,
)
from psikogram_core.types import RawRecord

from tests.conftest import build_aptitude_legacy, build_inventory_legacy


def test_groups_split_and_trim():
    groups = parse_groups(" Jane ; ; 20 |second;row")
    assert groups == [["Jane", "", "20"], ["second", "row"]]
    assert parse_groups(None) == [[""]]
    assert group_cell(groups, 0, 2) == "20"
    assert group_cell(groups, 0, 9) == ""
    assert group_cell(groups, 5, 0) == ""


def test_detect_format_variants():
    assert isinstance(detect_format("1|2|3"), LegacyDelimited)
    keyed = detect_format('  {"cfit1": "4"}  ')
    assert isinstance(keyed, KeyedObject) and keyed.values == {"cfit1": "4"}
    assert detect_format(None) == LegacyDelimited(("",))


def test_broken_keyed_object_falls_back_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="psikogram_core.parsers"):
        parsed = detect_format('{"cfit1": "4"', "aptitude")
    assert parsed == LegacyDelimited(('{"cfit1": "4"',))
    assert any("aptitude" in rec.getMessage() for rec in caplog.records)

    vec = parse_aptitude('{"cfit1": 4|5')
    assert vec.slots[0] == '{"cfit1": 4'
    assert vec.slots[1] == "5"


def test_keyed_aptitude_matches_legacy_encoding():
    values = {"cfit1": "10", "cfit2": "8", "cfit3": "9", "cfit4": "7", "tkd3": "25", "tkd6": "12"}
    keyed = parse_aptitude(json.dumps(values))
    legacy = parse_aptitude(build_aptitude_legacy(**values))
    assert keyed == legacy
    assert len(keyed.slots) == 20
    assert (keyed.cfit1, keyed.tkd3, keyed.tkd6) == ("10", "25", "12")


def test_keyed_aptitude_missing_keys_default_to_zero():
    vec = parse_aptitude('{"cfit1": "12", "cfit2": "8"}')
    assert len(vec.slots) == 20
    for idx in (2, 3, 15, 17):
        assert vec.slots[idx] == "0"
    assert vec.slots[4] == "" and vec.slots[19] == ""
    assert parse_int(vec.cfit1) + parse_int(vec.cfit2) + parse_int(vec.cfit3) + parse_int(vec.cfit4) == 20


def test_keyed_numbers_and_falsy_values():
    vec = parse_aptitude('{"cfit1": 12, "cfit2": 8.0, "cfit3": 0, "cfit4": null, "tkd3": 25.5}')
    assert vec.cfit1 == "12"
    assert vec.cfit2 == "8"
    assert vec.cfit3 == "0" and vec.cfit4 == "0"
    assert vec.tkd3 == "25.5"


def test_legacy_vectors_are_padded_and_capped():
    short = parse_aptitude("1|2")
    assert len(short.slots) == 20 and short.slots[:3] == ("1", "2", "")
    long = parse_aptitude("|".join(str(i) for i in range(30)))
    assert len(long.slots) == 20 and long.slots[-1] == "19"
    assert parse_inventory("").slots == ("",) * 10


def test_keyed_inventory_matches_legacy_encoding():
    choices = ["A", "B"] * 3
    blocks = [f"{i};{i + 1}" for i in range(8)]
    payload = {"epps": ";".join(choices)}
    payload.update({f"rmib{i + 1}": b for i, b in enumerate(blocks)})
    keyed = parse_inventory(json.dumps(payload))
    legacy = parse_inventory(build_inventory_legacy(choices, blocks))
    assert keyed == legacy
    assert keyed.slots[1] == ""
    assert parse_inventory('{"epps": "A;B"}').slot("rmib8") == ""


def test_number_parsing_never_raises():
    assert parse_int("12abc") == 12
    assert parse_int(" 7.9") == 7
    assert parse_int("-3") == -3
    assert parse_int("abc") == 0
    assert parse_int("") == 0
    assert parse_int(None) == 0
    assert parse_float("25.5x") == 25.5
    assert parse_float(".5") == 0.5
    assert parse_float("n/a") == 0.0
    assert parse_float(float("nan")) == 0.0


def test_raw_record_accepts_legacy_field_ids():
    rec = RawRecord.from_mapping({"x_02": "Jane", "x_05": "1|2", "inventory": "A", "x_06": "B", "x_10": None})
    assert rec == RawRecord(identity="Jane", aptitude="1|2", inventory="A", manual_overrides="")


def test_deeply_nested_keyed_object_falls_back(caplog):
    text = '{"x":' + "[" * 100000 + "]" * 100000 + "}"
    with caplog.at_level(logging.WARNING, logger="psikogram_core.parsers"):
        vec = parse_inventory(text)
    assert vec.epps == text
    assert any("inventory" in rec.getMessage() for rec in caplog.records)


def test_oversized_keyed_number_falls_back():
    vec = parse_aptitude('{"cfit1": ' + "9" * 5000 + "}")
    assert vec.cfit1.startswith('{"cfit1"')
    assert parse_int(vec.cfit1) == 0


def test_huge_and_non_ascii_numbers_parse_to_zero():
    assert parse_int("9" * 5000) == 0
    assert parse_float("1e999") == 0.0
    assert parse_float(10 ** 400) == 0.0
    assert parse_int("١٢") == 0
    assert parse_float("١٢.5") == 0.0

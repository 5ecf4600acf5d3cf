"""Decoders for the four raw intake fields.

Identity and manual-override blocks are always pipe/semicolon delimited.
Aptitude and inventory blocks arrive either in the legacy pipe format or as a
JSON object keyed by slot name; both decode into the same fixed-size vector.
Nothing in here raises on bad input: a broken JSON object is logged and the
same text is read again as the legacy format.
"""
from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .config import (
    APTITUDE_KEYED_DEFAULT,
    APTITUDE_SIZE,
    APTITUDE_SLOTS,
    FIELD_DELIM,
    INVENTORY_KEYED_DEFAULT,
    INVENTORY_SIZE,
    INVENTORY_SLOTS,
    KEYED_OPEN,
    PART_DELIM,
)
from .types import AptitudeVector, InventoryVector

__all__ = [
    "LegacyDelimited",
    "KeyedObject",
    "detect_format",
    "parse_groups",
    "group_cell",
    "parse_aptitude",
    "parse_inventory",
    "parse_int",
    "parse_float",
]

log = logging.getLogger(__name__)

_INT_RX = re.compile(r"^\s*([+-]?\d+)", re.ASCII)
_FLOAT_RX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


@dataclass(frozen=True)
class LegacyDelimited:
    parts: Tuple[str, ...]


@dataclass(frozen=True)
class KeyedObject:
    values: Dict[str, Any]


ParsedField = Union[LegacyDelimited, KeyedObject]


def parse_int(text: Any) -> int:
    """Leading-integer parse: ``"12abc"`` -> 12, ``"7.9"`` -> 7, garbage -> 0."""

    if isinstance(text, bool):
        return 0
    if isinstance(text, int):
        return text
    if isinstance(text, float):
        return int(text) if math.isfinite(text) else 0
    m = _INT_RX.match(str(text or ""))
    if not m:
        return 0
    try:
        return int(m.group(1))
    except ValueError:
        # digit runs past the interpreter's int conversion limit
        return 0


def parse_float(text: Any) -> float:
    """Leading-decimal parse; blank or non-numeric text gives 0.0."""

    if isinstance(text, bool):
        return 0.0
    if isinstance(text, (int, float)):
        try:
            val = float(text)
        except OverflowError:
            return 0.0
        return val if math.isfinite(val) else 0.0
    m = _FLOAT_RX.match(str(text or ""))
    val = float(m.group(1)) if m else 0.0
    return val if math.isfinite(val) else 0.0


def parse_groups(raw: Optional[str]) -> List[List[str]]:
    """Split ``"a;b|c;d"`` into ``[["a", "b"], ["c", "d"]]`` with trimmed cells."""

    parts = (raw or "").split(PART_DELIM)
    return [[cell.strip() for cell in part.split(FIELD_DELIM)] for part in parts]


def group_cell(groups: List[List[str]], group: int, index: int) -> str:
    if group >= len(groups):
        return ""
    row = groups[group]
    return row[index] if index < len(row) else ""


def _split_legacy(text: str) -> LegacyDelimited:
    return LegacyDelimited(tuple(p.strip() for p in text.split(PART_DELIM)))


def _decode_keyed(text: str, field: str) -> Optional[KeyedObject]:
    try:
        obj = json.loads(text)
    except (ValueError, RecursionError) as exc:
        log.warning("%s: keyed object invalid, reading as delimited (%s)", field, exc)
        return None
    if not isinstance(obj, dict):
        log.warning("%s: keyed payload is %s, reading as delimited", field, type(obj).__name__)
        return None
    return KeyedObject(obj)


def detect_format(raw: Optional[str], field: str = "field") -> ParsedField:
    """Decide once per field which wire format ``raw`` carries."""

    text = (raw or "").strip()
    if text.startswith(KEYED_OPEN):
        keyed = _decode_keyed(text, field)
        if keyed is not None:
            return keyed
    return _split_legacy(text)


def _keyed_text(value: Any, default: str) -> str:
    if not value:
        return default
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (str, int, float)):
        return str(value)
    log.debug("keyed value of type %s ignored", type(value).__name__)
    return default


def _from_keyed(obj: KeyedObject, slots: Mapping[str, int], size: int, default: str) -> List[str]:
    out = [""] * size
    for name, idx in slots.items():
        out[idx] = _keyed_text(obj.values.get(name), default)
    return out


def parse_aptitude(raw: Optional[str]) -> AptitudeVector:
    parsed = detect_format(raw, "aptitude")
    if isinstance(parsed, KeyedObject):
        return AptitudeVector(tuple(_from_keyed(parsed, APTITUDE_SLOTS, APTITUDE_SIZE, APTITUDE_KEYED_DEFAULT)))
    return AptitudeVector(parsed.parts)


def parse_inventory(raw: Optional[str]) -> InventoryVector:
    parsed = detect_format(raw, "inventory")
    if isinstance(parsed, KeyedObject):
        return InventoryVector(tuple(_from_keyed(parsed, INVENTORY_SLOTS, INVENTORY_SIZE, INVENTORY_KEYED_DEFAULT)))
    return InventoryVector(parsed.parts)

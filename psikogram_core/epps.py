"""EPPS forced-choice scoring.

Each trait's raw total counts ``A`` answers over its own item positions and
``B`` answers over a second, cross-referenced set of positions. Raw totals go
through a per-trait threshold table into weighted scores. Fifteen items are
asked twice; the number of identical answers is the consistency count.
All tables below are the instrument's scoring key and must not be edited.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Tuple

from .config import FIELD_DELIM
from .types import PreferenceResult

__all__ = [
    "TRAITS",
    "DIRECT_SETS",
    "COMPLEMENT_SETS",
    "CONSISTENCY_PAIRS",
    "WS_TABLES",
    "split_choices",
    "raw_totals",
    "weighted_score",
    "consistency_count",
    "score_epps",
]

TRAITS: Tuple[str, ...] = (
    "ach", "def", "ord", "exh", "aut", "aff", "int", "suc",
    "dom", "aba", "nur", "chg", "end", "het", "agg",
)

# positions counted when answered "A"
DIRECT_SETS = MappingProxyType({
    "ach": (5, 10, 15, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70),
    "def": (1, 11, 16, 21, 26, 31, 36, 41, 46, 51, 56, 61, 66, 71),
    "ord": (2, 7, 17, 22, 27, 32, 37, 42, 47, 52, 57, 62, 67, 72),
    "exh": (3, 8, 13, 23, 28, 33, 38, 43, 48, 53, 58, 63, 68, 73),
    "aut": (4, 9, 14, 19, 29, 34, 39, 44, 49, 54, 59, 64, 69, 74),
    "aff": (75, 80, 85, 90, 95, 105, 110, 115, 120, 125, 130, 135, 140, 145),
    "int": (76, 81, 86, 91, 96, 101, 111, 116, 121, 126, 131, 136, 141, 146),
    "suc": (77, 82, 87, 92, 97, 102, 107, 117, 122, 127, 132, 137, 142, 147),
    "dom": (78, 83, 88, 93, 98, 103, 108, 113, 123, 128, 133, 138, 143, 148),
    "aba": (79, 84, 89, 94, 99, 104, 109, 114, 119, 129, 134, 139, 144, 149),
    "nur": (150, 155, 160, 165, 170, 175, 180, 185, 190, 195, 205, 210, 215, 220),
    "chg": (151, 156, 161, 166, 171, 176, 181, 186, 191, 196, 201, 211, 216, 221),
    "end": (152, 157, 162, 167, 172, 177, 182, 187, 192, 197, 202, 207, 217, 222),
    "het": (153, 158, 163, 168, 173, 178, 183, 188, 193, 198, 203, 208, 213, 223),
    "agg": (154, 159, 164, 169, 174, 179, 184, 189, 194, 199, 204, 209, 214, 219),
})

# positions counted when answered "B"
COMPLEMENT_SETS = MappingProxyType({
    "ach": (1, 2, 3, 4, 75, 76, 77, 78, 79, 150, 151, 152, 153, 154),
    "def": (5, 7, 8, 9, 80, 81, 82, 83, 84, 155, 156, 157, 158, 159),
    "ord": (10, 11, 13, 14, 85, 86, 87, 88, 89, 160, 161, 162, 163, 164),
    "exh": (15, 16, 17, 19, 90, 91, 92, 93, 94, 165, 166, 167, 168, 169),
    "aut": (20, 21, 22, 23, 95, 96, 97, 98, 99, 170, 171, 172, 173, 174),
    "aff": (25, 26, 27, 28, 29, 101, 102, 103, 104, 175, 176, 177, 178, 179),
    "int": (30, 31, 32, 33, 34, 105, 107, 108, 109, 180, 181, 182, 183, 184),
    "suc": (35, 36, 37, 38, 39, 110, 111, 113, 114, 185, 186, 187, 188, 189),
    "dom": (40, 41, 42, 43, 44, 115, 116, 117, 119, 190, 191, 192, 193, 194),
    "aba": (45, 46, 47, 48, 49, 120, 121, 122, 123, 195, 196, 197, 198, 199),
    "nur": (50, 51, 52, 53, 54, 125, 126, 127, 128, 129, 201, 202, 203, 204),
    "chg": (55, 56, 57, 58, 59, 130, 131, 132, 133, 134, 205, 207, 208, 209),
    "end": (60, 61, 62, 63, 64, 135, 136, 137, 138, 139, 210, 211, 213, 214),
    "het": (65, 66, 67, 68, 69, 140, 141, 142, 143, 144, 215, 216, 217, 219),
    "agg": (70, 71, 72, 73, 74, 145, 146, 147, 148, 149, 220, 221, 222, 223),
})

CONSISTENCY_PAIRS: Tuple[Tuple[int, int], ...] = (
    (0, 150), (6, 156), (12, 162), (18, 168), (24, 174),
    (25, 100), (31, 106), (37, 112), (43, 118), (49, 124),
    (50, 200), (56, 206), (62, 212), (68, 218), (74, 224),
)


def _table(pairs: Mapping[int, int]) -> Tuple[Tuple[int, int], ...]:
    # thresholds highest first
    return tuple(sorted(pairs.items(), key=lambda kv: kv[0], reverse=True))


WS_TABLES = MappingProxyType({
    "ach": _table({28: 20, 27: 20, 26: 19, 25: 18, 24: 17, 23: 16, 22: 16, 21: 15, 20: 14, 19: 13, 18: 12, 17: 11, 16: 10, 15: 9, 14: 8, 13: 7, 12: 6, 11: 5, 10: 5, 9: 4, 8: 3, 7: 2, 6: 1, 5: 0, 4: 0, 3: 0, 2: 0, 1: 0, 0: 0}),
    "def": _table({22: 20, 21: 19, 20: 18, 19: 18, 18: 18, 17: 17, 16: 16, 15: 15, 14: 14, 13: 13, 12: 11, 11: 11, 10: 10, 9: 9, 8: 8, 7: 7, 6: 6, 5: 5, 4: 3, 3: 3, 2: 2, 1: 1, 0: 0}),
    "ord": _table({28: 20, 27: 19, 26: 19, 25: 18, 24: 17, 23: 17, 22: 16, 21: 15, 20: 15, 19: 14, 18: 13, 17: 13, 16: 12, 15: 11, 14: 10, 13: 9, 12: 9, 11: 8, 10: 7, 9: 7, 8: 6, 7: 5, 6: 5, 5: 4, 4: 3, 3: 3, 2: 2, 1: 1, 0: 1}),
    "exh": _table({24: 20, 23: 19, 22: 18, 21: 18, 20: 17, 19: 16, 18: 15, 17: 15, 16: 14, 15: 13, 14: 12, 13: 11, 12: 10, 11: 9, 10: 8, 9: 7, 8: 7, 7: 6, 6: 5, 5: 4, 4: 3, 3: 3, 2: 2, 1: 1, 0: 0}),
    "aut": _table({21: 20, 20: 19, 19: 18, 18: 17, 17: 16, 16: 15, 15: 14, 14: 13, 13: 12, 12: 11, 11: 10, 10: 9, 9: 8, 8: 7, 7: 6, 6: 5, 5: 4, 4: 3, 3: 2, 2: 2, 1: 1, 0: 0}),
    "aff": _table({26: 20, 25: 19, 24: 19, 23: 18, 22: 17, 21: 16, 20: 15, 19: 14, 18: 14, 17: 13, 16: 12, 15: 11, 14: 10, 13: 9, 12: 8, 11: 8, 10: 7, 9: 6, 8: 5, 7: 4, 6: 3, 5: 3, 4: 2, 3: 1, 2: 1, 1: 0}),
    "int": _table({28: 20, 27: 20, 26: 19, 25: 18, 24: 17, 23: 17, 22: 16, 21: 15, 20: 14, 19: 14, 18: 13, 17: 12, 16: 11, 15: 10, 14: 9, 13: 8, 12: 7, 11: 7, 10: 6, 9: 5, 8: 4, 7: 4, 6: 3, 5: 2, 4: 1, 3: 1, 2: 0, 1: 0}),
    "suc": _table({27: 20, 26: 19, 25: 19, 24: 18, 23: 17, 22: 17, 21: 16, 20: 15, 19: 15, 18: 14, 17: 13, 16: 13, 15: 12, 14: 11, 13: 10, 12: 9, 11: 9, 10: 8, 9: 7, 8: 7, 7: 6, 6: 5, 5: 4, 4: 4, 3: 3, 2: 2, 1: 1, 0: 1}),
    "dom": _table({25: 20, 24: 20, 23: 19, 22: 18, 21: 17, 20: 17, 19: 16, 18: 15, 17: 14, 16: 14, 15: 13, 14: 12, 13: 11, 12: 10, 11: 9, 10: 8, 9: 8, 8: 7, 7: 6, 6: 5, 5: 5, 4: 4, 3: 3, 2: 2, 1: 1, 0: 0}),
    "aba": _table({29: 20, 28: 19, 27: 18, 26: 18, 25: 17, 24: 16, 23: 15, 22: 15, 21: 14, 20: 13, 19: 13, 18: 12, 17: 11, 16: 10, 15: 9, 14: 8, 13: 8, 12: 7, 11: 6, 10: 5, 9: 5, 8: 4, 7: 3, 6: 2, 5: 2, 4: 1, 3: 0, 2: 0, 1: 0}),
    "nur": _table({30: 20, 29: 19, 28: 18, 27: 18, 26: 17, 25: 16, 24: 16, 23: 15, 22: 14, 21: 14, 20: 13, 19: 12, 18: 12, 17: 11, 16: 10, 15: 9, 14: 9, 13: 8, 12: 7, 11: 7, 10: 6, 9: 5, 8: 5, 7: 4, 6: 3, 5: 3, 4: 2, 3: 1, 2: 1, 1: 0}),
    "chg": _table({27: 20, 26: 19, 25: 18, 24: 18, 23: 17, 22: 16, 21: 16, 20: 15, 19: 14, 18: 13, 17: 13, 16: 12, 15: 11, 14: 10, 13: 9, 12: 9, 11: 8, 10: 7, 9: 6, 8: 6, 7: 5, 6: 4, 5: 3, 4: 3, 3: 2, 2: 1, 1: 1, 0: 0}),
    "end": _table({30: 20, 29: 19, 28: 18, 27: 17, 26: 17, 25: 16, 24: 16, 23: 15, 22: 14, 21: 14, 20: 13, 19: 13, 18: 12, 17: 12, 16: 11, 15: 10, 14: 9, 13: 9, 12: 8, 11: 7, 10: 7, 9: 6, 8: 6, 7: 5, 6: 4, 5: 4, 4: 3, 3: 3, 2: 2, 1: 1, 0: 1}),
    "het": _table({26: 20, 25: 19, 24: 19, 23: 18, 22: 18, 21: 17, 20: 17, 19: 16, 18: 16, 17: 15, 16: 15, 15: 14, 14: 14, 13: 13, 12: 12, 11: 12, 10: 11, 9: 11, 8: 10, 7: 9, 6: 9, 5: 8, 4: 8, 3: 7, 2: 7, 1: 6, 0: 5}),
    "agg": _table({27: 20, 26: 19, 25: 18, 24: 18, 23: 17, 22: 16, 21: 16, 20: 15, 19: 14, 18: 14, 17: 13, 16: 12, 15: 12, 14: 11, 13: 10, 12: 9, 11: 9, 10: 8, 9: 7, 8: 7, 7: 6, 6: 5, 5: 5, 4: 4, 3: 3, 2: 3, 1: 2, 0: 1}),
})


def split_choices(text: Optional[str]) -> list[str]:
    return [tok.strip() for tok in (text or "").split(FIELD_DELIM)]


def _at(choices: Sequence[str], idx: int) -> str:
    return choices[idx] if idx < len(choices) else ""


def _count(choices: Sequence[str], positions: Tuple[int, ...], token: str) -> int:
    return sum(1 for i in positions if _at(choices, i) == token)


def raw_totals(choices: Sequence[str]) -> Dict[str, int]:
    return {
        t: _count(choices, DIRECT_SETS[t], "A") + _count(choices, COMPLEMENT_SETS[t], "B")
        for t in TRAITS
    }


def weighted_score(raw: int, trait: str) -> int:
    table = WS_TABLES.get(trait)
    if not table:
        return 0
    for threshold, weight in table:
        if raw >= threshold:
            return weight
    return 0


def consistency_count(choices: Sequence[str]) -> int:
    n = 0
    for a, b in CONSISTENCY_PAIRS:
        va, vb = _at(choices, a), _at(choices, b)
        if va and vb and va == vb:
            n += 1
    return n


def score_epps(choices: Sequence[str]) -> PreferenceResult:
    """Score a 225-item answer sequence (0-indexed, ``"A"``/``"B"``/blank)."""

    raw = raw_totals(choices)
    weighted = {t: weighted_score(raw[t], t) for t in TRAITS}
    return PreferenceResult(raw=raw, weighted=weighted, consistency=consistency_count(choices))

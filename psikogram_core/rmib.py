
from __future__ import annotations
from types import MappingProxyType
from typing import Dict, List, Sequence
from .config import FIELD_DELIM, RMIB_BLOCKS
from .parsers import parse_int
from .types import InventoryVector

# category code -> 1-based positions in the 96-item rating sequence
CATEGORY_POSITIONS = MappingProxyType({
    "OUT":       (1, 24, 35, 46, 57, 68, 79, 90),
    "MECH":      (2, 13, 36, 47, 58, 69, 80, 91),
    "COMP":      (3, 14, 25, 48, 59, 70, 81, 92),
    "ACIE":      (4, 15, 26, 37, 60, 71, 82, 93),
    "PERS":      (5, 16, 27, 38, 49, 72, 83, 94),
    "AESTH":     (6, 17, 28, 39, 50, 61, 84, 95),
    "LITE":      (7, 18, 29, 40, 51, 62, 73, 96),
    "MUS":       (8, 19, 30, 41, 52, 63, 74, 85),
    "SOS. WERV": (9, 20, 31, 42, 53, 64, 75, 86),
    "CLER":      (10, 21, 32, 43, 54, 65, 76, 87),
    "PRAC":      (11, 22, 33, 44, 55, 66, 77, 88),
    "MED":       (12, 23, 34, 45, 56, 67, 78, 89),
})
CATEGORIES = tuple(CATEGORY_POSITIONS)


def rating_sequence(inventory: InventoryVector) -> List[str]:
    # empty blocks are dropped before joining, so later blocks move up
    blocks = [inventory.slot(name) for name in RMIB_BLOCKS]
    joined = (FIELD_DELIM + " ").join(b for b in blocks if b)
    return [tok.strip() for tok in joined.split(FIELD_DELIM)]


def score_rmib(ratings: Sequence[str]) -> Dict[str, int]:
    def v(pos: int) -> int:
        return parse_int(ratings[pos - 1]) if pos <= len(ratings) else 0
    return {code: sum(v(p) for p in positions) for code, positions in CATEGORY_POSITIONS.items()}

# psikogram_core/scale.py
from __future__ import annotations
import math
from enum import Enum
from types import MappingProxyType
from typing import Tuple, Union


class MetricKind(str, Enum):
    IQ = "iq"
    CFIT = "cfit"
    TKD3 = "tkd3"      # verbal reasoning
    TKD6 = "tkd6"      # numeric reasoning
    ACH = "ach"        # any EPPS weighted score


_INF = math.inf
CRITERIA = MappingProxyType({
    MetricKind.IQ.value:   ((60, 1), (69, 2), (79, 3), (89, 4), (99, 5), (109, 6), (119, 7), (129, 8), (139, 9), (_INF, 10)),
    MetricKind.CFIT.value: ((2, 1), (3, 2), (4, 3), (5, 4), (7, 5), (8, 6), (9, 7), (10, 8), (11, 9), (_INF, 10)),
    MetricKind.TKD3.value: ((12, 1), (16, 2), (20, 3), (23, 4), (27, 5), (31, 6), (35, 7), (38, 8), (40, 9), (_INF, 10)),
    MetricKind.TKD6.value: ((2, 1), (5, 2), (9, 3), (12, 4), (16, 5), (19, 6), (23, 7), (26, 8), (30, 9), (_INF, 10)),
    MetricKind.ACH.value:  ((2, 1), (4, 2), (6, 3), (8, 4), (10, 5), (12, 6), (14, 7), (16, 8), (18, 9), (_INF, 10)),
})


def criteria_for(kind: Union[MetricKind, str]) -> Tuple[Tuple[float, int], ...]:
    key = kind.value if isinstance(kind, MetricKind) else str(kind)
    return CRITERIA.get(key, CRITERIA[MetricKind.ACH.value])


def to_scale(value: float, kind: Union[MetricKind, str]) -> int:
    """Map a raw metric onto the 1-10 band; unknown kinds use the EPPS table."""
    for ceiling, score in criteria_for(kind):
        if value <= ceiling:
            return score
    return 10

"""JSON-safe views of pipeline results."""
from __future__ import annotations

import dataclasses
import math
from enum import Enum
from typing import Any, Dict

from .catalog import resolve_report
from .types import ResultRecord


def _to_basic(x: Any) -> Any:
    if x is None or isinstance(x, (bool, int, str)):
        return x
    if isinstance(x, float):
        return x if math.isfinite(x) else None
    if isinstance(x, Enum):
        return _to_basic(x.value)
    if dataclasses.is_dataclass(x) and not isinstance(x, type):
        return {f.name: _to_basic(getattr(x, f.name)) for f in dataclasses.fields(x)}
    if hasattr(x, "_asdict"):
        return _to_basic(x._asdict())
    if isinstance(x, dict):
        return {str(k): _to_basic(v) for k, v in x.items()}
    if isinstance(x, (list, tuple, set, frozenset)):
        return [_to_basic(v) for v in x]
    return str(x)


def to_json(result: ResultRecord, resolve: bool = False) -> Dict[str, Any]:
    """Return a JSON-safe payload for ``result``.

    With ``resolve`` the default report texts are attached under ``resolved``.
    """

    payload: Dict[str, Any] = _to_basic(result)
    if resolve:
        payload["resolved"] = _to_basic(resolve_report(result))
    return payload


__all__ = ["to_json"]

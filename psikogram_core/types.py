
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple, Any
from .config import (
    APTITUDE_SIZE,
    APTITUDE_SLOTS,
    INVENTORY_SIZE,
    INVENTORY_SLOTS,
    LEGACY_FIELD_KEYS,
)


def _fixed(values, size: int) -> Tuple[str, ...]:
    out = ["" if v is None else str(v) for v in list(values)[:size]]
    out.extend([""] * (size - len(out)))
    return tuple(out)


@dataclass(frozen=True)
class RawRecord:
    identity: str = ""
    aptitude: str = ""
    inventory: str = ""
    manual_overrides: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawRecord":
        """Build a record from named keys or the legacy ``x_02``/``x_05``/``x_06``/``x_10`` ids.

        Named keys win when both spellings are present; ``None`` becomes ``""``.
        """
        kw: Dict[str, str] = {}
        for name, legacy in LEGACY_FIELD_KEYS.items():
            val = data.get(name)
            if val is None:
                val = data.get(legacy)
            kw[name] = "" if val is None else str(val)
        return cls(**kw)


@dataclass(frozen=True)
class AptitudeVector:
    slots: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "slots", _fixed(self.slots, APTITUDE_SIZE))

    def slot(self, name: str) -> str:
        return self.slots[APTITUDE_SLOTS[name]]

    @property
    def cfit1(self) -> str: return self.slot("cfit1")
    @property
    def cfit2(self) -> str: return self.slot("cfit2")
    @property
    def cfit3(self) -> str: return self.slot("cfit3")
    @property
    def cfit4(self) -> str: return self.slot("cfit4")
    @property
    def tkd3(self) -> str: return self.slot("tkd3")
    @property
    def tkd6(self) -> str: return self.slot("tkd6")


@dataclass(frozen=True)
class InventoryVector:
    slots: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "slots", _fixed(self.slots, INVENTORY_SIZE))

    def slot(self, name: str) -> str:
        return self.slots[INVENTORY_SLOTS[name]]

    @property
    def epps(self) -> str: return self.slot("epps")


@dataclass(frozen=True)
class PreferenceResult:
    raw: Dict[str, int]
    weighted: Dict[str, int]
    consistency: int


@dataclass(frozen=True)
class Identity:
    name: str = ""
    sex: str = ""
    age: str = ""
    test_date: str = ""
    signed_date: str = ""


@dataclass(frozen=True)
class RankedScore:
    value: int
    index: int


@dataclass(frozen=True)
class InterestEntry:
    code: str
    name_override: Optional[str] = None
    description_override: Optional[str] = None


@dataclass(frozen=True)
class ResultRecord:
    identity: Identity
    iq: int
    scores: Tuple[int, ...]
    consistency: int
    ranked_desc: Tuple[RankedScore, ...]
    ranked_asc: Tuple[RankedScore, ...]
    interests: Tuple[InterestEntry, ...] = ()
    strengths: Tuple[Optional[str], ...] = (None, None, None)
    weaknesses: Tuple[Optional[str], ...] = (None, None, None)
    recommendations: Tuple[Optional[str], ...] = (None, None, None)

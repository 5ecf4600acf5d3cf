from __future__ import annotations

import pytest

from psikogram_core.config import APTITUDE_SIZE, APTITUDE_SLOTS, EPPS_ITEMS, RMIB_ITEMS
from psikogram_core.types import RawRecord


def build_choices(fill: str = "A", *, length: int = EPPS_ITEMS, at: dict[int, str] | None = None) -> list[str]:
    """A 0-indexed EPPS answer list, ``fill`` everywhere except the ``at`` positions."""

    seq = [fill] * length
    for idx, tok in (at or {}).items():
        seq[idx] = tok
    return seq


def build_ratings(fill: str = "5", *, at: dict[int, str] | None = None) -> list[str]:
    """A 96-item RMIB rating list; ``at`` keys are 1-based positions."""

    seq = [fill] * RMIB_ITEMS
    for pos, tok in (at or {}).items():
        seq[pos - 1] = tok
    return seq


def build_rating_blocks(ratings: list[str]) -> list[str]:
    """Split 96 ratings into the eight ``;``-joined rmib blocks."""

    return [";".join(ratings[i:i + 12]) for i in range(0, len(ratings), 12)]


def build_aptitude_legacy(**named: str) -> str:
    slots = [""] * APTITUDE_SIZE
    for name, val in named.items():
        slots[APTITUDE_SLOTS[name]] = val
    return "|".join(slots)


def build_inventory_legacy(choices: list[str], blocks: list[str]) -> str:
    return "|".join([";".join(choices), ""] + list(blocks))


def build_manual(*groups: str) -> str:
    return "|".join(groups)


def build_record(
    *,
    identity: str = "Jane Doe;;;;20;;;;F",
    aptitude: str | None = None,
    choices: list[str] | None = None,
    ratings: list[str] | None = None,
    manual: str = "",
) -> RawRecord:
    if aptitude is None:
        aptitude = build_aptitude_legacy(cfit1="10", cfit2="8", cfit3="9", cfit4="7", tkd3="25", tkd6="12")
    inventory = build_inventory_legacy(
        choices if choices is not None else build_choices("A"),
        build_rating_blocks(ratings if ratings is not None else build_ratings("5")),
    )
    return RawRecord(identity=identity, aptitude=aptitude, inventory=inventory, manual_overrides=manual)


@pytest.fixture
def jane_record() -> RawRecord:
    return build_record()

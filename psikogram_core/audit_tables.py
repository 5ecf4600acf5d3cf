from __future__ import annotations

import argparse
import json
from pathlib import Path

from .catalog import ASPECTS, INTERESTS, TRAITS as TRAIT_TEXTS
from .cfit import AGE_BANDS, IQ_TABLE
from .config import EPPS_ITEMS, RMIB_ITEMS, TRAIT_COUNT
from .epps import COMPLEMENT_SETS, DIRECT_SETS, TRAITS, WS_TABLES
from .rmib import CATEGORY_POSITIONS
from .scale import CRITERIA

IQ_KEYS: tuple[int, ...] = tuple(range(0, 50))
EPPS_SET_SIZE: int = 14


def _audit_iq(warnings: list[str]) -> None:
    if tuple(sorted(IQ_TABLE)) != IQ_KEYS:
        warnings.append(f"IQ table keys are not exactly 0..49 ({len(IQ_TABLE)} keys)")
    bands = len(AGE_BANDS)
    for key in sorted(IQ_TABLE):
        row = IQ_TABLE[key]
        if len(row) != bands:
            warnings.append(f"IQ row {key} has {len(row)} bands (expected {bands})")
            continue
        if any(a < b for a, b in zip(row, row[1:])):
            warnings.append(f"IQ row {key} rises with age band")
        nxt = IQ_TABLE.get(key + 1)
        if nxt and any(a > b for a, b in zip(row, nxt)):
            warnings.append(f"IQ row {key} exceeds row {key + 1}")


def _audit_epps(warnings: list[str]) -> None:
    for kind, sets in (("direct", DIRECT_SETS), ("complement", COMPLEMENT_SETS)):
        for trait in TRAITS:
            positions = sets.get(trait, ())
            if len(set(positions)) != EPPS_SET_SIZE:
                warnings.append(f"EPPS {trait} {kind} set has {len(set(positions))} unique positions")
            if any(p < 0 or p >= EPPS_ITEMS for p in positions):
                warnings.append(f"EPPS {trait} {kind} set leaves 0..{EPPS_ITEMS - 1}")
    for trait in TRAITS:
        table = WS_TABLES.get(trait)
        if not table:
            warnings.append(f"EPPS {trait} has no weighted-score table")
            continue
        weights = [w for _, w in table]
        if any(a < b for a, b in zip(weights, weights[1:])):
            warnings.append(f"EPPS {trait} weights fall as the raw total rises")


def _audit_rmib(warnings: list[str]) -> None:
    seen: list[int] = []
    for code, positions in CATEGORY_POSITIONS.items():
        if len(positions) != 8:
            warnings.append(f"RMIB {code} sums {len(positions)} positions (expected 8)")
        seen.extend(positions)
    if sorted(seen) != list(range(1, RMIB_ITEMS + 1)):
        warnings.append(f"RMIB positions do not partition 1..{RMIB_ITEMS}")


def _audit_scale(warnings: list[str]) -> None:
    for kind, crit in CRITERIA.items():
        ceilings = [c for c, _ in crit]
        scores = [s for _, s in crit]
        if ceilings != sorted(ceilings):
            warnings.append(f"scale {kind} ceilings are not ascending")
        if scores != list(range(1, 11)):
            warnings.append(f"scale {kind} scores are not 1..10")


def _audit_catalog(warnings: list[str]) -> None:
    if len(TRAIT_TEXTS) != TRAIT_COUNT or len(ASPECTS) != TRAIT_COUNT:
        warnings.append(f"catalog has {len(TRAIT_TEXTS)} traits and {len(ASPECTS)} aspects (expected {TRAIT_COUNT})")
    codes = {c.code for c in INTERESTS}
    if codes != set(CATEGORY_POSITIONS):
        warnings.append("interest catalog codes differ from the RMIB categories")


def audit_tables() -> dict[str, object]:
    warnings: list[str] = []
    _audit_iq(warnings)
    _audit_epps(warnings)
    _audit_rmib(warnings)
    _audit_scale(warnings)
    _audit_catalog(warnings)
    summary = {
        "iq_rows": len(IQ_TABLE),
        "epps_traits": len(TRAITS),
        "rmib_categories": len(CATEGORY_POSITIONS),
        "scale_kinds": sorted(CRITERIA),
        "warnings": warnings,
    }
    return summary


def write_summary(summary: dict[str, object], path: Path | str = Path("/tmp/tables_audit.json")) -> str:
    text = json.dumps(summary, indent=2, sort_keys=True)
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text + "\n", encoding="utf-8")
    return text


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Check the scoring-key tables for drift.")
    ap.add_argument("--out", default=None, help="also write the JSON summary here")
    a = ap.parse_args(argv)

    summary = audit_tables()
    if a.out:
        write_summary(summary, a.out)
    warnings = summary["warnings"]
    print(f"IQ rows: {summary['iq_rows']}  EPPS traits: {summary['epps_traits']}  "
          f"RMIB categories: {summary['rmib_categories']}")
    for w in warnings:  # type: ignore[union-attr]
        print(f"  ! {w}")
    if not warnings:
        print("  tables OK")
    return 2 if warnings else 0


if __name__ == "__main__":  # pragma: no cover - developer utility
    raise SystemExit(main())

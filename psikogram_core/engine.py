# psikogram_core/engine.py
from __future__ import annotations
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union
import logging

from .types import (
    Identity,
    InterestEntry,
    RankedScore,
    RawRecord,
    ResultRecord,
)
from .parsers import (
    group_cell,
    parse_aptitude,
    parse_float,
    parse_groups,
    parse_int,
    parse_inventory,
)
from .cfit import iq_from_cfit
from .epps import score_epps, split_choices
from .rmib import CATEGORIES, rating_sequence, score_rmib
from .scale import MetricKind, to_scale
from .config import (
    DEBUG_TRACE,
    DEFAULT_AGE,
    IDENTITY_AGE_FIELD,
    IDENTITY_NAME_FIELD,
    IDENTITY_SEX_FIELD,
    OVERRIDE_DATE_FIELD,
    OVERRIDE_INTEREST_DESC_GROUP,
    OVERRIDE_INTEREST_NAME_GROUP,
    OVERRIDE_IQ_FIELD,
    OVERRIDE_META_GROUP,
    OVERRIDE_RECOMMENDATIONS_GROUP,
    OVERRIDE_SCORES_GROUP,
    OVERRIDE_SIGNED_FIELD,
    OVERRIDE_STRENGTHS_GROUP,
    OVERRIDE_WEAKNESSES_GROUP,
    TEXT_OVERRIDE_SLOTS,
    TOP_INTERESTS,
    TRACE_FIELDS,
)


log = logging.getLogger(__name__)

# score slot order, shared with catalog.TRAITS
TRAIT_KEYS: Tuple[str, ...] = (
    "general_ability",
    "visual_perception",
    "logical_reasoning",
    "abstract_reasoning",
    "verbal_reasoning",
    "numeric_reasoning",
    "achievement_drive",
    "stress_tolerance",
    "self_confidence",
    "social_relations",
    "cooperation",
    "work_systematics",
    "initiative",
    "independence",
)


def _emit_trace(**values: object) -> None:
    if not DEBUG_TRACE:
        return
    ordered = []
    for key in TRACE_FIELDS:
        if key in values:
            ordered.append(f"{key}={values[key]}")
    if ordered:
        log.info("trace %s", " ".join(ordered))


def _numeric_override(cell: str) -> Optional[int]:
    # "0", blank and unparsable cells all mean "keep the computed value";
    # an operator therefore cannot force a score down to exactly 0.
    if not cell:
        return None
    val = parse_int(cell)
    return val if val != 0 else None


def _text_override(cell: str) -> Optional[str]:
    txt = cell.strip()
    return txt or None


def apply_score_overrides(scores: Sequence[int], cells: Sequence[str]) -> List[int]:
    out = list(scores)
    for i in range(min(len(out), len(cells))):
        val = _numeric_override(cells[i])
        if val is not None:
            out[i] = val
    return out


def rank_scores(scores: Sequence[int]) -> Tuple[Tuple[RankedScore, ...], Tuple[RankedScore, ...]]:
    """Return (descending, ascending) views; ties keep their slot order."""
    indexed = [RankedScore(value=v, index=i) for i, v in enumerate(scores)]
    desc = tuple(sorted(indexed, key=lambda r: r.value, reverse=True))
    asc = tuple(sorted(indexed, key=lambda r: r.value))
    return desc, asc


def rank_interests(totals: Mapping[str, int], groups: List[List[str]]) -> Tuple[InterestEntry, ...]:
    ordered = sorted(CATEGORIES, key=lambda code: totals.get(code, 0))
    return tuple(
        InterestEntry(
            code=code,
            name_override=_text_override(group_cell(groups, OVERRIDE_INTEREST_NAME_GROUP, j)),
            description_override=_text_override(group_cell(groups, OVERRIDE_INTEREST_DESC_GROUP, j)),
        )
        for j, code in enumerate(ordered[:TOP_INTERESTS])
    )


def _text_slots(groups: List[List[str]], group: int) -> Tuple[Optional[str], ...]:
    return tuple(_text_override(group_cell(groups, group, i)) for i in range(TEXT_OVERRIDE_SLOTS))


def compute_psikogram(record: Union[RawRecord, Mapping[str, Any]]) -> ResultRecord:
    """Run the whole scoring pipeline over one intake record.

    Accepts a ``RawRecord`` or any mapping ``RawRecord.from_mapping`` takes.
    Never raises for string inputs: every malformed piece degrades to its
    documented default.
    """
    rec = record if isinstance(record, RawRecord) else RawRecord.from_mapping(record)

    people = parse_groups(rec.identity)
    aptitude = parse_aptitude(rec.aptitude)
    inventory = parse_inventory(rec.inventory)
    manual = parse_groups(rec.manual_overrides)

    age_text = group_cell(people, 0, IDENTITY_AGE_FIELD)
    age = parse_float(age_text) or DEFAULT_AGE

    # CFIT
    cfit1 = parse_int(aptitude.cfit1)
    cfit2 = parse_int(aptitude.cfit2)
    cfit3 = parse_int(aptitude.cfit3)
    cfit4 = parse_int(aptitude.cfit4)
    cfit_total = cfit1 + cfit2 + cfit3 + cfit4
    iq_calc = iq_from_cfit(cfit_total, age)
    iq_manual = _numeric_override(group_cell(manual, OVERRIDE_META_GROUP, OVERRIDE_IQ_FIELD))
    iq = iq_manual if iq_manual is not None else iq_calc

    tkd3 = parse_float(aptitude.tkd3)
    tkd6 = parse_float(aptitude.tkd6)

    # EPPS
    epps = score_epps(split_choices(inventory.epps))
    ws = epps.weighted
    ach, dom, aut = ws["ach"], ws["dom"], ws["aut"]
    drive_mix = (dom + ach + aut) / 3

    # RMIB
    rmib = score_rmib(rating_sequence(inventory))

    computed = [
        to_scale(iq, MetricKind.IQ),
        to_scale(cfit2, MetricKind.CFIT),
        to_scale((cfit1 + cfit4) / 2, MetricKind.CFIT),
        to_scale(cfit3, MetricKind.CFIT),
        to_scale(tkd3, MetricKind.TKD3),
        to_scale(tkd6, MetricKind.TKD6),
        to_scale(ach, MetricKind.ACH),
        to_scale(drive_mix, MetricKind.ACH),
        to_scale(ws["exh"], MetricKind.ACH),
        to_scale(ws["aff"], MetricKind.ACH),
        to_scale(ws["def"], MetricKind.ACH),
        to_scale(ws["ord"], MetricKind.ACH),
        to_scale(drive_mix, MetricKind.ACH),
        to_scale(aut, MetricKind.ACH),
    ]
    score_cells = manual[OVERRIDE_SCORES_GROUP] if len(manual) > OVERRIDE_SCORES_GROUP else []
    scores = apply_score_overrides(computed, score_cells)
    desc, asc = rank_scores(scores)

    _emit_trace(
        age=age,
        cfit_total=cfit_total,
        iq_calc=iq_calc,
        iq=iq,
        tkd3=tkd3,
        tkd6=tkd6,
        epps_raw=epps.raw,
        epps_weighted=ws,
        consistency=epps.consistency,
        rmib=rmib,
        scores=scores,
    )

    identity = Identity(
        name=group_cell(people, 0, IDENTITY_NAME_FIELD),
        sex=group_cell(people, 0, IDENTITY_SEX_FIELD),
        age=age_text,
        test_date=group_cell(manual, OVERRIDE_META_GROUP, OVERRIDE_DATE_FIELD),
        signed_date=group_cell(manual, OVERRIDE_META_GROUP, OVERRIDE_SIGNED_FIELD),
    )
    result = ResultRecord(
        identity=identity,
        iq=iq,
        scores=tuple(scores),
        consistency=epps.consistency,
        ranked_desc=desc,
        ranked_asc=asc,
        interests=rank_interests(rmib, manual),
        strengths=_text_slots(manual, OVERRIDE_STRENGTHS_GROUP),
        weaknesses=_text_slots(manual, OVERRIDE_WEAKNESSES_GROUP),
        recommendations=_text_slots(manual, OVERRIDE_RECOMMENDATIONS_GROUP),
    )
    log.debug("psikogram computed for %r: iq=%s consistency=%s", identity.name, iq, epps.consistency)
    return result

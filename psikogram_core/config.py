from __future__ import annotations
import os, json, pathlib, logging
from types import MappingProxyType


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return list(default)
    return [part.strip() for part in raw.split(",") if part.strip()]


# wire format
PART_DELIM: str = "|"
FIELD_DELIM: str = ";"
KEYED_OPEN: str = "{"

APTITUDE_SIZE: int = 20
INVENTORY_SIZE: int = 10
APTITUDE_KEYED_DEFAULT: str = "0"
INVENTORY_KEYED_DEFAULT: str = ""

# slot name -> index, shared by the keyed and the positional decoders
APTITUDE_SLOTS = MappingProxyType({
    "cfit1": 0,
    "cfit2": 1,
    "cfit3": 2,
    "cfit4": 3,
    "tkd3": 15,
    "tkd6": 17,
})
INVENTORY_SLOTS = MappingProxyType({
    "epps": 0,
    "rmib1": 2,
    "rmib2": 3,
    "rmib3": 4,
    "rmib4": 5,
    "rmib5": 6,
    "rmib6": 7,
    "rmib7": 8,
    "rmib8": 9,
})
RMIB_BLOCKS: tuple[str, ...] = tuple(k for k in INVENTORY_SLOTS if k.startswith("rmib"))

# record field -> legacy wire id
LEGACY_FIELD_KEYS = MappingProxyType({
    "identity": "x_02",
    "aptitude": "x_05",
    "inventory": "x_06",
    "manual_overrides": "x_10",
})

IDENTITY_NAME_FIELD: int = 0
IDENTITY_AGE_FIELD: int = 4
IDENTITY_SEX_FIELD: int = 8

OVERRIDE_META_GROUP: int = 0
OVERRIDE_DATE_FIELD: int = 1
OVERRIDE_IQ_FIELD: int = 3
OVERRIDE_SIGNED_FIELD: int = 4
OVERRIDE_SCORES_GROUP: int = 1
OVERRIDE_STRENGTHS_GROUP: int = 2
OVERRIDE_WEAKNESSES_GROUP: int = 3
OVERRIDE_RECOMMENDATIONS_GROUP: int = 4
OVERRIDE_INTEREST_NAME_GROUP: int = 5
OVERRIDE_INTEREST_DESC_GROUP: int = 6

DEFAULT_AGE: float = 16.0
EPPS_ITEMS: int = 225
RMIB_ITEMS: int = 96
TRAIT_COUNT: int = 14
TOP_INTERESTS: int = 3
TEXT_OVERRIDE_SLOTS: int = 3

DEBUG_TRACE: bool = False
TRACE_FIELDS: tuple[str, ...] = (
    "age",
    "cfit_total",
    "iq_calc",
    "iq",
    "tkd3",
    "tkd6",
    "epps_raw",
    "epps_weighted",
    "consistency",
    "rmib",
    "scores",
)
LOG_LEVEL: str = "WARNING"
LOG_FORMAT: str = "[%(levelname)s] %(name)s: %(message)s"
ALLOWED_ORIGINS: list[str] = [
    "http://localhost:3000",
]

# // env overrides for ops; scoring keys are never overridable.
DEBUG_TRACE = _env_bool("DEBUG_TRACE", DEBUG_TRACE)
LOG_LEVEL = (os.getenv("LOG_LEVEL") or LOG_LEVEL).strip().upper()
ALLOWED_ORIGINS = _env_list("ALLOWED_ORIGINS", ALLOWED_ORIGINS)


def configure_logging(level: str | None = None) -> None:
    """Install a root handler for entry points; the library never does this itself."""
    name = (level or LOG_LEVEL or "WARNING").upper()
    logging.basicConfig(level=getattr(logging, name, logging.WARNING), format=LOG_FORMAT)
    if DEBUG_TRACE:
        logging.getLogger("psikogram_core.engine").setLevel(logging.INFO)


def load_config(path: str = "config.json") -> dict:
    cfg: dict = {}
    p = pathlib.Path(path)
    if p.exists():
        try:
            cfg = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            cfg = {}
        if not isinstance(cfg, dict):
            cfg = {}
    e = os.environ
    if e.get("LOG_LEVEL"): cfg["LOG_LEVEL"] = e["LOG_LEVEL"].strip().upper()
    if e.get("ALLOWED_ORIGINS"): cfg["ALLOWED_ORIGINS"] = _env_list("ALLOWED_ORIGINS", [])
    cfg.setdefault("LOG_LEVEL", LOG_LEVEL)
    cfg.setdefault("ALLOWED_ORIGINS", list(ALLOWED_ORIGINS))
    # the engine only reads the env value, so a file setting is not reported
    cfg["DEBUG_TRACE"] = DEBUG_TRACE
    return cfg

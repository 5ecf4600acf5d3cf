from __future__ import annotations
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
import logging, typing as t

# ---- Engine imports ----
from psikogram_core.catalog import ASPECTS, INTERESTS, TRAITS, interest_by_code
from psikogram_core.config import configure_logging, load_config
from psikogram_core.engine import compute_psikogram
from psikogram_core.export import to_json
from psikogram_core.types import RawRecord

CFG = load_config()
configure_logging(CFG.get("LOG_LEVEL"))
log = logging.getLogger(__name__)

app = FastAPI(title="Psikogram API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(CFG.get("ALLOWED_ORIGINS") or []),
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

# ---- Schemas ----
class RecordReq(BaseModel):
    identity: str = ""
    aptitude: str = ""           # legacy "a|b|..." or {"cfit1": ..., "tkd6": ...}
    inventory: str = ""          # legacy "epps||rmib1|..." or {"epps": ..., "rmib1": ...}
    manual_overrides: str = ""

# ---- Helpers ----
def _rows(rows: t.Iterable[tuple]) -> list[dict[str, t.Any]]:
    return [r._asdict() for r in rows]

# ---- Health ----
@app.get("/")
def root():
    return {"status": "ok", "service": "psikogram-api"}

@app.get("/health")
def health():
    return {"status": "ok", "debug_trace": bool(CFG.get("DEBUG_TRACE"))}

# ---- Scoring ----
@app.post("/psikogram")
def psikogram(req: RecordReq, resolve: bool = Query(False, description="Attach default report texts")):
    record = RawRecord(
        identity=req.identity,
        aptitude=req.aptitude,
        inventory=req.inventory,
        manual_overrides=req.manual_overrides,
    )
    result = compute_psikogram(record)
    return to_json(result, resolve=resolve)

# ---- Reference tables ----
@app.get("/catalog")
def catalog():
    return {
        "traits": _rows(TRAITS),
        "interests": _rows(INTERESTS),
        "aspects": _rows(ASPECTS),
    }

@app.get("/catalog/interests/{code}")
def catalog_interest(code: str):
    cat = interest_by_code(code)
    if cat is None:
        raise HTTPException(404, "interest category not found")
    return cat._asdict()

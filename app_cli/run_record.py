# app_cli/run_record.py
from __future__ import annotations
import argparse, json, sys
from pathlib import Path
from psikogram_core.config import configure_logging
from psikogram_core.engine import compute_psikogram
from psikogram_core.export import to_json

def _load(path: str) -> dict:
    raw = sys.stdin.read() if path == "-" else Path(path).read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise SystemExit(f"{path}: expected a JSON object with identity/aptitude/inventory/manual_overrides")
    return data

def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Score one psikogram intake record.")
    ap.add_argument("record", help="JSON file (or - for stdin); x_02/x_05/x_06/x_10 keys also accepted")
    ap.add_argument("--resolve", action="store_true", help="attach default report texts")
    ap.add_argument("--out", default=None, help="write the result here instead of stdout")
    ap.add_argument("--log-level", default=None)
    a = ap.parse_args(argv)
    configure_logging(a.log_level)

    payload = to_json(compute_psikogram(_load(a.record)), resolve=a.resolve)
    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if a.out:
        out = Path(a.out); out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text + "\n", encoding="utf-8")
        print(f"Result: {out}")
    else:
        print(text)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

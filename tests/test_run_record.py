from __future__ import annotations

import io
import json
from dataclasses import asdict

import pytest

from app_cli.run_record import main

from tests.conftest import build_record


def _write(tmp_path, data):
    p = tmp_path / "record.json"
    p.write_text(json.dumps(data), encoding="utf-8")
    return p


def test_prints_result(tmp_path, capsys):
    path = _write(tmp_path, asdict(build_record()))
    assert main([str(path)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["iq"] == 137
    assert "resolved" not in data


def test_legacy_ids_and_out_file(tmp_path, capsys):
    rec = build_record()
    path = _write(tmp_path, {"x_02": rec.identity, "x_05": rec.aptitude, "x_06": rec.inventory})
    out = tmp_path / "out" / "result.json"
    assert main([str(path), "--resolve", "--out", str(out)]) == 0
    assert "Result:" in capsys.readouterr().out
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["identity"]["name"] == "Jane Doe"
    assert data["resolved"]["interests"][0]["name"] == "OUTDOOR"


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps({"identity": "Ana;;;;14"})))
    assert main(["-"]) == 0
    assert json.loads(capsys.readouterr().out)["identity"]["age"] == "14"


def test_rejects_non_object(tmp_path):
    path = _write(tmp_path, ["not", "a", "record"])
    with pytest.raises(SystemExit):
        main([str(path)])

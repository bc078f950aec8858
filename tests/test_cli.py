import csv
import json

from FuelsysDataTool import calibration as CAL
from FuelsysDataTool import cli

import pytest


def test_configure_writes_workspace(tmp_path):
    out = tmp_path / "ws.json"
    assert cli.main(["configure", "--layout", "pow2", "--numeric", "fixed", "--output", str(out)]) == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["SpeedVect"][0] == 64.0
    assert data["SpeedVect"][-1] == 640.0
    assert data["st_range"]["stored_integer"] == 3
    assert data["max_speed"] == 628.0


def test_configure_to_stdout(capsys):
    assert cli.main(["--log-level", "DEBUG", "configure"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["min_speed"] == 50.0
    assert data["st_range"] == 1e-4


def test_unknown_layout_reports_error(capsys):
    assert cli.main(["configure", "--layout", "log2"]) == 2
    assert "unknown breakpoint layout" in capsys.readouterr().err


def test_fail_on_drift():
    CAL.set_engine_speed(100.0)
    with pytest.raises(SystemExit, match="ENGINE_SPEED"):
        cli.main(["configure", "--fail-on-drift"])
    CAL.reset()
    assert cli.main(["tables", "--table", "PumpCon", "--fail-on-drift"]) == 0


def test_tables_single_table_csv(tmp_path):
    out = tmp_path / "press_est.csv"
    assert cli.main(["tables", "--layout", "pow2", "--table", "PressEst", "--output", str(out)]) == 0
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0][0] == "SpeedVect\\ThrotVect"
    assert len(rows) == 20
    assert len(rows[0]) == 46


def test_tables_dataset_json(capsys):
    assert cli.main(["tables"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["layout"] == "orig"
    assert set(data["tables"]) == {"PressEst", "PumpCon", "SpeedEst", "ThrotEst", "RampRateKiZ"}


def test_formats(capsys):
    assert cli.main(["formats", "--numeric", "fixed"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["s16En15"]["name"] == "sfix16_En15"
    assert data["u8En7"]["signed"] is False
    assert data["u8En7"]["quantity"] == "manifold pressure"


def test_lookup_csv(tmp_path):
    out = tmp_path / "lookup.csv"
    assert cli.main(["lookup", "--layout", "pow2", "--output", str(out)]) == 0
    with open(out, newline="", encoding="utf-8") as f:
        header, values = list(csv.reader(f))
    row = dict(zip(header, values))
    assert row["index_search"] == "Evenly spaced points"
    assert row["extrap_method"] == ""


def test_csv_needs_flat_data(tmp_path):
    with pytest.raises(SystemExit):
        cli.main(["formats", "--output", str(tmp_path / "formats.csv")])

import csv
import json

import pytest
from pydantic import ValidationError

from FuelsysDataTool import api
from FuelsysDataTool import io as IO
from FuelsysDataTool import remap as R
from FuelsysDataTool.schemas import BreakpointAxis, Dataset, Table
from FuelsysDataTool.table_data import canonical_dataset


def test_dataset_json_file_round_trip(tmp_path):
    ds = R.remap("pow2").dataset
    path = tmp_path / "pow2.json"
    IO.write_dataset_json(ds, str(path))
    assert IO.read_dataset_json(str(path)) == ds


def test_dataset_from_dict_validates_shapes():
    data = IO.dataset_to_dict(canonical_dataset())
    data["tables"]["PressEst"]["values"] = data["tables"]["PressEst"]["values"][:-1]
    with pytest.raises(ValidationError):
        IO.dataset_from_dict(data)


def test_table_rows():
    headers, rows = IO.table_rows(canonical_dataset(), "PressEst")
    assert headers[0] == "SpeedVect\\ThrotVect"
    assert headers[1:4] == ["0", "3", "6"]
    assert len(headers) == 18
    assert len(rows) == 18
    assert rows[0][0] == 50.0
    assert rows[0][1] == 0.806253176323533


def test_table_rows_unknown_table():
    with pytest.raises(ValueError, match="Unknown table"):
        IO.table_rows(canonical_dataset(), "FuelEst")


def test_write_table_csv(tmp_path):
    path = tmp_path / "ramp.csv"
    IO.write_table_csv(canonical_dataset(), "RampRateKiZ", str(path))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["RampRateKiX\\RampRateKiY", "0", "0.2", "0.4", "0.6", "0.8", "1"]
    assert len(rows) == 7
    assert float(rows[1][0]) == 100.0
    assert float(rows[6][6]) == pytest.approx(36 * 0.012)


def test_workspace_to_dict_is_json_ready(ws):
    api.configure(ws, "pow2", "fixed")
    out = IO.workspace_to_dict(ws.snapshot())
    text = json.dumps(out)
    back = json.loads(text)
    assert back["SpeedVect"][0] == 64.0
    assert back["st_range"]["stored_integer"] == 3
    assert back["st_range"]["value"] == 3 / 32768
    assert back["s16En15"]["fraction_bits"] == 15
    assert [e["name"] for e in back["EngSensors"]["elements"]] == ["throttle", "speed", "ego", "map"]


def test_table_rows_one_axis():
    axis = BreakpointAxis(name="SpeedVect", values=(50.0, 100.0))
    ds = Dataset(layout="orig", axes={"SpeedVect": axis},
                 tables={"IdleCurve": Table(name="IdleCurve", axes=("SpeedVect",), values=(1.0, 2.0))}, ki=0.0)
    headers, rows = IO.table_rows(ds, "IdleCurve")
    assert headers == ["SpeedVect", "IdleCurve"]
    assert rows == [[50.0, 1.0], [100.0, 2.0]]

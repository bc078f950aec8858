import numpy as np
import pytest
from pydantic import ValidationError

from FuelsysDataTool import api
from FuelsysDataTool.schemas import BreakpointAxis, BreakpointLayout, Dataset, Table
from FuelsysDataTool.table_data import TABLE_AXES, canonical_dataset


def test_canonical_dataset_is_deterministic():
    a = canonical_dataset()
    b = canonical_dataset()
    assert a == b
    assert a.model_dump() == b.model_dump()
    assert api.get_table_data() == a


def test_canonical_axes():
    ds = canonical_dataset()
    assert ds.layout is BreakpointLayout.ORIGINAL
    assert ds.axes["SpeedVect"].size == 18
    assert ds.axes["PressVect"].size == 19
    assert ds.axes["ThrotVect"].size == 17
    assert ds.axes["SpeedVect"].min == 50 and ds.axes["SpeedVect"].max == 1000
    assert (ds.axes["PressVect"].min, ds.axes["PressVect"].max) == (0.05, 0.95)
    assert ds.axes["RampRateKiX"].values == (100.0, 200.0, 300.0, 400.0, 500.0, 600.0)
    assert ds.axes["RampRateKiY"].values == (0.0, 0.2, 0.4, 0.6, 0.8, 1.0)


def test_canonical_table_shapes_follow_axes():
    ds = canonical_dataset()
    assert ds.tables["PressEst"].shape == (18, 17)
    assert ds.tables["PumpCon"].shape == (18, 19)
    assert ds.tables["SpeedEst"].shape == (17, 19)
    assert ds.tables["ThrotEst"].shape == (18, 19)
    for name, axes in TABLE_AXES.items():
        assert ds.tables[name].axes == axes


def test_canonical_spot_values():
    ds = canonical_dataset()
    assert ds.tables["PressEst"].values[0][0] == 0.806253176323533
    assert ds.tables["PumpCon"].values[0][0] == -0.0556348
    assert ds.tables["SpeedEst"].values[-1][-1] == 1067.33348108226
    assert ds.tables["ThrotEst"].values[0] == (0.0,) * 19


def test_ramp_rate_table_is_index_product():
    ds = canonical_dataset()
    z = ds.tables["RampRateKiZ"].values
    g = ds.ki
    assert g == 0.012
    for i in range(1, 7):
        for j in range(1, 7):
            assert z[i - 1][j - 1] == i * j * g


def test_axis_must_be_strictly_increasing():
    with pytest.raises(ValidationError):
        BreakpointAxis(name="x", values=(0.0, 1.0, 1.0))
    with pytest.raises(ValidationError):
        BreakpointAxis(name="x", values=(1.0,))
    with pytest.raises(ValidationError):
        BreakpointAxis(name="x", values=(0.0, float("nan")))


def test_dataset_rejects_shape_mismatch():
    x = BreakpointAxis(name="x", values=(0.0, 1.0, 2.0))
    y = BreakpointAxis(name="y", values=(0.0, 1.0))
    ok = Table(name="t", axes=("x", "y"), values=((1.0, 2.0), (3.0, 4.0), (5.0, 6.0)))
    Dataset(layout="orig", axes={"x": x, "y": y}, tables={"t": ok}, ki=1.0)
    bad = Table(name="t", axes=("y", "x"), values=((1.0, 2.0), (3.0, 4.0), (5.0, 6.0)))
    with pytest.raises(ValidationError):
        Dataset(layout="orig", axes={"x": x, "y": y}, tables={"t": bad}, ki=1.0)
    orphan = Table(name="t", axes=("z",), values=(1.0, 2.0))
    with pytest.raises(ValidationError):
        Dataset(layout="orig", axes={"x": x, "y": y}, tables={"t": orphan}, ki=1.0)


def test_table_rejects_ragged_rows():
    with pytest.raises(ValidationError):
        Table(name="t", axes=("x", "y"), values=((1.0, 2.0), (3.0,)))


def test_table_array_matches_values():
    t = canonical_dataset().tables["PumpCon"]
    arr = t.array()
    assert arr.shape == (18, 19)
    assert np.array_equal(arr[3], np.asarray(t.values[3]))


def test_axis_array():
    axis = canonical_dataset().axes["ThrotVect"]
    arr = axis.array()
    assert arr.dtype == np.float64
    assert arr[-1] == axis.max == 90.0


def test_canonical_dataset_hands_out_copies():
    a = canonical_dataset()
    a.tables.clear()
    a.axes.clear()
    b = canonical_dataset()
    assert set(b.tables) == set(TABLE_AXES)
    assert b.axes["SpeedVect"].size == 18

import numpy as np
import pytest

from FuelsysDataTool import anchors
from FuelsysDataTool import formulas as F
from FuelsysDataTool import remap as R
from FuelsysDataTool.errors import ConfigError, RangeError
from FuelsysDataTool.schemas import BreakpointAxis, BreakpointLayout, Dataset, Table
from FuelsysDataTool.table_data import canonical_dataset


def test_original_layout_is_identity():
    result = R.remap("orig")
    assert result.dataset == canonical_dataset()
    assert result.dataset.layout is BreakpointLayout.ORIGINAL


def test_unknown_layout():
    with pytest.raises(ConfigError):
        R.remap("log2")
    assert R.parse_layout(" POW2 ") is BreakpointLayout.POW2


def test_pow2_axes_are_evenly_spaced_power_of_two():
    ds = R.remap("pow2").dataset
    assert ds.layout is BreakpointLayout.POW2
    for name, (start, step, stop) in anchors.POW2_AXES.items():
        axis = ds.axes[name]
        assert F.axis_step(axis.values) == step
        assert F.is_power_of_two(step)
        assert axis.min == start and axis.max == stop
    assert ds.axes["SpeedVect"].values == tuple(float(x) for x in range(64, 641, 32))
    assert ds.axes["ThrotVect"].size == 45
    assert ds.axes["PressVect"].size == 29
    assert ds.axes["RampRateKiX"].values == (128.0, 256.0, 384.0, 512.0, 640.0)
    assert ds.axes["RampRateKiY"].values == (0.0, 0.25, 0.5, 0.75, 1.0)


def test_pow2_table_shapes():
    ds = R.remap("pow2").dataset
    assert ds.tables["PressEst"].shape == (19, 45)
    assert ds.tables["PumpCon"].shape == (19, 29)
    assert ds.tables["SpeedEst"].shape == (45, 29)
    assert ds.tables["ThrotEst"].shape == (19, 29)
    assert ds.tables["RampRateKiZ"].shape == (5, 5)


def test_pow2_values_are_bilinear_samples():
    ds = R.remap("pow2").dataset
    # PumpCon at speed 64 (between 50 and 75), pressure 0.0625 (between 0.05 and 0.1)
    z00, z01 = -0.0556348, 0.0185328
    z10, z11 = -0.00228280000000001, 0.0465088
    tr = (64.0 - 50.0) / 25.0
    tc = (0.0625 - 0.05) / (0.1 - 0.05)
    expected = (1 - tr) * ((1 - tc) * z00 + tc * z01) + tr * ((1 - tc) * z10 + tc * z11)
    assert ds.tables["PumpCon"].values[0][0] == pytest.approx(expected, rel=1e-9)


def test_pow2_exact_breakpoints_reproduce_canonical_columns():
    canon = canonical_dataset()
    ds = R.remap("pow2").dataset
    # throttle 0, 6, 12 deg are nodes of both axes; rows still interpolate in speed
    new_speed = ds.axes["SpeedVect"].values
    for throttle in (0.0, 6.0, 12.0, 30.0, 46.0, 68.0):
        j_old = canon.axes["ThrotVect"].values.index(throttle)
        j_new = ds.axes["ThrotVect"].values.index(throttle)
        column = [row[j_old] for row in canon.tables["PressEst"].values]
        expected = F.interp1(canon.axes["SpeedVect"].values, column, new_speed)
        got = [row[j_new] for row in ds.tables["PressEst"].values]
        assert np.allclose(got, expected, rtol=0, atol=1e-12)


def test_pow2_ramp_rate_is_recomputed_from_indices():
    ds = R.remap("pow2").dataset
    z = ds.tables["RampRateKiZ"].values
    for i in range(1, 6):
        for j in range(1, 6):
            assert z[i - 1][j - 1] == i * j * ds.ki


def test_pow2_out_of_domain_raises_before_building():
    specs = dict(anchors.POW2_AXES)
    specs["SpeedVect"] = (32.0, 32.0, 640.0)
    with pytest.raises(RangeError, match="SpeedVect"):
        R.pow2_dataset(canonical_dataset(), specs)
    specs["SpeedVect"] = (64.0, 32.0, 1024.0)
    with pytest.raises(RangeError):
        R.pow2_dataset(canonical_dataset(), specs)


def test_range_bounds_original():
    b = R.remap("orig").bounds
    assert (b.pressure.min, b.pressure.max) == (0.05, 0.95)
    assert (b.speed.min, b.speed.max) == (50.0, 628.0)
    assert (b.throttle.min, b.throttle.max) == (3.0, 90.0)
    assert (b.ego.min, b.ego.max) == (0.0, 1.2)


def test_range_bounds_pow2():
    b = R.remap("pow2").bounds
    assert (b.pressure.min, b.pressure.max) == (0.0625, 0.9375)
    assert (b.speed.min, b.speed.max) == (64.0, 628.0)
    assert (b.throttle.min, b.throttle.max) == (3.0, 88.0)
    assert b.ego.max == 1.2


def test_scalar_constants_read_calibration():
    s = R.scalar_constants()
    assert (s.hys, s.zero_thresh, s.st_range) == (25.0, 250.0, 1e-4)
    assert (s.throttle_sw, s.speed_sw, s.ego_sw, s.map_sw) == (1, 1, 1, 1)
    assert s.engine_speed == 300.0


def test_domain_is_checked_once_per_sampled_table(monkeypatch):
    calls = []
    check = R.check_domain
    monkeypatch.setattr(R, "check_domain", lambda table, *a: calls.append(table.name) or check(table, *a))
    R.pow2_dataset(canonical_dataset())
    assert sorted(calls) == ["PressEst", "PumpCon", "SpeedEst", "ThrotEst"]


def _curve_dataset():
    speed = BreakpointAxis(name="SpeedVect", unit="rad/s", values=(50.0, 100.0, 700.0))
    curve = Table(name="IdleCurve", unit="deg", axes=("SpeedVect",), values=(0.0, 10.0, 40.0))
    return Dataset(layout="orig", axes={"SpeedVect": speed}, tables={"IdleCurve": curve}, ki=0.012)


def test_pow2_resamples_one_axis_tables():
    specs = {"SpeedVect": (64.0, 32.0, 640.0)}
    ds = R.pow2_dataset(_curve_dataset(), specs)
    curve = ds.tables["IdleCurve"]
    assert curve.axes == ("SpeedVect",)
    assert curve.unit == "deg"
    assert curve.shape == (19,)
    assert curve.values[0] == pytest.approx(14.0 * 10.0 / 50.0)
    assert curve.values[2] == pytest.approx(10.0 + 28.0 * 30.0 / 600.0)
    assert curve.values[-1] == pytest.approx(10.0 + 540.0 * 30.0 / 600.0)


def test_pow2_one_axis_domain_check():
    with pytest.raises(RangeError, match="IdleCurve"):
        R.pow2_dataset(_curve_dataset(), {"SpeedVect": (32.0, 32.0, 640.0)})

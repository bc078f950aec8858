import numpy as np
import pytest

from FuelsysDataTool import formulas as F


def test_is_power_of_two():
    assert F.is_power_of_two(1.0)
    assert F.is_power_of_two(32.0)
    assert F.is_power_of_two(2.0**-5)
    assert not F.is_power_of_two(3.0)
    assert not F.is_power_of_two(0.1)
    assert not F.is_power_of_two(0.0)
    assert not F.is_power_of_two(-2.0)
    assert not F.is_power_of_two(float("inf"))


def test_pow2_axis_is_computed_without_accumulation():
    a = F.pow2_axis(64.0, 32.0, 640.0)
    assert a.tolist() == [float(x) for x in range(64, 641, 32)]
    p = F.pow2_axis(2 * 2.0**-5, 2.0**-5, 1 - 2 * 2.0**-5)
    assert p.size == 29
    assert p[0] == 0.0625 and p[-1] == 0.9375
    assert F.axis_step(p) == 2.0**-5


def test_pow2_axis_rejects_bad_spans():
    with pytest.raises(ValueError):
        F.pow2_axis(0.0, 3.0, 9.0)
    with pytest.raises(ValueError):
        F.pow2_axis(0.0, 2.0, 5.0)
    with pytest.raises(ValueError):
        F.pow2_axis(4.0, 2.0, 4.0)


def test_axis_step_uneven():
    assert F.axis_step([0.0, 1.0, 3.0]) is None
    assert F.axis_step([0.0]) is None


def test_out_of_domain():
    bad = F.out_of_domain([50.0, 1000.0], [32.0, 64.0, 1000.0, 1024.0])
    assert bad.tolist() == [32.0, 1024.0]
    assert F.out_of_domain([0.0, 1.0], [0.0, 0.5, 1.0]).size == 0


def test_clip_bound():
    assert F.clip_bound(0.0, 88.0, 3.0, 90.0) == (3.0, 88.0)
    assert F.clip_bound(0.05, 0.95, 0.05, 1.0) == (0.05, 0.95)


def test_locate_exact_nodes():
    axis = [0.0, 3.0, 6.0, 9.0, 12.0]
    idx, t = F.locate(axis, axis)
    assert idx.tolist() == [0, 1, 2, 3, 3]
    assert t.tolist() == [0.0, 0.0, 0.0, 0.0, 1.0]


def test_locate_between_nodes():
    idx, t = F.locate([50.0, 75.0, 100.0], [64.0, 87.5])
    assert idx.tolist() == [0, 1]
    assert t[0] == pytest.approx(0.56)
    assert t[1] == pytest.approx(0.5)


def test_interp1():
    out = F.interp1([0.0, 1.0, 2.0], [0.0, 10.0, 30.0], [0.0, 0.5, 1.5, 2.0])
    assert out.tolist() == [0.0, 5.0, 20.0, 30.0]


def test_bilinear_grid_reproduces_nodes_exactly():
    rng = np.random.default_rng(7)
    rows = np.array([50.0, 75.0, 100.0, 250.0, 1000.0])
    cols = np.array([0.05, 0.1, 0.35, 0.95])
    z = rng.normal(size=(rows.size, cols.size))
    assert np.array_equal(F.bilinear_grid(rows, cols, z, rows, cols), z)


def test_bilinear_is_exact_for_bilinear_functions():
    rows = np.array([0.0, 1.0, 4.0, 10.0])
    cols = np.array([0.0, 0.5, 2.0])
    z = 2.0 * rows[:, None] + 3.0 * cols[None, :] + 0.5 * rows[:, None] * cols[None, :]
    r, c = 2.5, 1.25
    assert F.bilinear(rows, cols, z, r, c) == pytest.approx(2 * r + 3 * c + 0.5 * r * c, abs=1e-12)


def test_bilinear_stays_within_cell_corners():
    rng = np.random.default_rng(0)
    rows = np.array([50.0, 75.0, 100.0, 125.0, 150.0, 600.0])
    cols = np.array([0.0, 3.0, 6.0, 35.0, 90.0])
    z = rng.uniform(-1.0, 1.0, size=(rows.size, cols.size))
    qr = rng.uniform(rows[0], rows[-1], size=40)
    qc = rng.uniform(cols[0], cols[-1], size=40)
    grid = F.bilinear_grid(rows, cols, z, qr, qc)
    ri, _ = F.locate(rows, qr)
    ci, _ = F.locate(cols, qc)
    for a in range(qr.size):
        for b in range(qc.size):
            corners = z[ri[a]:ri[a] + 2, ci[b]:ci[b] + 2]
            assert corners.min() - 1e-12 <= grid[a, b] <= corners.max() + 1e-12


def test_ramp_rate_table():
    z = F.ramp_rate_table(6, 6, 0.012)
    assert z.shape == (6, 6)
    assert z[0, 0] == 0.012
    assert z[5, 5] == 36 * 0.012
    assert z[2, 4] == 15 * 0.012
    with pytest.raises(ValueError):
        F.ramp_rate_table(0, 3, 1.0)

"""
Breakpoint and lookup-table math (numpy, no state).

Conventions:
  - axes are 1-D, strictly increasing float arrays
  - 2-D tables are indexed [row_axis][col_axis]
  - queries handed to locate()/resample helpers must already lie inside the
    axis domain; use out_of_domain() first, nothing here extrapolates
"""
from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np


# =============================
# Axis helpers
# =============================

def is_power_of_two(x: float) -> bool:
    """True when x == 2**k for an integer k (k may be negative)."""
    if not math.isfinite(x) or x <= 0:
        return False
    mantissa, _ = math.frexp(x)
    return mantissa == 0.5


def pow2_axis(start: float, step: float, stop: float) -> np.ndarray:
    """
    Evenly spaced axis start, start+step, ..., stop.
    Args:
        start: first breakpoint
        step: spacing, must be a power of two
        stop: last breakpoint, a whole number of steps after start
    Returns:
        np.ndarray: breakpoints, computed as start + k*step (no accumulation)
    """
    if not is_power_of_two(step):
        raise ValueError(f"step {step!r} is not a power of two")
    n_steps = (stop - start) / step
    count = int(round(n_steps))
    if count < 1 or abs(n_steps - count) > 1e-9:
        raise ValueError(f"span {start!r}..{stop!r} is not a whole number of {step!r} steps")
    return start + step * np.arange(count + 1, dtype=float)


def axis_step(axis: Sequence[float]) -> float | None:
    """Return the constant step of an evenly spaced axis, else None."""
    a = np.asarray(axis, dtype=float)
    if a.size < 2:
        return None
    d = np.diff(a)
    if np.all(d == d[0]):
        return float(d[0])
    return None


def out_of_domain(axis: Sequence[float], query: Sequence[float]) -> np.ndarray:
    """Return the query values lying outside [min(axis), max(axis)]."""
    a = np.asarray(axis, dtype=float)
    q = np.atleast_1d(np.asarray(query, dtype=float))
    mask = (q < a[0]) | (q > a[-1]) | ~np.isfinite(q)
    return q[mask]


def clip_bound(lo: float, hi: float, floor: float, ceil: float) -> Tuple[float, float]:
    """(max(lo, floor), min(hi, ceil)) as plain floats."""
    return (float(max(lo, floor)), float(min(hi, ceil)))


# =============================
# Interpolation
# =============================

def locate(axis: Sequence[float], query: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Enclosing cell for each query point (binary search).
    Returns:
        (idx, t): lower breakpoint index and normalized distance in [0, 1]
        towards idx+1. A query equal to a breakpoint resolves to that node
        with t exactly 0 (or exactly 1 on the final breakpoint).
    """
    a = np.asarray(axis, dtype=float)
    q = np.atleast_1d(np.asarray(query, dtype=float))
    idx = np.searchsorted(a, q, side="right") - 1
    idx = np.clip(idx, 0, a.size - 2)
    lo = a[idx]
    hi = a[idx + 1]
    t = (q - lo) / (hi - lo)
    t = np.where(q == lo, 0.0, t)
    t = np.where(q == hi, 1.0, t)
    return idx, t


def interp1(axis: Sequence[float], values: Sequence[float], query: Sequence[float]) -> np.ndarray:
    """Linear interpolation of a 1-D table at in-domain query points."""
    v = np.asarray(values, dtype=float)
    idx, t = locate(axis, query)
    return (1.0 - t) * v[idx] + t * v[idx + 1]


def bilinear_grid(row_axis: Sequence[float], col_axis: Sequence[float], table,
                  new_rows: Sequence[float], new_cols: Sequence[float]) -> np.ndarray:
    """
    Resample a 2-D table onto the grid new_rows x new_cols.
        z = (1-tr)*[(1-tc)*z00 + tc*z01] + tr*[(1-tc)*z10 + tc*z11]
    Args:
        row_axis, col_axis: original breakpoints of table
        table: array-like of shape (len(row_axis), len(col_axis))
        new_rows, new_cols: in-domain query breakpoints
    Returns:
        np.ndarray of shape (len(new_rows), len(new_cols))
    """
    z = np.asarray(table, dtype=float)
    ri, rt = locate(row_axis, new_rows)
    ci, ct = locate(col_axis, new_cols)
    z00 = z[np.ix_(ri, ci)]
    z01 = z[np.ix_(ri, ci + 1)]
    z10 = z[np.ix_(ri + 1, ci)]
    z11 = z[np.ix_(ri + 1, ci + 1)]
    tc = ct[np.newaxis, :]
    tr = rt[:, np.newaxis]
    top = (1.0 - tc) * z00 + tc * z01
    bottom = (1.0 - tc) * z10 + tc * z11
    return (1.0 - tr) * top + tr * bottom


def bilinear(row_axis: Sequence[float], col_axis: Sequence[float], table, r: float, c: float) -> float:
    """Single-point bilinear lookup; see bilinear_grid."""
    return float(bilinear_grid(row_axis, col_axis, table, [r], [c])[0, 0])


# =============================
# Analytic tables
# =============================

def ramp_rate_table(m: int, n: int, gain: float) -> np.ndarray:
    """
    Ramp-rate gain table: Z[i-1, j-1] = (i * j) * gain for 1-indexed i <= m, j <= n.
    Depends only on axis lengths, never on breakpoint values.
    """
    if m < 1 or n < 1:
        raise ValueError("m, n >= 1")
    return np.outer(np.arange(1, m + 1), np.arange(1, n + 1)) * gain

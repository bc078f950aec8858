"""
Breakpoint remapping for the fuel-system tables.

  - orig: canonical (mostly uneven) breakpoints, copied through unchanged
  - pow2: evenly spaced power-of-two breakpoints; sampled tables are
    bilinearly resampled from the canonical data, the ramp-rate table is
    recomputed from axis indices

Every call starts from canonical_dataset(); a derived dataset is never
derived again.
"""
from __future__ import annotations

import logging
from typing import Dict, Mapping, NamedTuple, Optional

import numpy as np

from . import anchors
from . import calibration as CAL
from . import formulas as F
from .errors import ConfigError, RangeError
from .schemas import (
    BreakpointAxis, BreakpointLayout, Bound, Dataset, FixedPointValue,
    RangeBounds, ScalarConstants, Table,
)
from .table_data import ANALYTIC_TABLES, canonical_dataset, make_axis

logger = logging.getLogger(__name__)


class RemapResult(NamedTuple):
    dataset: Dataset
    bounds: RangeBounds
    scalars: ScalarConstants


def parse_layout(layout: BreakpointLayout | str) -> BreakpointLayout:
    if isinstance(layout, BreakpointLayout):
        return layout
    try:
        return BreakpointLayout(str(layout).strip().lower())
    except ValueError:
        raise ConfigError(f"unknown breakpoint layout: {layout!r}") from None


def remap(layout: BreakpointLayout | str) -> RemapResult:
    """Build the dataset, range bounds and scalar constants for a layout."""
    layout = parse_layout(layout)
    if layout is BreakpointLayout.ORIGINAL:
        dataset = canonical_dataset()
    elif layout is BreakpointLayout.POW2:
        dataset = pow2_dataset(canonical_dataset())
    else:
        raise ConfigError(f"unknown breakpoint layout: {layout!r}")
    return RemapResult(dataset, range_bounds(dataset), scalar_constants())


def pow2_axes(specs: Mapping[str, tuple[float, float, float]] = anchors.POW2_AXES) -> Dict[str, BreakpointAxis]:
    return {name: make_axis(name, F.pow2_axis(*spec)) for name, spec in specs.items()}


def pow2_dataset(source: Dataset,
                 specs: Mapping[str, tuple[float, float, float]] = anchors.POW2_AXES) -> Dataset:
    """Resample source onto the power-of-two grids described by specs.

    Raises RangeError before computing anything if a synthesized breakpoint
    falls outside the domain of a table that is interpolated against it.
    """
    axes = pow2_axes(specs)
    for table in source.tables.values():
        if table.name not in ANALYTIC_TABLES:
            check_domain(table, source.axes, axes)

    tables: Dict[str, Table] = {}
    for name, table in source.tables.items():
        if name in ANALYTIC_TABLES:
            rows, cols = table.axes
            z = F.ramp_rate_table(axes[rows].size, axes[cols].size, source.ki)
        else:
            z = resample_table(table, source.axes, axes)
        values = tuple(map(tuple, z.tolist())) if z.ndim == 2 else tuple(z.tolist())
        tables[name] = Table(name=name, unit=table.unit, axes=table.axes, values=values)
    logger.info("remapped %d tables onto power-of-two breakpoints", len(tables))
    return Dataset(layout=BreakpointLayout.POW2, axes=axes, tables=tables, ki=source.ki)


def check_domain(table: Table, old_axes: Mapping[str, BreakpointAxis],
                 new_axes: Mapping[str, BreakpointAxis]) -> None:
    for axis_name in table.axes:
        old = old_axes[axis_name]
        bad = F.out_of_domain(old.values, new_axes[axis_name].values)
        if bad.size:
            raise RangeError(
                f"{table.name}: {axis_name} breakpoints {bad.tolist()} lie outside "
                f"the sampled domain [{old.min}, {old.max}]"
            )


def resample_table(table: Table, old_axes: Mapping[str, BreakpointAxis],
                   new_axes: Mapping[str, BreakpointAxis]) -> np.ndarray:
    """Interpolate table from its old axes onto the same-named new axes.

    Callers run check_domain() first; see pow2_dataset().
    """
    if len(table.axes) == 1:
        (a,) = table.axes
        return F.interp1(old_axes[a].values, table.values, new_axes[a].values)
    r, c = table.axes
    return F.bilinear_grid(
        old_axes[r].values, old_axes[c].values, table.values,
        new_axes[r].values, new_axes[c].values,
    )


def _bound(lo: float, hi: float) -> Bound:
    return Bound(min=lo, max=hi)


def range_bounds(dataset: Dataset) -> RangeBounds:
    """Operating ranges from the active axes, clipped to the physical envelopes."""
    press = dataset.axes["PressVect"]
    speed = dataset.axes["SpeedVect"]
    throt = dataset.axes["ThrotVect"]
    return RangeBounds(
        pressure=_bound(*F.clip_bound(press.min, press.max, CAL.PRESS_FLOOR, CAL.PRESS_CEIL)),
        speed=_bound(float(max(speed.min, CAL.SPEED_FLOOR)), CAL.SPEED_MAX),
        throttle=_bound(*F.clip_bound(throt.min, throt.max, CAL.THROT_FLOOR, CAL.THROT_CEIL)),
        ego=_bound(0.0, CAL.EGO_MAX),
    )


def scalar_constants(st_range: Optional[float | FixedPointValue] = None) -> ScalarConstants:
    """Fixed scalars read from calibration at call time."""
    return ScalarConstants(
        hys=CAL.HYS,
        zero_thresh=CAL.ZERO_THRESH,
        st_range=CAL.ST_RANGE if st_range is None else st_range,
        throttle_sw=CAL.THROTTLE_SW,
        speed_sw=CAL.SPEED_SW,
        ego_sw=CAL.EGO_SW,
        map_sw=CAL.MAP_SW,
        engine_speed=CAL.ENGINE_SPEED,
    )

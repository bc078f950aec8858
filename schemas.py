from __future__ import annotations

import math
from enum import Enum
from typing import Annotated, Dict, Literal, Optional, Tuple, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator


# Variant selectors
class BreakpointLayout(str, Enum):
    ORIGINAL = "orig"
    POW2 = "pow2"


class NumericKind(str, Enum):
    FLOAT = "float"
    FIXED = "fixed"


FormatSlot = Literal["u8En7", "s16En3", "s16En7", "s16En15"]
FORMAT_SLOTS: Tuple[str, ...] = ("u8En7", "s16En3", "s16En7", "s16En15")


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# Tables
class BreakpointAxis(_Frozen):
    name: str
    unit: str = ""
    values: Tuple[float, ...]

    @field_validator("values")
    @classmethod
    def _strictly_increasing(cls, v: Tuple[float, ...]) -> Tuple[float, ...]:
        if len(v) < 2:
            raise ValueError("breakpoint axis needs at least 2 values")
        if not all(math.isfinite(x) for x in v):
            raise ValueError("breakpoint axis values must be finite")
        if any(b <= a for a, b in zip(v, v[1:])):
            raise ValueError("breakpoint axis must be strictly increasing")
        return v

    @property
    def size(self) -> int:
        return len(self.values)

    @property
    def min(self) -> float:
        return self.values[0]

    @property
    def max(self) -> float:
        return self.values[-1]

    def array(self) -> np.ndarray:
        return np.asarray(self.values, dtype=float)


class Table(_Frozen):
    """Lookup table indexed by one axis (flat values) or two axes (rows, then columns).

    The shipped tables are all 2-D. One-axis tables stay part of the model so a
    dataset loaded through io.dataset_from_dict may carry a curve next to the maps;
    remap, io and the viewer handle both.
    """
    name: str
    unit: str = ""
    axes: Tuple[str, ...]
    values: Union[Tuple[Tuple[float, ...], ...], Tuple[float, ...]]

    @model_validator(mode="after")
    def _rectangular(self) -> "Table":
        if len(self.axes) not in (1, 2):
            raise ValueError(f"table {self.name!r} must have 1 or 2 axes")
        nested = bool(self.values) and isinstance(self.values[0], tuple)
        if (len(self.axes) == 2) != nested:
            raise ValueError(f"table {self.name!r}: values do not match {len(self.axes)}-D axes")
        rows = self.values if nested else (self.values,)
        if nested and len({len(r) for r in rows}) > 1:
            raise ValueError(f"table {self.name!r} is not rectangular")
        if not all(math.isfinite(x) for r in rows for x in r):
            raise ValueError(f"table {self.name!r} has missing or non-finite entries")
        return self

    @property
    def shape(self) -> Tuple[int, ...]:
        if len(self.axes) == 1:
            return (len(self.values),)
        return (len(self.values), len(self.values[0]) if self.values else 0)

    def array(self) -> np.ndarray:
        return np.asarray(self.values, dtype=float)


class Dataset(_Frozen):
    layout: BreakpointLayout
    axes: Dict[str, BreakpointAxis]
    tables: Dict[str, Table]
    ki: float

    @model_validator(mode="after")
    def _tables_match_axes(self) -> "Dataset":
        for key, axis in self.axes.items():
            if axis.name != key:
                raise ValueError(f"axis stored under {key!r} is named {axis.name!r}")
        for key, table in self.tables.items():
            if table.name != key:
                raise ValueError(f"table stored under {key!r} is named {table.name!r}")
            missing = [a for a in table.axes if a not in self.axes]
            if missing:
                raise ValueError(f"table {key!r} references axes outside the dataset: {missing}")
            expected = tuple(self.axes[a].size for a in table.axes)
            if table.shape != expected:
                raise ValueError(f"table {key!r} has shape {table.shape}, axes imply {expected}")
        return self


# Numeric formats
class FloatingFormat(_Frozen):
    kind: Literal["float"] = "float"
    precision: Literal["single"] = "single"

    @property
    def name(self) -> str:
        return self.precision


class FixedFormat(_Frozen):
    kind: Literal["fixed"] = "fixed"
    signed: bool
    total_bits: Annotated[int, Field(ge=2, le=64)]
    fraction_bits: Annotated[int, Field(ge=0)]

    @property
    def name(self) -> str:
        return f"{'s' if self.signed else 'u'}fix{self.total_bits}_En{self.fraction_bits}"

    @property
    def resolution(self) -> float:
        return 2.0 ** -self.fraction_bits

    @property
    def min_stored_integer(self) -> int:
        return -(1 << (self.total_bits - 1)) if self.signed else 0

    @property
    def max_stored_integer(self) -> int:
        if self.signed:
            return (1 << (self.total_bits - 1)) - 1
        return (1 << self.total_bits) - 1

    @property
    def min_value(self) -> float:
        return self.min_stored_integer * self.resolution

    @property
    def max_value(self) -> float:
        return self.max_stored_integer * self.resolution


NumericFormat = Annotated[Union[FloatingFormat, FixedFormat], Field(discriminator="kind")]


class FixedPointValue(_Frozen):
    format: FixedFormat
    stored_integer: int

    @computed_field  # type: ignore[misc]
    @property
    def value(self) -> float:
        return self.stored_integer * self.format.resolution


# Ranges and scalars
class Bound(_Frozen):
    min: float
    max: float

    @model_validator(mode="after")
    def _ordered(self) -> "Bound":
        if self.min > self.max:
            raise ValueError(f"bound min {self.min} exceeds max {self.max}")
        return self


class RangeBounds(_Frozen):
    pressure: Bound
    speed: Bound
    throttle: Bound
    ego: Bound


class ScalarConstants(_Frozen):
    hys: float
    zero_thresh: float
    st_range: Union[FixedPointValue, float]
    throttle_sw: int
    speed_sw: int
    ego_sw: int
    map_sw: int
    engine_speed: float


# Lookup block parameters
class LookupSettings(_Frozen):
    index_search: Literal["Linear search", "Evenly spaced points"]
    interp_method: Literal["Linear", "None - Flat"]
    extrap_method: Optional[Literal["None - Clip", "Linear"]] = None
    use_last_table_value: Optional[bool] = None
    out_of_range: Literal["None", "Warning", "Error"] = "None"


# Sensor bus
class BusElement(_Frozen):
    name: str
    unit: str
    slot: FormatSlot
    data_type: NumericFormat


class BusSchema(_Frozen):
    name: str
    elements: Tuple[BusElement, ...]


class ConfigurationState(_Frozen):
    layout: BreakpointLayout
    numeric_kind: NumericKind
    dataset: Dataset
    formats: Dict[FormatSlot, NumericFormat]
    bounds: RangeBounds
    scalars: ScalarConstants
    lookup: LookupSettings
    bus: BusSchema

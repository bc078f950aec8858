"""
Numeric representation for the controller signals.

Four format slots are published. Slot names are historical storage names;
what matters is the quantity each one carries:

  u8En7    intake manifold pressure
  s16En3   throttle angle and engine speed sensors
  s16En7   O2 (EGO) sensor voltage
  s16En15  high-resolution residuals, e.g. the state-range epsilon
"""
from __future__ import annotations

import logging
from typing import Dict

import numpy as np

from . import calibration as CAL
from .errors import ConfigError, QuantizationError
from .schemas import (
    BusElement, BusSchema, FixedFormat, FixedPointValue, FloatingFormat,
    FORMAT_SLOTS, NumericFormat, NumericKind,
)

logger = logging.getLogger(__name__)

SLOT_QUANTITIES: Dict[str, str] = {
    "u8En7": "manifold pressure",
    "s16En3": "throttle / speed sensors",
    "s16En7": "O2 sensor voltage",
    "s16En15": "high-resolution residual",
}

# slot -> (signed, total_bits, fraction_bits)
FIXED_LAYOUT: Dict[str, tuple[bool, int, int]] = {
    "u8En7": (False, 8, 7),
    "s16En3": (True, 16, 3),
    "s16En7": (True, 16, 7),
    "s16En15": (True, 16, 15),
}

# EngSensors bus: element -> (slot, unit)
SENSOR_BUS_LAYOUT: tuple[tuple[str, str, str], ...] = (
    ("throttle", "s16En3", "deg"),
    ("speed", "s16En3", "rad/s"),
    ("ego", "s16En7", "V"),
    ("map", "u8En7", "bar"),
)


def parse_kind(kind: NumericKind | str) -> NumericKind:
    if isinstance(kind, NumericKind):
        return kind
    try:
        return NumericKind(str(kind).strip().lower())
    except ValueError:
        raise ConfigError(f"unknown numeric representation: {kind!r}") from None


def select(kind: NumericKind | str) -> Dict[str, NumericFormat]:
    """Resolve all four format slots for a representation choice."""
    kind = parse_kind(kind)
    if kind is NumericKind.FLOAT:
        single = FloatingFormat()
        return {slot: single for slot in FORMAT_SLOTS}
    if kind is NumericKind.FIXED:
        return {
            slot: FixedFormat(signed=s, total_bits=w, fraction_bits=f)
            for slot, (s, w, f) in FIXED_LAYOUT.items()
        }
    raise ConfigError(f"unknown numeric representation: {kind!r}")


def quantize(value: float, fmt: FixedFormat) -> FixedPointValue:
    """
    Round value to the nearest representable step of fmt (ties toward +inf).
        stored = floor(value * 2^f + 0.5)
    Raises QuantizationError instead of saturating when stored falls outside
    the format's integer range.
    """
    if not np.isfinite(value):
        raise QuantizationError(f"cannot quantize non-finite value {value!r} into {fmt.name}")
    stored = int(np.floor(np.ldexp(float(value), fmt.fraction_bits) + 0.5))
    if stored < fmt.min_stored_integer or stored > fmt.max_stored_integer:
        raise QuantizationError(
            f"{value!r} overflows {fmt.name} "
            f"(representable range {fmt.min_value!r}..{fmt.max_value!r})"
        )
    q = FixedPointValue(format=fmt, stored_integer=stored)
    logger.debug("quantized %r -> %s stored=%d (%r)", value, fmt.name, stored, q.value)
    return q


def state_range_value(formats: Dict[str, NumericFormat]) -> float | FixedPointValue:
    """State-range epsilon expressed in whatever s16En15 resolves to."""
    fmt = formats["s16En15"]
    if isinstance(fmt, FixedFormat):
        return quantize(CAL.ST_RANGE, fmt)
    return float(CAL.ST_RANGE)


def sensor_bus(formats: Dict[str, NumericFormat]) -> BusSchema:
    """EngSensors bus whose element types follow the selected slots."""
    elements = tuple(
        BusElement(name=name, unit=unit, slot=slot, data_type=formats[slot])
        for name, slot, unit in SENSOR_BUS_LAYOUT
    )
    return BusSchema(name="EngSensors", elements=elements)

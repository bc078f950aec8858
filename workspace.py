"""
Workspace that downstream consumers read the calibration values from.

publish() builds the complete name -> value mapping first and then swaps it
in with a single reference assignment, so a reader observes either the old
set or the new set, never a mixture. The workspace does no locking of its
own: there is one writer, and callers serialize publishes against reads.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, NamedTuple, Optional, Protocol

import numpy as np

from .lookup_policy import apply_lookup_settings
from .schemas import ConfigurationState, LookupSettings

logger = logging.getLogger(__name__)

# Names every consumer may rely on, independent of layout and representation
TABLE_NAMES = ("PressEst", "PumpCon", "SpeedEst", "ThrotEst", "RampRateKiZ")
AXIS_NAMES = ("PressVect", "SpeedVect", "ThrotVect", "RampRateKiX", "RampRateKiY")
SCALAR_NAMES = (
    "hys", "max_ego", "min_press", "max_press", "min_speed", "max_speed",
    "min_throt", "max_throt", "st_range", "zero_thresh",
    "throttle_sw", "speed_sw", "ego_sw", "map_sw", "engine_speed",
)
FORMAT_NAMES = ("u8En7", "s16En3", "s16En7", "s16En15")
BUS_NAMES = ("EngSensors",)
PUBLISHED_NAMES = TABLE_NAMES + AXIS_NAMES + SCALAR_NAMES + FORMAT_NAMES + BUS_NAMES


class ConfigurationSink(Protocol):
    """What the engine needs from a publish target."""

    @property
    def state(self) -> Optional[ConfigurationState]: ...

    def publish(self, state: ConfigurationState) -> None: ...


class _Published(NamedTuple):
    state: Optional[ConfigurationState]
    values: Mapping[str, Any]
    lookup_blocks: Mapping[str, Optional[LookupSettings]]


def _frozen_array(values) -> np.ndarray:
    a = np.array(values, dtype=float)
    a.setflags(write=False)
    return a


def published_values(state: ConfigurationState) -> Dict[str, Any]:
    """Flatten a configuration into the fixed workspace names."""
    ds = state.dataset
    b = state.bounds
    s = state.scalars
    out: Dict[str, Any] = {}
    for name in TABLE_NAMES:
        out[name] = _frozen_array(ds.tables[name].values)
    for name in AXIS_NAMES:
        out[name] = _frozen_array(ds.axes[name].values)
    out.update(
        hys=s.hys,
        max_ego=b.ego.max,
        min_press=b.pressure.min,
        max_press=b.pressure.max,
        min_speed=b.speed.min,
        max_speed=b.speed.max,
        min_throt=b.throttle.min,
        max_throt=b.throttle.max,
        st_range=s.st_range,
        zero_thresh=s.zero_thresh,
        throttle_sw=s.throttle_sw,
        speed_sw=s.speed_sw,
        ego_sw=s.ego_sw,
        map_sw=s.map_sw,
        engine_speed=s.engine_speed,
    )
    for slot in FORMAT_NAMES:
        out[slot] = state.formats[slot]
    out["EngSensors"] = state.bus
    return out


class Workspace:
    """In-process publish target with atomic whole-state replacement."""

    def __init__(self) -> None:
        self._published = _Published(None, MappingProxyType({}), MappingProxyType({}))

    # Readers
    @property
    def state(self) -> Optional[ConfigurationState]:
        return self._published.state

    @property
    def lookup_blocks(self) -> Mapping[str, Optional[LookupSettings]]:
        return self._published.lookup_blocks

    def snapshot(self) -> Mapping[str, Any]:
        """Read-only view of every published name; stays valid across later publishes."""
        return self._published.values

    def get(self, name: str, default: Any = None) -> Any:
        return self._published.values.get(name, default)

    def names(self) -> list[str]:
        return list(self._published.values.keys())

    def __getitem__(self, name: str) -> Any:
        return self._published.values[name]

    def __contains__(self, name: object) -> bool:
        return name in self._published.values

    def __iter__(self) -> Iterator[str]:
        return iter(self._published.values)

    # Writer
    def register_lookup_block(self, name: str) -> None:
        """Register a table-lookup consumer; it receives settings on the next publish."""
        cur = self._published
        if name in cur.lookup_blocks:
            return
        blocks = dict(cur.lookup_blocks)
        blocks[name] = None
        self._published = cur._replace(lookup_blocks=MappingProxyType(blocks))

    def publish(self, state: ConfigurationState) -> None:
        """Clear every previously published name and assign the new set in one step."""
        values = MappingProxyType(published_values(state))
        blocks = MappingProxyType(apply_lookup_settings(self._published.lookup_blocks, state.lookup))
        self._published = _Published(state, values, blocks)
        logger.info(
            "published %d names (layout=%s, numeric=%s, lookup blocks=%d)",
            len(values), state.layout.value, state.numeric_kind.value, len(blocks),
        )

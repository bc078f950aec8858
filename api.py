"""
Thin, stable API for model-side collaborators (diagram tool, demo launcher, UI).

Contracts (published names and these signatures are stable):
  - configure(workspace, layout, numeric_kind) -> ConfigurationState
  - remap(workspace, layout) -> ConfigurationState
  - select_numeric(workspace, numeric_kind) -> ConfigurationState
  - canonical_dataset() -> Dataset

layout is "orig" or "pow2"; numeric_kind is "float" or "fixed" (enum members
are accepted too). Every call rebuilds the whole configuration from the
canonical tables and publishes it in one step. Any failure is raised before
publish, so the workspace keeps its previous state.
"""
from __future__ import annotations

import logging

from . import numeric_types as NT
from . import remap as R
from . import table_data
from .errors import CalibrationError, ConfigError
from .lookup_policy import lookup_settings
from .schemas import BreakpointLayout, ConfigurationState, Dataset, NumericKind
from .workspace import ConfigurationSink

logger = logging.getLogger(__name__)


def build_state(layout: BreakpointLayout | str, numeric_kind: NumericKind | str) -> ConfigurationState:
    """Compute a complete configuration without publishing it."""
    layout = R.parse_layout(layout)
    kind = NT.parse_kind(numeric_kind)
    formats = NT.select(kind)
    st_range = NT.state_range_value(formats)
    dataset, bounds, _ = R.remap(layout)
    return ConfigurationState(
        layout=layout,
        numeric_kind=kind,
        dataset=dataset,
        formats=formats,
        bounds=bounds,
        scalars=R.scalar_constants(st_range),
        lookup=lookup_settings(layout),
        bus=NT.sensor_bus(formats),
    )


def _publish(workspace: ConfigurationSink, layout, numeric_kind, op: str) -> ConfigurationState:
    try:
        state = build_state(layout, numeric_kind)
    except CalibrationError:
        logger.exception("%s failed; published state left unchanged", op)
        raise
    workspace.publish(state)
    return state


def _current(workspace: ConfigurationSink) -> ConfigurationState:
    state = workspace.state
    if state is None:
        raise ConfigError("workspace has not been configured; call configure() first")
    return state


def configure(workspace: ConfigurationSink, layout: BreakpointLayout | str,
              numeric_kind: NumericKind | str) -> ConfigurationState:
    """Full initialization: tables, ranges, scalars, formats and lookup settings."""
    return _publish(workspace, layout, numeric_kind, "configure")


def remap(workspace: ConfigurationSink, layout: BreakpointLayout | str) -> ConfigurationState:
    """Switch breakpoint layout, keeping the published numeric representation."""
    return _publish(workspace, layout, _current(workspace).numeric_kind, "remap")


def select_numeric(workspace: ConfigurationSink, numeric_kind: NumericKind | str) -> ConfigurationState:
    """Switch numeric representation, keeping the published breakpoint layout."""
    return _publish(workspace, _current(workspace).layout, numeric_kind, "select_numeric")


def canonical_dataset() -> Dataset:
    """Original table data, independent of anything published."""
    return table_data.canonical_dataset()


# Name used by the original data-management routine
get_table_data = canonical_dataset

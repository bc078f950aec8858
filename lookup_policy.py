"""
Block-level lookup parameters per breakpoint layout.

Evenly spaced power-of-two axes let a consumer compute the table index
directly instead of searching, at the cost of flat (nearest) output.
"""
from __future__ import annotations

from typing import Dict, Mapping, Optional

from .remap import parse_layout
from .schemas import BreakpointLayout, LookupSettings

LOOKUP_POLICY: Dict[BreakpointLayout, LookupSettings] = {
    BreakpointLayout.ORIGINAL: LookupSettings(
        index_search="Linear search",
        interp_method="Linear",
        extrap_method="None - Clip",
        use_last_table_value=True,
        out_of_range="None",
    ),
    # extrapolation and last-value handling are left as the block had them
    BreakpointLayout.POW2: LookupSettings(
        index_search="Evenly spaced points",
        interp_method="None - Flat",
        out_of_range="None",
    ),
}

_CARRIED_OVER = ("extrap_method", "use_last_table_value")


def lookup_settings(layout: BreakpointLayout | str) -> LookupSettings:
    return LOOKUP_POLICY[parse_layout(layout)]


def merge_settings(previous: Optional[LookupSettings], settings: LookupSettings) -> LookupSettings:
    """Overlay settings on a block's previous parameters; None fields keep the old value."""
    if previous is None:
        return settings
    data = settings.model_dump()
    for key in _CARRIED_OVER:
        if data[key] is None:
            data[key] = getattr(previous, key)
    return LookupSettings(**data)


def apply_lookup_settings(blocks: Mapping[str, Optional[LookupSettings]],
                          settings: LookupSettings) -> Dict[str, LookupSettings]:
    """Return the new parameters for every registered lookup block."""
    return {name: merge_settings(prev, settings) for name, prev in blocks.items()}

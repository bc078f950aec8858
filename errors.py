"""
Error taxonomy for the calibration engine.

All of these are raised before anything is published, so a failed call
leaves the workspace exactly as it was.
"""
from __future__ import annotations


class CalibrationError(Exception):
    """Base class for controlled configuration failures."""
    pass


class ConfigError(CalibrationError):
    """Unknown layout or numeric-kind variant, or an unconfigured workspace."""
    pass


class RangeError(CalibrationError):
    """A synthesized breakpoint falls outside the domain of a table being resampled."""
    pass


class QuantizationError(CalibrationError):
    """A scalar cannot be represented in the selected fixed-point format."""
    pass

"""
Frozen anchor set for fuel-system calibration constants with brief origin notes.

These values document the scalar parameters published next to the lookup
tables and the fixed envelopes used to clip operating ranges. Tests assert no
drift relative to these values. Update this file deliberately when retuning.
"""

ANCHORS: dict[str, float | int | str] = {
    # Switching logic
    "HYS": 25,                   # rad/s, sensor-fault hysteresis
    "ZERO_THRESH": 250,          # rad/s, zero-signal threshold
    "ST_RANGE": 0.0001,          # state-range epsilon (re-quantized for fixed point)

    # Fault-injection switches (1 = sensor healthy / enabled)
    "THROTTLE_SW": 1,
    "SPEED_SW": 1,
    "EGO_SW": 1,
    "MAP_SW": 1,

    # Baseline plant input
    "ENGINE_SPEED": 300,         # rad/s

    # Physical envelopes for operating range clipping
    "PRESS_FLOOR": 0.05,         # bar
    "PRESS_CEIL": 1.0,           # bar
    "SPEED_FLOOR": 0.0,          # rad/s
    "SPEED_MAX": 628.0,          # rad/s, fixed regardless of layout
    "THROT_FLOOR": 3.0,          # deg
    "THROT_CEIL": 90.0,          # deg
    "EGO_MAX": 1.2,              # V, fixed regardless of layout

    # Ramp-rate integrator gain
    "KI": 0.012,
}

# Power-of-two breakpoint grids: (start, step, stop), every step a power of two
POW2_AXES: dict[str, tuple[float, float, float]] = {
    "SpeedVect": (64.0, 2.0**5, 640.0),                      # 32 rad/s
    "PressVect": (2 * 2.0**-5, 2.0**-5, 1 - 2 * 2.0**-5),    # ~0.03 bar
    "ThrotVect": (0.0, 2.0**1, 88.0),                        # 2 deg
    "RampRateKiX": (128.0, 2.0**7, 640.0),                   # 128 rad/s
    "RampRateKiY": (0.0, 2.0**-2, 1.0),                      # 0.25 bar
}

# Origins (free-text for docs)
ORIGINS: dict[str, str] = {
    "SPEED_MAX": "Upper limit of the engine speed sensor check, 628 rad/s ≈ 6000 rpm",
    "EGO_MAX": "O2 sensor saturation voltage",
    "ST_RANGE": "Check-range tolerance; 3 LSB in sfix16_En15",
    "POW2_AXES": "Speed axis clipped to 64..640 so the pow2 grid stays inside the 50..1000 sample domain",
}

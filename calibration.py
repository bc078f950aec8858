"""
Centralized scalar constants published alongside the lookup tables.

Values are sourced from anchors.ANCHORS to stabilize calibration. Update
anchors.py deliberately when retuning and adjust tests accordingly.
"""
from .anchors import ANCHORS

# --- Switching logic ---
HYS: float = float(ANCHORS["HYS"])                  # [rad/s]
ZERO_THRESH: float = float(ANCHORS["ZERO_THRESH"])  # [rad/s]
ST_RANGE: float = float(ANCHORS["ST_RANGE"])        # 64-bit float literal

# --- Range envelopes ---
# min_x = max(min(axis), FLOOR); max_x = min(max(axis), CEIL)
PRESS_FLOOR: float = float(ANCHORS["PRESS_FLOOR"])  # [bar]
PRESS_CEIL: float = float(ANCHORS["PRESS_CEIL"])    # [bar]
SPEED_FLOOR: float = float(ANCHORS["SPEED_FLOOR"])  # [rad/s]
SPEED_MAX: float = float(ANCHORS["SPEED_MAX"])      # [rad/s], not axis derived
THROT_FLOOR: float = float(ANCHORS["THROT_FLOOR"])  # [deg]
THROT_CEIL: float = float(ANCHORS["THROT_CEIL"])    # [deg]
EGO_MAX: float = float(ANCHORS["EGO_MAX"])          # [V]

# --- Ramp-rate gain ---
KI: float = float(ANCHORS["KI"])

# --- Fault injection and plant input ---
# These are intentionally mutable; use the setters below from tests or tools.
THROTTLE_SW: int = int(ANCHORS["THROTTLE_SW"])
SPEED_SW: int = int(ANCHORS["SPEED_SW"])
EGO_SW: int = int(ANCHORS["EGO_SW"])
MAP_SW: int = int(ANCHORS["MAP_SW"])
ENGINE_SPEED: float = float(ANCHORS["ENGINE_SPEED"])  # [rad/s]


def set_engine_speed(speed_rad_s: float) -> None:
    """Override the baseline engine speed. Safe for tests.

    Only affects configurations built after the call.
    """
    global ENGINE_SPEED
    if speed_rad_s < 0:
        raise ValueError("speed_rad_s must be >= 0")
    ENGINE_SPEED = float(speed_rad_s)


def set_fault_switches(*, throttle=None, speed=None, ego=None, map=None) -> None:
    """Set fault-injection switches (1 = healthy, 0 = injected fault).

    Args left as None keep their current value.
    """
    global THROTTLE_SW, SPEED_SW, EGO_SW, MAP_SW
    for name, value in (("throttle", throttle), ("speed", speed), ("ego", ego), ("map", map)):
        if value is not None and value not in (0, 1):
            raise ValueError(f"{name} switch must be 0 or 1")
    if throttle is not None:
        THROTTLE_SW = int(throttle)
    if speed is not None:
        SPEED_SW = int(speed)
    if ego is not None:
        EGO_SW = int(ego)
    if map is not None:
        MAP_SW = int(map)


def reset() -> None:
    """Restore every mutable knob to its anchor value."""
    global THROTTLE_SW, SPEED_SW, EGO_SW, MAP_SW, ENGINE_SPEED
    THROTTLE_SW = int(ANCHORS["THROTTLE_SW"])
    SPEED_SW = int(ANCHORS["SPEED_SW"])
    EGO_SW = int(ANCHORS["EGO_SW"])
    MAP_SW = int(ANCHORS["MAP_SW"])
    ENGINE_SPEED = float(ANCHORS["ENGINE_SPEED"])

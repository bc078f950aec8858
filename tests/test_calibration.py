import pytest

from FuelsysDataTool import calibration as CAL
from FuelsysDataTool.anchors import ANCHORS, POW2_AXES


def test_calibration_matches_anchors():
    for key in ("HYS", "ZERO_THRESH", "ST_RANGE", "SPEED_MAX", "EGO_MAX", "KI",
                "PRESS_FLOOR", "PRESS_CEIL", "THROT_FLOOR", "THROT_CEIL", "ENGINE_SPEED"):
        assert float(getattr(CAL, key)) == float(ANCHORS[key]), key
    for key in ("THROTTLE_SW", "SPEED_SW", "EGO_SW", "MAP_SW"):
        assert getattr(CAL, key) == 1


def test_pow2_anchor_steps():
    assert POW2_AXES["SpeedVect"][1] == 32.0
    assert POW2_AXES["PressVect"][1] == 1 / 32
    assert POW2_AXES["ThrotVect"][1] == 2.0


def test_set_engine_speed():
    CAL.set_engine_speed(420)
    assert CAL.ENGINE_SPEED == 420.0
    with pytest.raises(ValueError):
        CAL.set_engine_speed(-1.0)
    assert CAL.ENGINE_SPEED == 420.0


def test_set_fault_switches():
    CAL.set_fault_switches(throttle=0)
    assert (CAL.THROTTLE_SW, CAL.SPEED_SW, CAL.EGO_SW, CAL.MAP_SW) == (0, 1, 1, 1)
    with pytest.raises(ValueError):
        CAL.set_fault_switches(speed=2)
    assert CAL.SPEED_SW == 1


def test_reset():
    CAL.set_fault_switches(throttle=0, speed=0, ego=0, map=0)
    CAL.set_engine_speed(0)
    CAL.reset()
    assert (CAL.THROTTLE_SW, CAL.SPEED_SW, CAL.EGO_SW, CAL.MAP_SW) == (1, 1, 1, 1)
    assert CAL.ENGINE_SPEED == 300.0

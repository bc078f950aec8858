"""
Pytest configuration for the FuelsysDataTool test suite.

Calibration knobs are module-level and mutable; every test starts from the
anchor values.
"""
import pytest

from FuelsysDataTool import calibration as CAL
from FuelsysDataTool.workspace import Workspace


@pytest.fixture(autouse=True)
def _reset_calibration():
    CAL.reset()
    yield
    CAL.reset()


@pytest.fixture
def ws():
    return Workspace()

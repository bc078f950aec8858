"""
Fuel-system calibration data: canonical lookup tables, power-of-two
breakpoint remapping, numeric type selection and atomic workspace publish.

Entry points live in FuelsysDataTool.api (programmatic) and
FuelsysDataTool.cli (command line).
"""

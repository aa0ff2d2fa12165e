"""Physical unit conversion factors used by the field containers."""

MPH_PER_KNOT = 1.15077945
MPS_PER_KNOT = 0.51444444
KMPH_PER_KNOT = 1.852

MILES_PER_METER = 0.00062137112
KM_PER_METER = 0.001
FEET_PER_METER = 3.2808399

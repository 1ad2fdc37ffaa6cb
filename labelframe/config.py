# labelframe/config.py
import os

# Allowed error when comparing dimensions (0.5pt ~= .007in ~= .2mm)
EPSILON = 0.5

PTS_PER_INCH = 72.0

# id -> (display name, points per unit)
UNITS = {
    "pt": ("pt", 1.0),
    "in": ("in", PTS_PER_INCH),
    "mm": ("mm", PTS_PER_INCH / 25.4),
    "cm": ("cm", PTS_PER_INCH / 2.54),
    "pc": ("pc", 12.0),
}

DEFAULT_UNITS = "pt"

FRACTION_EPSILON = 0.00005
FRACTION_DENOMINATORS = (1, 2, 3, 4, 8, 16, 32)

LOG_LEVEL = os.environ.get("LABELFRAME_LOG_LEVEL", "WARNING").upper()

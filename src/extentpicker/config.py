# config.py
# Defaults for the initial map view, rounding, map styling and data cache

import os

DEFAULT_CRS = "EPSG:4326"

# (xmin, xmax, ymin, ymax) in longitude/latitude
DEFAULT_EXTENT = (-180, 180, -90, 90)
DEFAULT_RESOLUTION = "low"
DEFAULT_ROUND_TO = 3

# Grey levels for matplotlib (0 = black, 1 = white)
LAND_COLOR = "0.85"
BORDER_COLOR = "0.9"
EXTENT_COLOR = "red"

CACHE_DIR = os.path.expanduser(os.environ.get("EXTENTPICKER_CACHE_DIR", "~/.cache/extentpicker"))

# Backends without an event loop, ginput would block forever on these
NON_INTERACTIVE_BACKENDS = {"agg", "cairo", "pdf", "pgf", "ps", "svg", "template"}

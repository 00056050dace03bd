# config.py
MAX_GRID_DIM = 5000         # largest raster width/height accepted
DEFAULT_INTERVAL = 1.0      # grid spacing in surface units

# Keeps a flat elevation range from dividing by zero
NORM_EPS = 1e-6

# Absorbs lattice round-off when a sample is mapped back to its pixel
PIXEL_SNAP_EPS = 1e-9

BACKGROUND_RGB = (0, 0, 0)

CSV_DECIMALS = 3
OUTPUT_PREFIX = "Topo"
TIMESTAMP_FMT = "%Y%m%d_%H%M%S"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

TIN_SUFFIXES = (".csv", ".txt", ".xyz")
RASTER_SUFFIXES = (".tif", ".tiff")

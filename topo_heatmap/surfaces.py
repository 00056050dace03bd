# region Imports
from __future__ import annotations
import logging
import math
from pathlib import Path
from typing import Iterable, List, Optional
from urllib.parse import urlparse

import numpy as np
import requests
import rasterio
from rasterio.errors import RasterioIOError
from matplotlib import tri as mtri

from .config import RASTER_SUFFIXES, TIN_SUFFIXES
from .errors import SurfaceLoadError
from .models import Bounds
# endregion

logger = logging.getLogger(__name__)

# region Surface Base
class Surface:
    """
    A named elevation model. `elevation_at` is total: any point it cannot
    answer for (outside the footprint, nodata cell) yields None.
    """
    name: str = "surface"
    bounds: Optional[Bounds] = None

    def elevation_at(self, x: float, y: float) -> Optional[float]:
        raise NotImplementedError

    def __call__(self, x: float, y: float) -> Optional[float]:
        return self.elevation_at(x, y)

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, bounds={self.bounds})"
# endregion

# region Triangulated Surface
class TinSurface(Surface):
    """Linear interpolation over a Delaunay triangulation of XYZ points."""

    def __init__(self, name: str, points):
        pts = np.atleast_2d(np.asarray(points, dtype=np.float64))
        if pts.ndim != 2 or pts.shape[1] < 3:
            raise SurfaceLoadError(f"{name}: expected rows of x,y,z")
        pts = pts[np.all(np.isfinite(pts[:, :3]), axis=1)]
        if len(pts) < 3:
            raise SurfaceLoadError(f"{name}: need at least 3 points, got {len(pts)}")

        try:
            self.triangulation = mtri.Triangulation(pts[:, 0], pts[:, 1])
            self._interp = mtri.LinearTriInterpolator(self.triangulation, pts[:, 2])
        except (ValueError, RuntimeError) as e:
            raise SurfaceLoadError(f"{name}: cannot triangulate points ({e})") from e

        self.name = name
        self.points = pts[:, :3]
        self.bounds = Bounds(float(pts[:, 0].min()), float(pts[:, 1].min()),
                             float(pts[:, 0].max()), float(pts[:, 1].max()))

    @classmethod
    def from_file(cls, path, name: Optional[str] = None) -> "TinSurface":
        return cls(name or Path(path).stem, read_points(path))

    def elevation_at(self, x: float, y: float) -> Optional[float]:
        v = self._interp(np.array([x], dtype=np.float64), np.array([y], dtype=np.float64))
        if np.ma.is_masked(v):
            return None
        z = float(v[0])
        return z if math.isfinite(z) else None


def read_points(path) -> np.ndarray:
    """Read x,y,z rows; header and malformed lines are dropped."""
    path = Path(path)
    delimiter = None if path.suffix.lower() == ".xyz" else ","
    try:
        arr = np.genfromtxt(path, delimiter=delimiter, comments="#",
                            usecols=(0, 1, 2), invalid_raise=False)
    except (OSError, ValueError, IndexError) as e:
        raise SurfaceLoadError(f"{path}: {e}") from e
    arr = np.atleast_2d(arr)
    if arr.size == 0:
        return np.empty((0, 3), dtype=np.float64)
    return arr[np.all(np.isfinite(arr), axis=1)]
# endregion

# region Raster DEM Surface
def _is_url(path) -> bool:
    return urlparse(str(path)).scheme in ("http", "https")


def _check_reachable(url: str) -> None:
    try:
        r = requests.head(url, timeout=5, allow_redirects=True)
    except requests.RequestException as e:
        raise SurfaceLoadError(f"DEM check failed: {e}") from e
    if r.status_code != 200:
        raise SurfaceLoadError(f"Remote DEM not reachable ({r.status_code}): {url}")


class RasterSurface(Surface):
    """Nearest-cell lookup into a single-band DEM; NaN cells are no data."""

    def __init__(self, name: str, elevation: np.ndarray, transform):
        self.name = name
        self.elevation = np.asarray(elevation, dtype=np.float64)
        self.transform = transform
        H, W = self.elevation.shape
        x0, y0 = transform * (0, 0)
        x1, y1 = transform * (W, H)
        self.bounds = Bounds(min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))

    @classmethod
    def from_file(cls, path, name: Optional[str] = None) -> "RasterSurface":
        if _is_url(path):
            _check_reachable(str(path))
        try:
            with rasterio.open(path) as ds:
                arr = ds.read(1, masked=True).astype(np.float64).filled(np.nan)
                transform = ds.transform
                band_scale = (ds.scales or [None])[0]
                band_off = (ds.offsets or [None])[0]
        except RasterioIOError as e:
            raise SurfaceLoadError(f"{path}: {e}") from e

        if (band_scale not in (None, 1.0)) or (band_off not in (None, 0.0)):
            s = 1.0 if band_scale is None else float(band_scale)
            o = 0.0 if band_off is None else float(band_off)
            arr = arr * s + o

        return cls(name or Path(urlparse(str(path)).path).stem, arr, transform)

    def elevation_at(self, x: float, y: float) -> Optional[float]:
        H, W = self.elevation.shape
        col, row = ~self.transform * (x, y)
        if not (0.0 <= col <= W and 0.0 <= row <= H):
            return None
        # The far raster edge belongs to the last cell
        c = min(int(math.floor(col)), W - 1)
        r = min(int(math.floor(row)), H - 1)
        z = float(self.elevation[r, c])
        return z if math.isfinite(z) else None
# endregion

# region Loading
def load_surface(path) -> Surface:
    if _is_url(path):
        return RasterSurface.from_file(path)
    suffix = Path(path).suffix.lower()
    if suffix in TIN_SUFFIXES:
        return TinSurface.from_file(path)
    if suffix in RASTER_SUFFIXES:
        return RasterSurface.from_file(path)
    raise SurfaceLoadError(f"{path}: unsupported surface format '{suffix}'")


def load_surfaces(paths: Iterable) -> List[Surface]:
    surfaces = []
    for path in paths:
        try:
            surfaces.append(load_surface(path))
        except SurfaceLoadError as e:
            logger.warning(f"Skipped surface: {e}")
    return surfaces
# endregion

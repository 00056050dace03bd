# region Base
class TopoHeatmapError(Exception):
    """Base class for errors raised by topo_heatmap."""
# endregion

# region Grid Preconditions
class InvalidIntervalError(TopoHeatmapError, ValueError):
    def __init__(self, interval):
        super().__init__(f"Grid interval must be a positive number, got {interval!r}.")
        self.interval = interval


class GridTooLargeError(TopoHeatmapError, ValueError):
    def __init__(self, W: int, H: int, max_dim: int):
        super().__init__(
            f"Image too large ({W}x{H}, max {max_dim}). Try increasing grid interval."
        )
        self.W = W
        self.H = H
        self.max_dim = max_dim


class EmptyGridError(TopoHeatmapError, ValueError):
    def __init__(self, W: int, H: int):
        super().__init__(f"Surface extent is degenerate ({W}x{H}); nothing to rasterize.")
        self.W = W
        self.H = H
# endregion

# region Surfaces
class SurfaceLoadError(TopoHeatmapError):
    """A surface file could not be turned into a queryable surface."""
# endregion

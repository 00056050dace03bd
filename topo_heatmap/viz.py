# region Imports
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from .colors import heat_colors
from .models import Bounds
# endregion

# region Colormap
def heat_cmap(n: int = 256) -> ListedColormap:
    """Matplotlib colormap matching heat_color's blue-to-red ramp."""
    rgb = heat_colors(np.linspace(0.0, 1.0, n)).astype(np.float64) / 255.0
    return ListedColormap(rgb, name="topo_heat")
# endregion

# region Heatmap Preview
def raster_extent(raster, bounds: Bounds, interval: float):
    """[left, right, bottom, top] covered by the raster cells, which can overhang bounds.max."""
    H, W = raster.shape[:2]
    return [bounds.min_x, bounds.min_x + W * interval,
            bounds.min_y, bounds.min_y + H * interval]


def plot_heatmap(raster, bounds: Bounds, interval: float, z_min: float, z_max: float,
                 title="Elevation heatmap"):
    """
    Draw the raster in map coordinates with an elevation colorbar.
    Returns (fig, ax) without showing.
    """
    fig, ax = plt.subplots(figsize=(8, 8))
    extent = raster_extent(raster, bounds, interval)
    ax.imshow(raster, origin="upper", extent=extent, interpolation="nearest")

    sm = plt.cm.ScalarMappable(cmap=heat_cmap(), norm=plt.Normalize(vmin=z_min, vmax=z_max))
    sm.set_array([])
    cbar = fig.colorbar(sm, ax=ax, fraction=0.046, pad=0.04)
    cbar.set_label("Elevation (low → high)")

    ax.set_title(title)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    plt.tight_layout()
    return fig, ax


def show_heatmap(raster, bounds: Bounds, interval: float, z_min: float, z_max: float,
                 title="Elevation heatmap"):
    plot_heatmap(raster, bounds, interval, z_min, z_max, title=title)
    plt.show()
# endregion

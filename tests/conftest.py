import matplotlib
matplotlib.use("Agg")

import pytest

from topo_heatmap.models import Bounds
from topo_heatmap.surfaces import Surface


class AnalyticSurface(Surface):
    """Surface defined by a plain function, for deterministic pipeline tests."""

    def __init__(self, name, bounds, fn):
        self.name = name
        self.bounds = bounds
        self.fn = fn
        self.calls = 0

    def elevation_at(self, x, y):
        self.calls += 1
        return self.fn(x, y)


@pytest.fixture
def plane_surface():
    return AnalyticSurface("plane", Bounds(0.0, 0.0, 2.0, 2.0), lambda x, y: x + y)


@pytest.fixture
def make_surface():
    return AnalyticSurface

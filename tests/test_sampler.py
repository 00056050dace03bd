"""Grid sampling over a bounds rectangle."""

import math

import pytest

from topo_heatmap.errors import InvalidIntervalError
from topo_heatmap.models import Bounds, Sample
from topo_heatmap.sampler import sample


class TestSample:

    def test_plane_scan_order(self):
        result = sample(Bounds(0, 0, 2, 2), 1.0, lambda x, y: x + y)
        expected = [(0, 0, 0), (0, 1, 1), (0, 2, 2),
                    (1, 0, 1), (1, 1, 2), (1, 2, 3),
                    (2, 0, 2), (2, 1, 3), (2, 2, 4)]
        assert [(s.x, s.y, s.z) for s in result] == expected
        assert result.z_min == 0.0
        assert result.z_max == 4.0
        assert all(isinstance(s, Sample) for s in result)

    def test_no_data_everywhere(self):
        result = sample(Bounds(0, 0, 3, 3), 1.0, lambda x, y: None)
        assert result.is_empty
        assert len(result) == 0
        assert result.z_min > result.z_max
        assert result.as_array().shape == (0, 3)

    def test_missing_points_are_skipped(self):
        def half(x, y):
            return None if x > y else 1.0
        result = sample(Bounds(0, 0, 2, 2), 1.0, half)
        assert len(result) == 6
        assert all(s.x <= s.y for s in result)

    def test_nan_and_inf_are_no_data(self):
        values = {0.0: float("nan"), 1.0: float("inf"), 2.0: 5.0}
        result = sample(Bounds(0, 0, 2, 0), 1.0, lambda x, y: values[x])
        assert [(s.x, s.z) for s in result] == [(2.0, 5.0)]
        assert result.z_min == result.z_max == 5.0

    def test_samples_stay_inside_bounds(self):
        bounds = Bounds(-1.3, 2.7, 4.45, 9.1)
        result = sample(bounds, 0.35, lambda x, y: 1.0)
        assert len(result) > 0
        assert all(bounds.contains(s.x, s.y) for s in result)
        assert len({(s.x, s.y) for s in result}) == len(result)

    def test_each_lattice_point_queried_once(self):
        calls = []
        def record(x, y):
            calls.append((x, y))
            return 0.0
        sample(Bounds(0, 0, 2.5, 1.5), 1.0, record)
        assert len(calls) == 3 * 2
        assert len(set(calls)) == len(calls)

    def test_degenerate_bounds_yield_single_point(self):
        result = sample(Bounds(3, 4, 3, 4), 1.0, lambda x, y: 7.0)
        assert [(s.x, s.y, s.z) for s in result] == [(3.0, 4.0, 7.0)]

    def test_range_tracks_extremes(self):
        result = sample(Bounds(0, 0, 4, 0), 1.0, lambda x, y: math.sin(x))
        zs = [s.z for s in result]
        assert result.z_min == min(zs)
        assert result.z_max == max(zs)

    def test_rejects_bad_interval(self):
        with pytest.raises(InvalidIntervalError):
            sample(Bounds(0, 0, 1, 1), -1.0, lambda x, y: 0.0)

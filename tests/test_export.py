"""Point-record and PNG artifact writers."""

from datetime import datetime

import numpy as np
from PIL import Image

from topo_heatmap.export import (
    format_sample,
    output_paths,
    safe_name,
    samples_to_csv,
    write_heatmap_png,
    write_samples_csv,
)
from topo_heatmap.models import Bounds, Sample
from topo_heatmap.raster import rasterize
from topo_heatmap.sampler import sample


class TestPointRecords:

    def test_format_three_decimals(self):
        assert format_sample(Sample(1.0, -2.5, 3.14159)) == "1.000,-2.500,3.142"

    def test_csv_in_scan_order_without_header(self, tmp_path):
        samples = sample(Bounds(0, 0, 1, 1), 1.0, lambda x, y: x + y)
        path = write_samples_csv(samples, tmp_path / "pts.csv")
        assert path.read_text().splitlines() == [
            "0.000,0.000,0.000",
            "0.000,1.000,1.000",
            "1.000,0.000,1.000",
            "1.000,1.000,2.000",
        ]

    def test_empty_set_writes_empty_text(self):
        assert samples_to_csv(sample(Bounds(0, 0, 1, 1), 1.0, lambda x, y: None)) == ""


class TestHeatmapPng:

    def test_exact_size_and_lossless(self, tmp_path):
        samples = sample(Bounds(0, 0, 3, 2), 1.0, lambda x, y: x * y)
        buf = rasterize(samples, Bounds(0, 0, 3, 2), 1.0, 3, 2, samples.z_min, samples.z_max)
        path = write_heatmap_png(buf, tmp_path / "heat.png")
        with Image.open(path) as im:
            assert im.format == "PNG"
            assert im.size == (3, 2)
            np.testing.assert_array_equal(np.asarray(im.convert("RGB")), buf)


class TestOutputNaming:

    def test_safe_name(self):
        assert safe_name('EG: Final/Grade*v2?') == "EG_ Final_Grade_v2_"
        assert safe_name("existing ground") == "existing ground"

    def test_timestamped_paths(self, tmp_path):
        csv_path, png_path = output_paths(tmp_path, "EG/1", datetime(2024, 1, 2, 3, 4, 5))
        assert csv_path == tmp_path / "Topo_EG_1_20240102_030405.csv"
        assert png_path == tmp_path / "Topo_EG_1_20240102_030405.png"

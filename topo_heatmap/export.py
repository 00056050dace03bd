# region Imports
from __future__ import annotations
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple
import numpy as np
from PIL import Image
from .config import CSV_DECIMALS, OUTPUT_PREFIX, TIMESTAMP_FMT
from .models import Sample, SampleSet
# endregion

logger = logging.getLogger(__name__)

_INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')

# region Output Naming
def safe_name(name: str) -> str:
    return _INVALID_FILENAME_CHARS.sub("_", name)


def output_paths(
    out_dir,
    name: str,
    timestamp: Optional[datetime] = None,
) -> Tuple[Path, Path]:
    """Timestamped (csv, png) paths for one surface's artifacts."""
    stamp = (timestamp or datetime.now()).strftime(TIMESTAMP_FMT)
    stem = f"{OUTPUT_PREFIX}_{safe_name(name)}_{stamp}"
    out_dir = Path(out_dir)
    return out_dir / f"{stem}.csv", out_dir / f"{stem}.png"
# endregion

# region Point Records
def format_sample(s: Sample, decimals: int = CSV_DECIMALS) -> str:
    return f"{s.x:.{decimals}f},{s.y:.{decimals}f},{s.z:.{decimals}f}"


def samples_to_csv(samples: SampleSet) -> str:
    return "".join(format_sample(s) + "\n" for s in samples)


def write_samples_csv(samples: SampleSet, out_path) -> Path:
    """One x,y,z record per line in scan order, no header."""
    out_path = Path(out_path)
    with open(out_path, "w", newline="") as f:
        f.write(samples_to_csv(samples))
    logger.debug(f"Wrote {len(samples)} points to {out_path}")
    return out_path
# endregion

# region Heatmap Image
def heatmap_image(raster: np.ndarray) -> Image.Image:
    return Image.fromarray(np.array(raster, dtype=np.uint8))


def write_heatmap_png(raster: np.ndarray, out_path) -> Path:
    out_path = Path(out_path)
    heatmap_image(raster).save(out_path, "PNG")
    logger.debug(f"Wrote {raster.shape[1]}x{raster.shape[0]} heatmap to {out_path}")
    return out_path
# endregion

# region Imports
import argparse
import logging
import sys
from typing import List, Optional
from .config import DEFAULT_INTERVAL, LOG_FORMAT, MAX_GRID_DIM
from .errors import InvalidIntervalError
from .pipeline import process_surfaces
from .surfaces import load_surfaces
# endregion

logger = logging.getLogger("topo_heatmap")

# region Arguments
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="topo-heatmap",
        description="Sample surfaces on a regular grid and export x,y,z points plus an elevation heatmap PNG.",
    )
    p.add_argument("surfaces", nargs="+",
                   help="Surface files: x,y,z point files (.csv/.txt/.xyz) or DEM GeoTIFFs (.tif), or DEM URLs")
    p.add_argument("-i", "--interval", type=float, default=DEFAULT_INTERVAL,
                   help="Grid interval in surface units; smaller values give more detail (default: %(default)s)")
    p.add_argument("-o", "--out-dir", default=".",
                   help="Directory for the CSV and PNG outputs (default: current directory)")
    p.add_argument("--max-dim", type=int, default=MAX_GRID_DIM,
                   help="Reject grids wider or taller than this many cells (default: %(default)s)")
    p.add_argument("--show", action="store_true", help="Show each heatmap in a matplotlib window")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p
# endregion

# region Main
def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    surfaces = load_surfaces(args.surfaces)
    if not surfaces:
        logger.error("No surfaces found.")
        return 1

    try:
        reports = process_surfaces(surfaces, args.interval, out_dir=args.out_dir,
                                   max_dim=args.max_dim, keep_raster=args.show)
    except InvalidIntervalError as e:
        logger.error(str(e))
        return 2

    if args.show:
        from .viz import show_heatmap
        for s, r in zip(surfaces, reports):
            if r.ok:
                show_heatmap(r.raster, s.bounds, args.interval, r.z_min, r.z_max, title=r.name)

    done = sum(1 for r in reports if r.ok)
    logger.info(f"{done} of {len(reports)} surfaces exported.")
    return 0 if done else 1


if __name__ == "__main__":
    sys.exit(main())
# endregion

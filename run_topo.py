# region Header
"""
run_topo.py — sample surfaces on a grid and export x,y,z CSV + heatmap PNG

Requires:
  pip install -e .
Example:
  python run_topo.py ground.csv dem.tif --interval 0.5 --out-dir out
"""
# endregion

# region Main
import sys
from topo_heatmap.cli import main

if __name__ == "__main__":
    sys.exit(main())
# endregion

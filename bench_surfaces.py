"""
Save as `bench_surfaces.py` at project root and run:
    python3 bench_surfaces.py

This script:
- Scans CSV files in the repository root.
- For each CSV it loads blocks using block_packer.main.load_blocks_csv.
- Replays a grid of surface sizes, as a sequence of window resizes would,
  each on a fresh surface through one PackingSession.
- Writes the layout + report of the size that places the most blocks
  (smallest surface on ties) into `bench_results/`.
"""
import os, glob
from itertools import product

import numpy as np

from block_packer.main import load_blocks_csv
from block_packer.session import PackingSession
from block_packer.utils import save_layout_csv, save_report_json

ROOT = os.path.dirname(os.path.abspath(__file__))
CSV_FILES = [p for p in glob.glob(os.path.join(ROOT, "*.csv"))]
# ignore output files we might have generated
IGNORE_PREFIXES = {"packed_layout", "bench_results", "report"}
IGNORE_SUFFIXES = {"_debug_packed"}

WIDTHS = [200, 300, 400, 500]
HEIGHTS = [200, 300, 400, 500]

os.makedirs("bench_results", exist_ok=True)

for csv_path in CSV_FILES:
    name = os.path.basename(csv_path).rsplit('.', 1)[0]
    if any(name.startswith(pref) for pref in IGNORE_PREFIXES) or any(name.endswith(s) for s in IGNORE_SUFFIXES):
        print(f"Skipping generated file: {csv_path}")
        continue
    print(f"\n=== Dataset: {name} ({csv_path}) ===")
    try:
        specs = load_blocks_csv(csv_path)
    except Exception as e:
        print(f"Skipping {csv_path}: failed to load as blocks CSV ({e})")
        continue
    print(f"Loaded {len(specs)} blocks from {name}")
    if not specs:
        continue

    areas = np.array([s.width * s.height for s in specs], dtype=float)
    print(f"Block area: total={areas.sum():g} median={np.median(areas):g} max={areas.max():g}")

    session = PackingSession(specs)
    best = {"placed": -1, "area": None, "res": None, "size": None}
    for w, h in product(WIDTHS, HEIGHTS):
        res = session.resize(w, h)
        placed = len(res.surface.blocks)
        if placed > best["placed"] or (placed == best["placed"] and w * h < best["area"]):
            best.update(placed=placed, area=w * h, res=res, size=(w, h))
        print(f"surface {w}x{h} -> placed={placed}/{len(specs)} "
              f"fullness={res.fullness:.3f} coverage={100.0 * res.coverage:.1f}%")

    res = best["res"]
    out_prefix = os.path.join("bench_results", f"{name}_best")
    save_layout_csv(res.surface, out_prefix + "_packed_layout.csv")
    rep = res.to_report()
    rep["requested_size"] = list(best["size"])
    save_report_json(rep, out_prefix + "_report.json")
    print(f"BEST for {name}: size={best['size']} placed={best['placed']}")

print('\nDone. Results saved under bench_results/.')

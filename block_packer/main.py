import argparse, sys
import pandas as pd
from .config import SurfaceSpec, DEFAULT_BLOCKS, LAYOUT_CSV, REPORT_JSON
from .models import BlockSpec
from .session import PackingSession
from .utils import save_layout_csv, save_report_json

def load_blocks_csv(path):
    df = pd.read_csv(path)
    # Accept either width/height or w/h headers.
    wcol = "width" if "width" in df.columns else "w"
    hcol = "height" if "height" in df.columns else "h"
    if wcol not in df.columns or hcol not in df.columns:
        raise ValueError(f"{path}: expected width,height (or w,h) columns, got {list(df.columns)}")

    specs = []
    for i, r in df.iterrows():
        idx = int(r["index"]) if "index" in df.columns and not pd.isna(r["index"]) else int(i)
        specs.append(BlockSpec(float(r[wcol]), float(r[hcol]), idx))
    return specs


def main(argv=None):
    ap = argparse.ArgumentParser(description="Greedy best-fit packing of rectangular blocks.")
    ap.add_argument("--blocks", help="CSV with width,height columns (default: built-in demo set)")
    ap.add_argument("--width", type=float, default=SurfaceSpec.wanted_width)
    ap.add_argument("--height", type=float, default=SurfaceSpec.wanted_height)
    ap.add_argument("--no-clamp", action="store_true",
                    help="use --width/--height as given instead of capping at the wanted size")
    ap.add_argument("--layout-out", default=LAYOUT_CSV)
    ap.add_argument("--report-out", default=REPORT_JSON)
    args = ap.parse_args(argv)

    if args.blocks:
        specs = load_blocks_csv(args.blocks)
        print(f"[INFO] Loaded {len(specs)} blocks from {args.blocks}")
    else:
        specs = [BlockSpec(w, h, i) for i, (w, h) in enumerate(DEFAULT_BLOCKS)]
        print(f"[INFO] Using {len(specs)} built-in demo blocks")

    session = PackingSession(specs)
    res = session.resize(args.width, args.height) if args.no_clamp else session.start(args.width, args.height)

    if res.unplaced:
        print(f"[WARN] {len(res.unplaced)} block(s) did not fit: {[b.index for b in res.unplaced]}")
    save_layout_csv(res.surface, args.layout_out)
    save_report_json(res.to_report(), args.report_out)
    print(res.fullness_text())
    print(f"Placed: {len(res.surface.blocks)} | Coverage: {100.0*res.coverage:.1f}%")
    if res.surface.blocks:
        print(f"Wrote: {args.layout_out}, {args.report_out}")
    else:
        print(f"Wrote: {args.report_out} (no blocks placed, layout skipped)")
    return 0

if __name__ == "__main__":
    sys.exit(main())

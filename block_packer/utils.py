import csv, json
from .models import Surface
from .projector import project

LAYOUT_KEYS = ["index", "x", "y", "width", "height", "rotated", "top", "left", "right", "bottom"]

def save_layout_csv(surface: Surface, path):
    if not surface.blocks: return
    coords = project(surface)
    with open(path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=LAYOUT_KEYS); w.writeheader()
        for b, c in zip(surface.blocks, coords):
            row = {k: getattr(b, k) for k in LAYOUT_KEYS[:6]}
            row.update({"top": c.top, "left": c.left, "right": c.right, "bottom": c.bottom})
            w.writerow(row)

def save_report_json(rep, path):
    with open(path, "w") as f: json.dump(rep, f, indent=2)

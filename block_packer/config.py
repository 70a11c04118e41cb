from dataclasses import dataclass

@dataclass
class SurfaceSpec:
    name: str = "default page surface"
    wanted_width: float = 500.0    # px, the initial surface never exceeds this
    wanted_height: float = 500.0   # px

# (width, height) pairs in input order; identity = position in this list
DEFAULT_BLOCKS = [
    (30, 40),
    (20, 50),
    (60, 30),
    (30, 40),
    (20, 50),
    (60, 30),
]

LAYOUT_CSV: str = "packed_layout.csv"
REPORT_JSON: str = "report.json"

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple
from .config import SurfaceSpec
from .models import Block, BlockSpec, DisplayCoords, Surface
from .packer import pack
from .metrics import fullness, coverage, fullness_percent
from .projector import project


def clamp_surface(available_w, available_h, spec: SurfaceSpec = None):
    spec = spec or SurfaceSpec()
    return min(available_w, spec.wanted_width), min(available_h, spec.wanted_height)


@dataclass
class PackResult:
    surface: Surface
    fullness: float
    block_coordinates: List[DisplayCoords]
    unplaced: List[Block] = field(default_factory=list)

    @property
    def coverage(self):
        return coverage(self.surface)

    def fullness_text(self):
        return f"Container Fullness: {fullness_percent(self.fullness)}%"

    def to_report(self):
        return {
            "surface": {"width": self.surface.width, "height": self.surface.height},
            "placed_blocks": len(self.surface.blocks),
            "unplaced_blocks": len(self.unplaced),
            "unplaced_indices": [b.index for b in self.unplaced],
            "fullness": self.fullness,
            "fullness_pct": fullness_percent(self.fullness),
            "coverage": round(self.coverage, 4),
            "block_coordinates": [c.as_dict() for c in self.block_coordinates],
        }


class PackingSession:
    """Owns the immutable block definitions and runs full pack cycles.

    Every run builds a new Surface and new unplaced Blocks from the
    definitions, so a resize never sees positions from an earlier run.
    """

    def __init__(self, specs: Sequence[BlockSpec], surface_spec: SurfaceSpec = None):
        self.specs = list(specs)
        self.surface_spec = surface_spec or SurfaceSpec()
        self.last = None

    @classmethod
    def from_sizes(cls, sizes: Sequence[Tuple[float, float]], surface_spec: SurfaceSpec = None):
        return cls([BlockSpec(w, h, i) for i, (w, h) in enumerate(sizes)], surface_spec)

    def run(self, width, height) -> PackResult:
        surface = Surface(width, height)
        blocks = [s.make_block() for s in self.specs]
        unplaced = pack(surface, blocks)
        self.last = PackResult(
            surface=surface,
            fullness=fullness(surface),
            block_coordinates=project(surface),
            unplaced=unplaced,
        )
        return self.last

    def start(self, available_w, available_h) -> PackResult:
        # first layout is capped at the wanted size
        return self.run(*clamp_surface(available_w, available_h, self.surface_spec))

    def resize(self, width, height) -> PackResult:
        return self.run(width, height)

import math
import numbers
from dataclasses import dataclass, field, asdict
from typing import List, Optional


class InvalidDimension(ValueError):
    pass


def _check_dims(width, height, what):
    for name, v in (("width", width), ("height", height)):
        if not isinstance(v, numbers.Real) or isinstance(v, bool) or not math.isfinite(v) or v <= 0:
            raise InvalidDimension(f"{what} {name} must be a positive number, got {v!r}")


@dataclass(frozen=True)
class BlockSpec:
    """Immutable block definition kept between packing runs."""
    width: float
    height: float
    index: int

    def __post_init__(self): _check_dims(self.width, self.height, "block")

    def make_block(self) -> "Block":
        return Block(self.width, self.height, self.index)


@dataclass
class Block:
    width: float
    height: float
    index: int
    x: Optional[float] = None
    y: Optional[float] = None
    rotated: bool = False

    def __post_init__(self): _check_dims(self.width, self.height, "block")

    @property
    def area(self):
        return self.width * self.height

    @property
    def placed(self) -> bool:
        return self.x is not None and self.y is not None

    def rotate(self):
        # width/height are always the effective (post-rotation) size
        self.width, self.height = self.height, self.width
        self.rotated = not self.rotated

    def reset(self):
        self.x = None
        self.y = None


@dataclass
class Surface:
    width: float
    height: float
    blocks: List[Block] = field(default_factory=list)

    def __post_init__(self): _check_dims(self.width, self.height, "surface")

    @property
    def area(self):
        return self.width * self.height

    def commit(self, block: Block, x, y):
        """Place ``block`` at (x, y) and grow the bounds to contain it.

        Feasibility is the caller's job; the surface only records the
        placement and never shrinks.
        """
        block.x = x
        block.y = y
        self.blocks.append(block)
        self.width = max(self.width, x + block.width)
        self.height = max(self.height, y + block.height)
        return block


@dataclass
class DisplayCoords:
    top: float
    left: float
    right: float
    bottom: float
    original_index: int

    def as_dict(self): return asdict(self)

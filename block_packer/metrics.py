import math
import numpy as np
from .models import Block, Surface


def intersection_area(a: Block, b: Block):
    """Overlap area of two placed blocks; scalar form of one overlap_matrix cell."""
    x_overlap = max(0, min(a.x + a.width, b.x + b.width) - max(a.x, b.x))
    y_overlap = max(0, min(a.y + a.height, b.y + b.height) - max(a.y, b.y))
    return x_overlap * y_overlap


def overlap_matrix(surface: Surface) -> np.ndarray:
    """Pairwise intersection areas of the placed blocks, zero on the diagonal.

    Row/column order is the surface's insertion order.
    """
    n = len(surface.blocks)
    if n == 0:
        return np.zeros((0, 0))
    x0 = np.array([b.x for b in surface.blocks], dtype=float)
    y0 = np.array([b.y for b in surface.blocks], dtype=float)
    x1 = x0 + np.array([b.width for b in surface.blocks], dtype=float)
    y1 = y0 + np.array([b.height for b in surface.blocks], dtype=float)
    dx = np.clip(np.minimum(x1[:, None], x1[None, :]) - np.maximum(x0[:, None], x0[None, :]), 0, None)
    dy = np.clip(np.minimum(y1[:, None], y1[None, :]) - np.maximum(y0[:, None], y0[None, :]), 0, None)
    m = dx * dy
    np.fill_diagonal(m, 0.0)
    return m


def filled_area(surface: Surface):
    # overlapping area is counted once per block
    return sum(b.width * b.height for b in surface.blocks)


def fullness(surface: Surface) -> float:
    """Overlap-freedom ratio: 1 - overlap / (filled + overlap).

    Exactly 1.0 whenever no two placed blocks overlap, including an empty
    surface. Not an occupancy measure, see coverage() for that.
    """
    inner_empty = float(np.triu(overlap_matrix(surface), k=1).sum())
    if inner_empty == 0:
        return 1.0
    return 1.0 - inner_empty / (filled_area(surface) + inner_empty)


def coverage(surface: Surface) -> float:
    return filled_area(surface) / surface.area


def fullness_percent(value) -> int:
    # half-up, not banker's rounding
    return int(math.floor(value * 100 + 0.5))

import math
from typing import List, Optional, Tuple
from .models import Block, Surface


def order_blocks(blocks: List[Block]) -> List[Block]:
    # biggest first; sorted() is stable so equal areas keep input order
    return sorted(blocks, key=lambda b: -b.area)


def overlaps(x, y, w, h, other: Block) -> bool:
    # touching edges do not count
    return not (
        x + w <= other.x or
        other.x + other.width <= x or
        y + h <= other.y or
        other.y + other.height <= y
    )


def find_best_fit(surface: Surface, block: Block) -> Optional[Tuple[float, float]]:
    """Return the first free (x, y) for ``block``, or None.

    Rows are scanned from ``surface.height - block.height`` down to 0 and
    each row left to right. Every candidate is measured against the same
    block, so no later candidate can beat an earlier one: scan order is
    the tie-break.
    """
    y = surface.height - block.height
    x_max = surface.width - block.width
    if x_max < 0:
        return None
    while y >= 0:
        x = 0
        while x <= x_max:
            hit = None
            for other in surface.blocks:
                if overlaps(x, y, block.width, block.height, other):
                    hit = other
                    break
            if hit is None:
                return x, y
            # every x left of hit's right edge overlaps hit on this row too
            x = max(x + 1, math.ceil(hit.x + hit.width))
        y -= 1
    return None


def pack(surface: Surface, blocks: List[Block]) -> List[Block]:
    """Place as many ``blocks`` as fit into ``surface``; return the rest.

    Blocks must come in unplaced (fresh) and the surface should be new.
    Blocks that do not fit keep ``x``/``y`` as None.
    """
    unplaced: List[Block] = []
    for block in order_blocks(blocks):
        fit = find_best_fit(surface, block)
        if fit is None:
            unplaced.append(block)
            continue
        surface.commit(block, *fit)

    print(f"[PACK] surface={surface.width:g}x{surface.height:g}  "
          f"placed={len(surface.blocks)}  unplaced={len(unplaced)}")
    return unplaced

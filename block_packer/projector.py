from typing import List
from .models import DisplayCoords, Surface


def project(surface: Surface) -> List[DisplayCoords]:
    """Flip placement coords (origin bottom-left) to display coords (origin top-left).

    One record per placed block in insertion order. Always recompute after
    a re-pack; nothing here is cached.
    """
    h = surface.height
    return [
        DisplayCoords(
            top=h - (b.y + b.height),
            left=b.x,
            right=b.x + b.width,
            bottom=h - b.y,
            original_index=b.index,
        )
        for b in surface.blocks
    ]

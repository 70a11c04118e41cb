from .models import Block, BlockSpec, Surface, DisplayCoords, InvalidDimension
from .packer import pack, find_best_fit, order_blocks
from .metrics import fullness, intersection_area, coverage
from .projector import project
from .session import PackingSession, PackResult

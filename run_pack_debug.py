"""
Debug runner: load blocks from a CSV and run a single pack cycle on a surface
of the given size (no clamping). Prints every placement, the unplaced blocks
and the display coordinates, and writes a CSV for inspection.
Run:
    python3 run_pack_debug.py blocks.csv 500 500
"""
import sys
from block_packer.main import load_blocks_csv
from block_packer.models import Surface
from block_packer.packer import pack
from block_packer.metrics import fullness, coverage, overlap_matrix
from block_packer.projector import project
from block_packer.utils import save_layout_csv

if len(sys.argv) < 2:
    print('Usage: python3 run_pack_debug.py <blocks.csv> [width] [height]')
    sys.exit(1)

path = sys.argv[1]
width = float(sys.argv[2]) if len(sys.argv) > 2 else 500.0
height = float(sys.argv[3]) if len(sys.argv) > 3 else 500.0
specs = load_blocks_csv(path)
print(f'Loaded {len(specs)} blocks from {path}')
surface = Surface(width, height)
blocks = [s.make_block() for s in specs]
try:
    unplaced = pack(surface, blocks)
except Exception as e:
    import traceback
    print('Packer raised exception:', e, file=sys.stderr)
    traceback.print_exc()
    sys.exit(2)

print(f'Pack placed {len(surface.blocks)} blocks, {len(unplaced)} left over')
for b in surface.blocks:
    print(f' #{b.index}: {b.width:g}x{b.height:g} at ({b.x:g}, {b.y:g})' + (' rotated' if b.rotated else ''))
for b in unplaced:
    print(f' #{b.index}: {b.width:g}x{b.height:g} NOT PLACED')

m = overlap_matrix(surface)
print(f'Surface {surface.width:g}x{surface.height:g}  fullness={fullness(surface):.4f}  '
      f'coverage={100.0*coverage(surface):.2f}%  overlap_total={m.sum()/2:g}')
for c in project(surface):
    print(f' #{c.original_index}: top={c.top:g} left={c.left:g} right={c.right:g} bottom={c.bottom:g}')

out = path.rsplit('.',1)[0] + '_debug_packed.csv'
save_layout_csv(surface, out)
print('Wrote debug CSV to', out)

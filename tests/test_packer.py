from itertools import combinations

from block_packer.config import DEFAULT_BLOCKS
from block_packer.metrics import intersection_area
from block_packer.models import Block, Surface
from block_packer.packer import find_best_fit, order_blocks, overlaps, pack


def _blocks(sizes):
    return [Block(w, h, i) for i, (w, h) in enumerate(sizes)]


def test_order_is_descending_area_and_stable():
    blocks = _blocks(DEFAULT_BLOCKS)
    assert [b.index for b in order_blocks(blocks)] == [2, 5, 0, 3, 1, 4]
    # input list is left alone
    assert [b.index for b in blocks] == [0, 1, 2, 3, 4, 5]


def test_touching_edges_do_not_overlap():
    other = Block(10, 10, 0, x=0, y=0)
    assert not overlaps(10, 0, 5, 5, other)
    assert not overlaps(0, 10, 5, 5, other)
    assert not overlaps(-5, 0, 5, 5, other)
    assert overlaps(9, 9, 5, 5, other)


def test_first_block_goes_top_left_of_scan():
    s = Surface(500, 500)
    assert find_best_fit(s, Block(60, 30, 0)) == (0, 470)


def test_too_big_block_has_no_fit():
    s = Surface(50, 50)
    assert find_best_fit(s, Block(51, 10, 0)) is None
    assert find_best_fit(s, Block(10, 51, 0)) is None


def test_exact_size_block_fits_at_origin():
    s = Surface(50, 40)
    assert find_best_fit(s, Block(50, 40, 0)) == (0, 0)


def test_default_scenario_positions():
    s = Surface(500, 500)
    blocks = _blocks(DEFAULT_BLOCKS)
    unplaced = pack(s, blocks)

    assert unplaced == []
    assert [b.index for b in s.blocks] == [2, 5, 0, 3, 1, 4]
    pos = {b.index: (b.x, b.y) for b in blocks}
    assert pos[2] == (0, 470)
    assert pos[5] == (60, 470)
    assert pos[0] == (120, 460)
    assert pos[3] == (150, 460)
    assert pos[1] == (180, 450)
    assert pos[4] == (200, 450)
    assert (s.width, s.height) == (500, 500)


def test_no_overlap_and_within_bounds():
    sizes = [(7, 3), (5, 5), (2, 9), (4, 4), (6, 2), (3, 3), (1, 8), (5, 1), (2, 2), (3, 6)]
    s = Surface(15, 12)
    pack(s, _blocks(sizes))
    assert s.blocks
    for b in s.blocks:
        assert b.x >= 0 and b.y >= 0
        assert b.x + b.width <= s.width
        assert b.y + b.height <= s.height
    for a, b in combinations(s.blocks, 2):
        assert intersection_area(a, b) == 0


def test_block_that_does_not_fit_stays_unplaced():
    s = Surface(10, 10)
    big, small = Block(10, 10, 0), Block(1, 1, 1)
    unplaced = pack(s, [small, big])
    assert (big.x, big.y) == (0, 0)
    assert unplaced == [small]
    assert small.x is None and small.y is None
    assert s.blocks == [big]


def test_pack_is_deterministic():
    sizes = [(4, 3), (2, 2), (5, 1), (3, 3), (2, 4), (1, 1)]
    runs = []
    for _ in range(2):
        s = Surface(9, 7)
        blocks = _blocks(sizes)
        pack(s, blocks)
        runs.append([(b.index, b.x, b.y) for b in blocks])
    assert runs[0] == runs[1]


def test_fractional_sizes_keep_integer_x_steps():
    s = Surface(10, 10)
    a, b = Block(2.5, 2.5, 0), Block(2.5, 2.5, 1)
    pack(s, [a, b])
    assert (a.x, a.y) == (0, 7.5)
    assert (b.x, b.y) == (3, 7.5)


def test_next_row_used_when_row_is_full():
    s = Surface(4, 4)
    blocks = _blocks([(2, 2)] * 4)
    pack(s, blocks)
    # row y=1 overlaps the first row, so the second row lands on y=0
    assert [(b.x, b.y) for b in blocks] == [(0, 2), (2, 2), (0, 0), (2, 0)]


def test_too_wide_block_on_very_tall_surface_returns_at_once():
    s = Surface(10, 5_000_000)
    assert find_best_fit(s, Block(11, 1, 0)) is None

from itertools import combinations

import pytest

from tilewm.geometry import Rect, intersect
from tilewm.layouts import centered_master, grid, monocle, monocle_symbol, tile

AREA = Rect(10, 20, 1000, 600)


@pytest.mark.parametrize(
    "layout",
    [
        lambda b: tile(AREA, b, 1, 0.5, 0),
        lambda b: grid(AREA, b, 0),
        lambda b: centered_master(AREA, b, 1, 0.5, 0),
        lambda b: monocle(AREA, b),
    ],
)
def test_no_clients_no_geometry(layout):
    assert layout([]) == []


def test_tile_single_client_fills_area():
    assert tile(AREA, [0], 1, 0.55, 0) == [AREA]


def test_tile_master_and_stack_share_width():
    master, stack = tile(AREA, [0, 0], 1, 0.5, 0)
    assert master.x == AREA.x
    assert stack.x == master.right
    assert master.w + stack.w == AREA.w
    assert master.h == stack.h == AREA.h


def test_tile_stack_heights_cover_area():
    rects = tile(AREA, [0, 0, 0], 1, 0.5, 0)
    stack = rects[1:]
    assert sum(r.h for r in stack) == AREA.h
    assert stack[1].y == stack[0].bottom
    assert all(r.x == rects[0].right for r in stack)


def test_tile_masters_with_borders_fill_height():
    border = 2
    rects = tile(AREA, [border, border], 2, 0.5, 0)
    assert all(r.x == AREA.x for r in rects)
    assert sum(r.h + 2 * border for r in rects) == AREA.h
    assert rects[1].y == rects[0].bottom + 2 * border


def test_tile_without_masters_uses_full_width():
    rects = tile(AREA, [0, 0], 0, 0.5, 0)
    assert all(r.x == AREA.x and r.w == AREA.w for r in rects)


def test_tile_gap_widens_master_only_when_shared():
    without = tile(AREA, [0, 0], 1, 0.5, 0)
    with_gap = tile(AREA, [0, 0], 1, 0.5, 5)
    assert with_gap[0].w - without[0].w == 5
    assert with_gap[1].w == without[1].w


def test_grid_single_client_fills_area():
    assert grid(AREA, [0], 0) == [AREA]


@pytest.mark.parametrize("area", [AREA, Rect(0, 0, 801, 601)])
def test_grid_four_clients_tile_area_exactly(area):
    rects = grid(area, [0, 0, 0, 0], 0)
    assert sum(r.w * r.h for r in rects) == area.w * area.h
    for a, b in combinations(rects, 2):
        assert intersect(a, b) == 0
    assert all(intersect(r, area) == r.w * r.h for r in rects)


def test_grid_fills_columns_first():
    rects = grid(AREA, [0, 0, 0, 0], 0)
    assert rects[0].x == rects[1].x
    assert rects[1].y == rects[0].bottom
    assert rects[2].x == rects[0].right


def test_centered_master_is_flanked_by_stacks():
    master, right, left = centered_master(AREA, [0, 0, 0], 1, 0.5, 0)
    assert left.x == AREA.x
    assert left.right == master.x
    assert master.right == right.x
    assert left.w + master.w + right.w == AREA.w
    assert master.h == AREA.h


def test_centered_master_single_stack_goes_right():
    master, stack = centered_master(AREA, [0, 0], 1, 0.5, 0)
    assert master.x == AREA.x
    assert stack.x == master.right
    assert master.w + stack.w == AREA.w


def test_monocle_shows_only_first():
    result = monocle(AREA, [0, 0, 0])
    assert result[0] == AREA
    assert result[1:] == [None, None]


def test_monocle_removes_border_from_size():
    (rect,) = monocle(AREA, [3])
    assert rect.w + 6 == AREA.w
    assert rect.h + 6 == AREA.h


def test_monocle_symbol():
    assert monocle_symbol(3) == "[3]"
    assert monocle_symbol(0) is None
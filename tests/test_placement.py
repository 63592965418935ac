import pytest

from citygrid.city import (
    BUILDING,
    GRASS,
    ROAD,
    TILE,
    Cell,
    Grid,
    can_place,
    place_building,
    place_segment,
    road_pattern,
)
from tests.city_test_utils import cells_in_rect


def test_can_place_on_open_grass(grid):
    assert can_place(grid, 0, 0, 4, 4)
    assert can_place(grid, 44, 44, 4, 4)


@pytest.mark.parametrize("x,y,w,h", [(46, 0, 3, 1), (0, 47, 1, 2), (-1, 0, 2, 2), (0, -1, 1, 1)])
def test_can_place_rejects_out_of_bounds(grid, x, y, w, h):
    assert not can_place(grid, x, y, w, h)


@pytest.mark.parametrize("tile", [ROAD, TILE, "snow", "asphalt"])
def test_can_place_rejects_any_non_grass(grid, tile):
    grid.set(5, 5, Cell.blank(5, 5, tile))
    assert not can_place(grid, 4, 4, 2, 2)
    assert can_place(grid, 6, 6, 2, 2)


def test_can_place_has_no_side_effects(grid):
    before = grid.snapshot()
    can_place(grid, 0, 0, 10, 10)
    assert grid.snapshot() == before


def test_pace_capital_scenario(grid):
    assert can_place(grid, 16, 16, 2, 2)
    place_building(grid, 16, 16, 2, 2, "pace-capital", "down")
    assert not can_place(grid, 16, 16, 2, 2)

    anchor = grid.get(16, 16)
    assert anchor.is_origin is True
    assert anchor.building_id == "pace-capital"
    assert anchor.type == BUILDING
    for x, y in [(17, 16), (16, 17), (17, 17)]:
        cell = grid.get(x, y)
        assert cell.is_origin is False
        assert cell.building_id == "pace-capital"
        assert cell.origin == (16, 16)


def test_exactly_one_origin_per_footprint(grid):
    place_building(grid, 3, 7, 4, 3, "church", "left")
    cells = list(cells_in_rect(grid, 3, 7, 4, 3))
    assert len(cells) == 12
    assert sum(1 for c in cells if c.is_origin) == 1
    assert all(c.building_id == "church" and c.origin == (3, 7) for c in cells)
    assert all(c.orientation == "left" for c in cells)


def test_place_building_overwrites_without_validation(grid):
    place_segment(grid, 0, 0, road_pattern("straight"))
    place_building(grid, 1, 1, 2, 2, "bulldozed")
    assert grid.get(1, 1).type == BUILDING
    assert grid.get(0, 0).type == ROAD


def test_place_building_clips_at_edge():
    g = Grid.create(4, 4)
    place_building(g, 3, 3, 3, 3, "big")
    assert g.get(3, 3).building_id == "big"
    assert g.get(2, 2).type == GRASS

from citygrid.city import ASPHALT, ROAD, Grid, build_road_network, place_segment, road_pattern


def test_straight_segment_sidewalk_ring(grid):
    place_segment(grid, 0, 20, road_pattern("straight"))
    assert grid.get(1, 21).type == ASPHALT
    assert grid.get(2, 21).type == ASPHALT
    for x, y in [(0, 20), (3, 20), (0, 23), (3, 23)]:
        assert grid.get(x, y).type == ROAD


def test_segment_cells_are_single_cell_origins(grid):
    place_segment(grid, 4, 4, road_pattern("intersection"))
    for y in range(4, 8):
        for x in range(4, 8):
            cell = grid.get(x, y)
            assert cell.is_origin
            assert cell.origin == (x, y)
            assert cell.building_id is None


def test_intersection_pattern_corners_are_sidewalk(grid):
    place_segment(grid, 8, 8, road_pattern("intersection"))
    for x, y in [(8, 8), (11, 8), (8, 11), (11, 11)]:
        assert grid.get(x, y).type == ROAD
    for x in range(8, 12):
        assert grid.get(x, 9).type == ASPHALT
        assert grid.get(x, 10).type == ASPHALT


def test_restamping_straight_is_idempotent(grid):
    place_segment(grid, 12, 0, road_pattern("straight"))
    first = grid.snapshot()
    place_segment(grid, 12, 0, road_pattern("straight"))
    assert grid.snapshot() == first


def test_segment_clipped_at_edge():
    g = Grid.create(6, 6)
    written = place_segment(g, 4, 4, road_pattern("straight"))
    assert written == 4
    assert g.get(5, 5).type == ASPHALT


def test_unknown_kind_falls_back_to_straight():
    assert road_pattern("diagonal") == road_pattern("straight")


def test_network_intersections_overwrite_seams():
    g = Grid.create(16, 16)
    counts = build_road_network(g, street_ys=[4], avenue_xs=[8], crossings=[(8, 4)])
    assert counts == {"road_segments": 8, "intersections": 1}
    # Straight passes leave sidewalk at (8,5); the crossing fix makes it drivable.
    assert g.get(8, 5).type == ASPHALT
    assert g.get(9, 4).type == ASPHALT
    assert g.get(8, 4).type == ROAD
    # Away from the crossing the straight ring survives.
    assert g.get(0, 4).type == ROAD
    assert g.get(1, 5).type == ASPHALT
    assert g.get(8, 0).type == ROAD
    assert g.get(9, 1).type == ASPHALT


def test_only_listed_crossings_are_repaired():
    g = Grid.create(16, 16)
    counts = build_road_network(g, street_ys=[4], avenue_xs=[8], crossings=[])
    assert counts == {"road_segments": 8, "intersections": 0}
    # Without the crossing fix the avenue's sidewalk ring cuts the street.
    assert g.get(8, 5).type == ROAD

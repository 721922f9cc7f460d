import pytest

from aotsim.blocks import (
    Block,
    BuildingsManager,
    SourceDest,
    build_buildings_grid,
    parse_pathlist,
)
from aotsim.constants import MAP_SIZE, ROAD_ID
from aotsim.errors import MissingKeyError
from aotsim.models import BuildingType, MapSpaces, ShortestPath
from aotsim.render import BuildingStats

HOUSE = BuildingType(id=3, name="house", width=2, height=3, capacity=10, level=1, cost=5)
ROAD = BuildingType(id=ROAD_ID, name="road", width=1, height=1, capacity=0, level=1, cost=0)
BLOCK_MAP = {11: HOUSE, 12: ROAD}


def test_parse_pathlist_multiple_points():
    assert parse_pathlist("(1,2)(3,4)(5,6)") == [(1, 2), (3, 4), (5, 6)]


def test_parse_pathlist_single_point():
    assert parse_pathlist("(7,8)") == [(7, 8)]


@pytest.mark.parametrize("bad", ["", "1,2", "(a,b)", "(1)"])
def test_parse_pathlist_rejects_malformed(bad):
    with pytest.raises(ValueError):
        parse_pathlist(bad)


def test_grid_marks_building_footprint():
    space = MapSpaces(id=5, map_id=1, x_coordinate=1, y_coordinate=1, block_type_id=11)
    grid = build_buildings_grid([space], BLOCK_MAP)
    assert len(grid) == MAP_SIZE
    assert all(len(row) == MAP_SIZE for row in grid)
    assert grid[1][1] == 5
    assert grid[2][3] == 5
    assert grid[3][1] == 0
    assert grid[1][4] == 0
    cells = sum(cell == 5 for row in grid for cell in row)
    assert cells == HOUSE.width * HOUSE.height


def test_grid_unknown_block_type():
    space = MapSpaces(id=5, map_id=1, x_coordinate=1, y_coordinate=1, block_type_id=99)
    with pytest.raises(MissingKeyError) as info:
        build_buildings_grid([space], BLOCK_MAP)
    assert info.value.key == 99


def test_grid_outside_map_raises():
    space = MapSpaces(
        id=5, map_id=1, x_coordinate=MAP_SIZE - 1, y_coordinate=0, block_type_id=11
    )
    with pytest.raises(IndexError):
        build_buildings_grid([space], BLOCK_MAP)


def test_from_map_excludes_roads_and_parses_paths():
    house = MapSpaces(id=5, map_id=1, x_coordinate=0, y_coordinate=0, block_type_id=11)
    road = MapSpaces(id=6, map_id=1, x_coordinate=10, y_coordinate=10, block_type_id=12)
    path = ShortestPath(
        base_id=1, source_x=0, source_y=0, dest_x=2, dest_y=0, pathlist="(0,0)(1,0)(2,0)"
    )
    manager = BuildingsManager.from_map([house, road], BLOCK_MAP, [path])
    assert list(manager.blocks) == [5]
    assert manager.buildings_grid[10][10] == 0
    assert manager.buildings_grid[0][0] == 5
    block = manager.blocks[5]
    assert block == Block(
        map_space=house, absolute_entrance_x=0, absolute_entrance_y=0, population=0
    )
    assert manager.shortest_paths == {SourceDest(0, 0, 2, 0): [(0, 0), (1, 0), (2, 0)]}


def test_get_building_stats():
    house = MapSpaces(id=5, map_id=1, x_coordinate=0, y_coordinate=0, block_type_id=11)
    manager = BuildingsManager.from_map([house], BLOCK_MAP, [])
    manager.blocks[5].population = 4
    assert manager.get_building_stats() == [BuildingStats(map_space_id=5, population=4)]


def test_empty_manager_has_blank_grid():
    manager = BuildingsManager()
    assert manager.get_building_stats() == []
    assert all(cell == 0 for row in manager.buildings_grid for cell in row)
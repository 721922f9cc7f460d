"""Buildings on a base: their footprint on the map and precomputed paths."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .constants import MAP_SIZE, ROAD_ID
from .errors import MissingKeyError
from .models import BuildingType, MapSpaces, ShortestPath
from .render import BuildingStats

Point = tuple[int, int]
Grid = list[list[int]]


@dataclass(frozen=True)
class SourceDest:
    """Key of a precomputed shortest path between two map cells."""

    source_x: int
    source_y: int
    dest_x: int
    dest_y: int


@dataclass
class Block:
    """A building placed on the map."""

    map_space: MapSpaces
    absolute_entrance_x: int
    absolute_entrance_y: int
    population: int = 0


def _empty_grid() -> Grid:
    return [[0] * MAP_SIZE for _ in range(MAP_SIZE)]


def parse_pathlist(pathlist: str) -> list[Point]:
    """Parse a stored path such as ``"(1,2)(3,4)"`` into coordinate pairs."""
    if len(pathlist) < 2 or not (pathlist.startswith("(") and pathlist.endswith(")")):
        raise ValueError(f"malformed path list: {pathlist!r}")
    points: list[Point] = []
    for chunk in pathlist[1:-1].split(")("):
        parts = chunk.split(",")
        if len(parts) < 2:
            raise ValueError(f"malformed path coordinate: {chunk!r}")
        points.append((int(parts[0]), int(parts[1])))
    return points


def _building_type_of(
    map_space: MapSpaces, building_block_map: Mapping[int, BuildingType]
) -> BuildingType:
    try:
        return building_block_map[map_space.block_type_id]
    except KeyError:
        raise MissingKeyError(map_space.block_type_id, "building_block_map") from None


def build_buildings_grid(
    map_spaces: Iterable[MapSpaces], building_block_map: Mapping[int, BuildingType]
) -> Grid:
    """Return a MAP_SIZE square grid holding, per cell, the id of the building on it."""
    grid = _empty_grid()
    for map_space in map_spaces:
        building = _building_type_of(map_space, building_block_map)
        x0, y0 = map_space.x_coordinate, map_space.y_coordinate
        for x in range(x0, x0 + building.width):
            for y in range(y0, y0 + building.height):
                if not (0 <= x < MAP_SIZE and 0 <= y < MAP_SIZE):
                    raise IndexError(
                        f"map space {map_space.id} extends outside the map at ({x}, {y})"
                    )
                grid[x][y] = map_space.id
    return grid


@dataclass
class BuildingsManager:
    """All buildings of one base, their grid and the base's shortest paths."""

    blocks: dict[int, Block] = field(default_factory=dict)
    shortest_paths: dict[SourceDest, list[Point]] = field(default_factory=dict)
    buildings_grid: Grid = field(default_factory=_empty_grid)

    @classmethod
    def from_map(
        cls,
        map_spaces: Iterable[MapSpaces],
        building_block_map: Mapping[int, BuildingType],
        shortest_paths: Iterable[ShortestPath],
    ) -> BuildingsManager:
        """Build the manager from a base's map spaces, leaving roads out.

        ``building_block_map`` maps a block type id to its building type.
        """
        buildings = [
            space
            for space in map_spaces
            if _building_type_of(space, building_block_map).id != ROAD_ID
        ]
        grid = build_buildings_grid(buildings, building_block_map)
        blocks = {
            space.id: Block(
                map_space=space,
                absolute_entrance_x=space.x_coordinate,
                absolute_entrance_y=space.y_coordinate,
            )
            for space in buildings
        }
        paths = {
            SourceDest(p.source_x, p.source_y, p.dest_x, p.dest_y): parse_pathlist(
                p.pathlist
            )
            for p in shortest_paths
        }
        return cls(blocks=blocks, shortest_paths=paths, buildings_grid=grid)

    def get_building_stats(self) -> list[BuildingStats]:
        """Return the current population of every building."""
        return [
            BuildingStats(map_space_id=block.map_space.id, population=block.population)
            for block in self.blocks.values()
        ]
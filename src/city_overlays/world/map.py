from dataclasses import dataclass, field
from typing import List

from city_overlays.config import LAND, PRISTINE_CONSTRUCTION, ZONE_NONE


@dataclass
class Building:
    type: str = LAND
    level: int = 0
    population: int = 0
    jobs: int = 0
    powered: bool = False
    watered: bool = False
    on_fire: bool = False
    fire_progress: float = 0.0
    age: int = 0
    construction_progress: float = PRISTINE_CONSTRUCTION
    abandoned: bool = False


@dataclass
class Tile:
    x: int
    y: int
    building: Building = field(default_factory=Building)
    zone: str = ZONE_NONE
    has_subway: bool = False


# Rows first: grid[y][x]
Grid = List[List[Tile]]


def blank_grid(size: int, terrain: str = LAND) -> Grid:
    """Allocate a size x size grid of undeveloped tiles."""
    return [
        [Tile(x, y, building=Building(type=terrain)) for x in range(size)]
        for y in range(size)
    ]


def grid_size(grid: Grid) -> int:
    return len(grid)

"""
City Overlays — Hand-tuned water/land masks for preset cities.

Makes preset cities look geographically sane without real hydrography
data. Each recipe is an ordered list of region fills; later fills win on
overlapping tiles, so the order of a recipe is part of its meaning.

Only New York and San Francisco have recipes. Every other preset keeps
whatever elevation terrain the caller already generated.

Usage:
    from city_overlays.world.overlays import apply_city_overlay

    apply_city_overlay(grid, "new_york")
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from city_overlays.config import (
    LAND, WATER, ZONE_NONE, PRISTINE_CONSTRUCTION,
    NY_MANHATTAN_NORTH_Y, NY_MANHATTAN_SOUTH_Y, NY_MANHATTAN_WIDTH,
    NY_MANHATTAN_BULGE_STEP, NY_HUDSON_WIDTH, NY_HUDSON_SOUTH_EXTENT,
    NY_EAST_RIVER_WIDTH, NY_EAST_RIVER_NORTH_OFFSET, NY_MAINLAND_NORTH_OFFSET,
    NY_HARBOR_WIDTH_FRAC, NY_STATEN_X_FRAC, NY_STATEN_Y_FRAC, NY_STATEN_RADIUS,
    NY_UPPER_BAY_X0_FRAC, NY_UPPER_BAY_X1_FRAC,
    SF_PACIFIC_FRAC, SF_BAY_X_FRAC, SF_BAY_END_Y_FRAC, SF_BAY_CREEP,
    SF_PENINSULA_Y0_FRAC, SF_PENINSULA_Y1_FRAC,
    SF_GOLDEN_GATE_Y_FRAC, SF_GOLDEN_GATE_X0_FRAC, SF_GOLDEN_GATE_X1_FRAC,
    SF_EAST_BAY_Y0_FRAC, SF_EAST_BAY_Y1_FRAC, SF_EAST_BAY_X_FRAC,
)
from city_overlays.core.logger import get_logger
from city_overlays.world.map import Grid, Tile, grid_size
from city_overlays.world.presets import CityId, detect_preset_city, parse_city_id

logger = get_logger(__name__)


# ============================================================
# Region Shapes
# ============================================================

@dataclass(frozen=True)
class Rect:
    """Half-open rectangle [x0, x1) x [y0, y1)."""
    x0: int
    y0: int
    x1: int
    y1: int

    def cells(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.y0, self.y1):
            for x in range(self.x0, self.x1):
                yield x, y


@dataclass(frozen=True)
class Disc:
    """Filled disc, membership dx*dx + dy*dy <= r*r."""
    cx: int
    cy: int
    r: int

    def cells(self) -> Iterator[Tuple[int, int]]:
        r2 = self.r * self.r
        for y in range(self.cy - self.r, self.cy + self.r + 1):
            for x in range(self.cx - self.r, self.cx + self.r + 1):
                dx = x - self.cx
                dy = y - self.cy
                if dx * dx + dy * dy <= r2:
                    yield x, y


@dataclass(frozen=True)
class RowSpans:
    """One half-open column span per row: (y, x0, x1)."""
    spans: Tuple[Tuple[int, int, int], ...]

    def cells(self) -> Iterator[Tuple[int, int]]:
        for y, x0, x1 in self.spans:
            for x in range(x0, x1):
                yield x, y


Region = Union[Rect, Disc, RowSpans]


@dataclass(frozen=True)
class Fill:
    """One recipe step: paint every cell of `region` with `terrain`."""
    name: str
    region: Region
    terrain: str
    skip_water: bool = False    # Leave tiles that are already water alone


# ============================================================
# Painting
# ============================================================

def paint_tile(tile: Tile, terrain: str) -> None:
    """Reset a tile to an undeveloped lot and mark it as `terrain`.

    Unconditional overwrite: whatever was simulated on the tile before
    (buildings, fire, zoning, subway) is discarded.
    """
    b = tile.building
    b.type = terrain
    b.level = 0
    b.population = 0
    b.jobs = 0
    b.powered = False
    b.watered = False
    b.on_fire = False
    b.fire_progress = 0
    b.age = 0
    b.construction_progress = PRISTINE_CONSTRUCTION
    b.abandoned = False
    tile.zone = ZONE_NONE
    tile.has_subway = False


def paint_at(grid: Grid, x: int, y: int, terrain: str,
             skip_water: bool = False) -> bool:
    """Paint one cell. Out-of-bounds cells are ignored. Returns True if painted."""
    size = grid_size(grid)
    if not (0 <= x < size and 0 <= y < size):
        return False
    tile = grid[y][x]
    if skip_water and tile.building.type == WATER:
        return False
    paint_tile(tile, terrain)
    return True


def apply_fill(grid: Grid, fill: Fill) -> int:
    """Run one recipe step. Returns the number of tiles painted."""
    painted = 0
    for x, y in fill.region.cells():
        if paint_at(grid, x, y, fill.terrain, skip_water=fill.skip_water):
            painted += 1
    return painted


# ============================================================
# Recipes
# ============================================================

def _new_york(size: int) -> List[Fill]:
    # Offsets below are absolute tiles, drawn for a 64 grid. Other sizes
    # get a distorted (but still deterministic) layout.
    cx = size // 2
    north, south = NY_MANHATTAN_NORTH_Y, NY_MANHATTAN_SOUTH_Y

    hudson_half = NY_HUDSON_WIDTH // 2
    hudson_cx = cx - NY_MANHATTAN_WIDTH // 2 - hudson_half
    east_half = NY_EAST_RIVER_WIDTH // 2
    east_cx = cx + NY_MANHATTAN_WIDTH // 2 + east_half

    # Narrowest at mid_y, one tile wider per bulge step toward either tip.
    mid_y = (north + south) / 2
    manhattan = []
    for y in range(north, south):
        width = NY_MANHATTAN_WIDTH + math.floor(abs(mid_y - y) / NY_MANHATTAN_BULGE_STEP)
        manhattan.append((y, cx - width // 2, cx + width // 2))

    harbor_width = math.floor(size * NY_HARBOR_WIDTH_FRAC)
    harbor_left = cx - harbor_width // 2
    mainland_top = north + NY_MAINLAND_NORTH_OFFSET

    return [
        Fill("hudson_river",
             Rect(hudson_cx - hudson_half, north,
                  hudson_cx + hudson_half, south + NY_HUDSON_SOUTH_EXTENT),
             WATER),
        Fill("east_river",
             Rect(east_cx - east_half, north + NY_EAST_RIVER_NORTH_OFFSET,
                  east_cx + east_half, south),
             WATER),
        Fill("manhattan", RowSpans(tuple(manhattan)), LAND),
        Fill("harbor", Rect(harbor_left, south, harbor_left + harbor_width, size), WATER),
        Fill("new_jersey", Rect(0, mainland_top, hudson_cx - hudson_half, south), LAND),
        Fill("brooklyn_queens", Rect(east_cx + east_half, mainland_top, size, south), LAND),
        Fill("staten_island",
             Disc(math.floor(size * NY_STATEN_X_FRAC),
                  math.floor(size * NY_STATEN_Y_FRAC),
                  NY_STATEN_RADIUS),
             LAND),
        Fill("upper_bay",
             Rect(math.floor(size * NY_UPPER_BAY_X0_FRAC), 0,
                  math.floor(size * NY_UPPER_BAY_X1_FRAC), north),
             WATER),
    ]


def _san_francisco(size: int) -> List[Fill]:
    pacific_x = math.floor(size * SF_PACIFIC_FRAC)
    bay_x = math.floor(size * SF_BAY_X_FRAC)
    bay_end_y = math.floor(size * SF_BAY_END_Y_FRAC)

    def bay_edge(y: int) -> int:
        # Shore sits at bay_x on row 0 and drifts SF_BAY_CREEP tiles west by bay_end_y.
        return math.floor(bay_x - (y / bay_end_y) * SF_BAY_CREEP)

    bay = tuple((y, bay_edge(y), size) for y in range(bay_end_y))
    peninsula = tuple(
        (y, pacific_x, bay_edge(y))
        for y in range(math.floor(size * SF_PENINSULA_Y0_FRAC),
                       math.floor(size * SF_PENINSULA_Y1_FRAC))
    )

    return [
        Fill("pacific_ocean", Rect(0, 0, pacific_x, size), WATER),
        Fill("sf_bay", RowSpans(bay), WATER),
        Fill("peninsula", RowSpans(peninsula), LAND, skip_water=True),
        Fill("golden_gate",
             Rect(math.floor(size * SF_GOLDEN_GATE_X0_FRAC), 0,
                  math.floor(size * SF_GOLDEN_GATE_X1_FRAC),
                  math.floor(size * SF_GOLDEN_GATE_Y_FRAC)),
             WATER),
        Fill("east_bay",
             Rect(math.floor(size * SF_EAST_BAY_X_FRAC),
                  math.floor(size * SF_EAST_BAY_Y0_FRAC),
                  size,
                  math.floor(size * SF_EAST_BAY_Y1_FRAC)),
             LAND, skip_water=True),
    ]


RECIPES: Dict[CityId, Callable[[int], List[Fill]]] = {
    CityId.NEW_YORK: _new_york,
    CityId.SAN_FRANCISCO: _san_francisco,
}


def has_overlay(city_id: Any) -> bool:
    """True when the city has a hand-tuned recipe."""
    return parse_city_id(city_id) in RECIPES


def recipe_for(city_id: Any, size: int) -> List[Fill]:
    """Ordered fills for a city. Empty when the city has no recipe."""
    cid = parse_city_id(city_id)
    recipe = RECIPES.get(cid) if cid is not None else None
    if recipe is None or size <= 0:
        return []
    return recipe(size)


# ============================================================
# Entry Points
# ============================================================

def apply_city_overlay(grid: Grid, city_id: Any) -> None:
    """Paint the preset mask for `city_id` onto `grid` in place.

    No-op for an empty grid, for presets without a recipe, and for
    unknown ids.
    """
    size = grid_size(grid)
    fills = recipe_for(city_id, size)
    if not fills:
        logger.debug(f"No overlay for {city_id!r} on {size}x{size} grid")
        return

    for fill in fills:
        painted = apply_fill(grid, fill)
        logger.debug(f"{fill.name}: {painted} tiles -> {fill.terrain}")


def apply_overlay_for_location(grid: Grid, lat: float, lng: float) -> Optional[CityId]:
    """Detect the preset at (lat, lng) and paint its overlay.

    Returns the detected city, or None when nothing matched (grid untouched).
    A matched preset without a recipe is still returned.
    """
    city = detect_preset_city(lat, lng)
    if city is not None:
        apply_city_overlay(grid, city)
    return city

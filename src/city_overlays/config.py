"""
City Overlays — Global Configuration
"""

# --- Preset Matching ---
MATCH_RADIUS_DEG: float = 0.8       # Planar degree distance; only meant for preset buttons

# --- Grid ---
REFERENCE_GRID_SIZE: int = 64       # Grid size the hand-tuned masks were drawn against
PRISTINE_CONSTRUCTION: int = 100    # Empty lots count as fully "built"

# --- Terrain ---
WATER: str = "water"
LAND: str = "grass"
ZONE_NONE: str = "none"

# --- New York (absolute offsets, tuned for a 64 grid) ---
NY_MANHATTAN_NORTH_Y: int = 8
NY_MANHATTAN_SOUTH_Y: int = 56
NY_MANHATTAN_WIDTH: int = 6
NY_MANHATTAN_BULGE_STEP: int = 8    # One extra tile of width per 8 rows from the middle
NY_HUDSON_WIDTH: int = 8
NY_HUDSON_SOUTH_EXTENT: int = 10    # Hudson keeps running past Manhattan's tip
NY_EAST_RIVER_WIDTH: int = 4
NY_EAST_RIVER_NORTH_OFFSET: int = 4
NY_MAINLAND_NORTH_OFFSET: int = 8   # New Jersey / Brooklyn start this far below Manhattan's top
NY_HARBOR_WIDTH_FRAC: float = 0.6
NY_STATEN_X_FRAC: float = 0.25
NY_STATEN_Y_FRAC: float = 0.75
NY_STATEN_RADIUS: int = 8
NY_UPPER_BAY_X0_FRAC: float = 0.3
NY_UPPER_BAY_X1_FRAC: float = 0.7

# --- San Francisco (fractions of grid size) ---
SF_PACIFIC_FRAC: float = 0.20
SF_BAY_X_FRAC: float = 0.50
SF_BAY_END_Y_FRAC: float = 0.75
SF_BAY_CREEP: int = 5               # Tiles the bay shore drifts west across its length
SF_PENINSULA_Y0_FRAC: float = 0.10
SF_PENINSULA_Y1_FRAC: float = 0.70
SF_GOLDEN_GATE_Y_FRAC: float = 0.05
SF_GOLDEN_GATE_X0_FRAC: float = 0.25
SF_GOLDEN_GATE_X1_FRAC: float = 0.45
SF_EAST_BAY_Y0_FRAC: float = 0.15
SF_EAST_BAY_Y1_FRAC: float = 0.65
SF_EAST_BAY_X_FRAC: float = 0.55

# --- Logging ---
LOGGER_NAME: str = "city_overlays"
LOG_DIR: str = "logs"
LOG_LEVEL: str = "INFO"
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(message)s"

"""Pytest configuration and shared fixtures for overlay tests."""

import logging

import pytest

from city_overlays.config import LOGGER_NAME
from city_overlays.core.logger import OverlayLogger
from city_overlays.world.map import Grid, blank_grid


@pytest.fixture
def grid64() -> Grid:
    """A blank 64x64 grass grid."""
    return blank_grid(64)


@pytest.fixture
def developed_grid64() -> Grid:
    """A 64x64 grid where every tile carries simulation state."""
    grid = blank_grid(64, terrain="residential")
    for row in grid:
        for tile in row:
            b = tile.building
            b.level = 3
            b.population = 40
            b.jobs = 12
            b.powered = True
            b.watered = True
            b.on_fire = True
            b.fire_progress = 55.0
            b.age = 900
            b.construction_progress = 20.0
            b.abandoned = True
            tile.zone = "residential"
            tile.has_subway = True
    return grid


@pytest.fixture
def empty_grid() -> Grid:
    return []


@pytest.fixture(autouse=True)
def fresh_logger():
    """Drop the OverlayLogger singleton and its handlers between tests."""
    yield
    root = logging.getLogger(LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
    OverlayLogger._instance = None

"""Tests for preset city matching."""

import math
from dataclasses import FrozenInstanceError

import pytest

from city_overlays.config import MATCH_RADIUS_DEG
from city_overlays.world import presets
from city_overlays.world.presets import (
    PRESET_CITIES, CityId, LatLng, PresetCity,
    detect_preset_city, get_preset, parse_city_id,
)


@pytest.mark.parametrize("city", PRESET_CITIES, ids=lambda c: c.id.value)
def test_center_matches_itself(city):
    """Every preset center detects its own city."""
    assert detect_preset_city(city.center.lat, city.center.lng) == city.id


@pytest.mark.parametrize("city", PRESET_CITIES, ids=lambda c: c.id.value)
def test_just_outside_radius_is_no_match(city):
    """A point a hair beyond the radius from a center matches nothing."""
    lat = city.center.lat + MATCH_RADIUS_DEG + 1e-6
    assert detect_preset_city(lat, city.center.lng) is None


def test_inside_radius_matches():
    """Offsets well inside the radius still match."""
    assert detect_preset_city(40.7 + 0.5, -74.0 - 0.5) == CityId.NEW_YORK
    assert detect_preset_city(37.5, -122.0) == CityId.SAN_FRANCISCO


def test_nearest_preset_wins():
    """Points near New York and near London resolve to their own city."""
    assert detect_preset_city(40.9, -74.1) == CityId.NEW_YORK
    assert detect_preset_city(51.3, 0.2) == CityId.LONDON


def test_far_away_is_no_match():
    assert detect_preset_city(0.0, 0.0) is None
    assert detect_preset_city(-90.0, 180.0) is None


def test_out_of_range_values_do_not_raise():
    """Latitudes beyond +/-90 are just unlikely to match."""
    assert detect_preset_city(400.0, -74.0) is None
    assert detect_preset_city(math.nan, math.nan) is None


def test_distance_is_planar_not_geodesic():
    """Longitude degrees count fully even at high latitude (Dublin at 53N)."""
    # 0.79 degrees of longitude at 53N is only ~53 km, but planar distance
    # treats it like 0.79 degrees of latitude: inside.
    assert detect_preset_city(53.3498, -6.2603 + 0.79) == CityId.DUBLIN
    # 0.81 degrees is outside, even though the great-circle distance is shorter
    # than 0.8 degrees of latitude.
    assert detect_preset_city(53.3498, -6.2603 + 0.81) is None


def test_tie_keeps_first_in_scan_order(monkeypatch):
    """Equidistant presets resolve to the one listed first."""
    monkeypatch.setattr(presets, "PRESET_CITIES", (
        PresetCity(CityId.TOKYO, LatLng(0.0, 0.5)),
        PresetCity(CityId.SYDNEY, LatLng(0.0, -0.5)),
    ))
    assert detect_preset_city(0.0, 0.0) == CityId.TOKYO


def test_exactly_on_the_radius_matches(monkeypatch):
    """The radius is inclusive: a point exactly 0.8 degrees away still matches."""
    monkeypatch.setattr(presets, "PRESET_CITIES", (
        PresetCity(CityId.TOKYO, LatLng(0.0, 0.0)),
    ))
    assert detect_preset_city(0.0, MATCH_RADIUS_DEG) == CityId.TOKYO
    assert detect_preset_city(-MATCH_RADIUS_DEG, 0.0) == CityId.TOKYO


def test_closer_later_preset_beats_earlier(monkeypatch):
    monkeypatch.setattr(presets, "PRESET_CITIES", (
        PresetCity(CityId.TOKYO, LatLng(0.0, 0.5)),
        PresetCity(CityId.SYDNEY, LatLng(0.0, -0.3)),
    ))
    assert detect_preset_city(0.0, 0.0) == CityId.SYDNEY


def test_city_id_is_a_string_tag():
    assert CityId.NEW_YORK == "new_york"
    assert [c.value for c in CityId] == [
        "new_york", "san_francisco", "london", "dublin", "tokyo", "sydney",
    ]


def test_preset_list_is_fixed_and_frozen():
    assert [c.id for c in PRESET_CITIES] == list(CityId)
    with pytest.raises(FrozenInstanceError):
        PRESET_CITIES[0].center.lat = 0.0


def test_parse_city_id():
    assert parse_city_id("tokyo") is CityId.TOKYO
    assert parse_city_id(CityId.LONDON) is CityId.LONDON
    assert parse_city_id("paris") is None
    assert parse_city_id("NEW_YORK") is None
    assert parse_city_id(None) is None
    assert parse_city_id(42) is None


def test_get_preset():
    london = get_preset("london")
    assert london.center == LatLng(51.5, -0.1)
    assert get_preset(CityId.SYDNEY).center.lat == -33.9
    assert get_preset("atlantis") is None

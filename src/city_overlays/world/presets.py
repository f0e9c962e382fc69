"""
Preset Cities — Match a coordinate to one of the hand-tuned preset locations.

Distances are plain Euclidean distances in degree space. The radius is
small enough that the missing spherical correction never matters for the
preset buttons this is meant for.

Usage:
    from city_overlays.world.presets import detect_preset_city

    city = detect_preset_city(40.71, -74.01)   # CityId.NEW_YORK
    detect_preset_city(0.0, 0.0)               # None
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from city_overlays.config import MATCH_RADIUS_DEG
from city_overlays.core.logger import get_logger

logger = get_logger(__name__)


class CityId(str, Enum):
    """Known preset city tags."""
    NEW_YORK = "new_york"
    SAN_FRANCISCO = "san_francisco"
    LONDON = "london"
    DUBLIN = "dublin"
    TOKYO = "tokyo"
    SYDNEY = "sydney"


@dataclass(frozen=True)
class LatLng:
    lat: float
    lng: float


@dataclass(frozen=True)
class PresetCity:
    id: CityId
    center: LatLng


# Scan order decides ties.
PRESET_CITIES: Tuple[PresetCity, ...] = (
    PresetCity(CityId.NEW_YORK, LatLng(40.7, -74.0)),
    PresetCity(CityId.SAN_FRANCISCO, LatLng(37.7749, -122.4194)),
    PresetCity(CityId.LONDON, LatLng(51.5, -0.1)),
    PresetCity(CityId.DUBLIN, LatLng(53.3498, -6.2603)),
    PresetCity(CityId.TOKYO, LatLng(35.7, 139.8)),
    PresetCity(CityId.SYDNEY, LatLng(-33.9, 151.2)),
)

_BY_ID: Dict[CityId, PresetCity] = {c.id: c for c in PRESET_CITIES}


def detect_preset_city(lat: float, lng: float) -> Optional[CityId]:
    """Return the nearest preset within MATCH_RADIUS_DEG, or None."""
    best_id: Optional[CityId] = None
    best_d = math.inf

    for city in PRESET_CITIES:
        d_lat = lat - city.center.lat
        d_lng = lng - city.center.lng
        d = math.sqrt(d_lat * d_lat + d_lng * d_lng)
        if d <= MATCH_RADIUS_DEG and (best_id is None or d < best_d):
            best_id, best_d = city.id, d

    return best_id


def parse_city_id(value: Any) -> Optional[CityId]:
    """Coerce a tag or CityId to a CityId. Unknown values give None."""
    if isinstance(value, CityId):
        return value
    if isinstance(value, str):
        try:
            return CityId(value)
        except ValueError:
            pass
    logger.debug(f"Unknown city id {value!r}")
    return None


def get_preset(city_id: Any) -> Optional[PresetCity]:
    """Look up the preset record for a tag or CityId. Unknown ids give None."""
    cid = parse_city_id(city_id)
    return _BY_ID.get(cid) if cid is not None else None

"""
Great-circle distance between lat/lng points.

Every distance in the package goes through :func:`distance`.
"""

import math
from dataclasses import dataclass

from ..constants import EARTH_RADIUS_KM, ErrorMessages


@dataclass(frozen=True)
class LocationPoint:
    """A WGS84 coordinate in degrees."""

    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(ErrorMessages.INVALID_LATITUDE.format(self.lat))
        if not -180.0 <= self.lng <= 180.0:
            raise ValueError(ErrorMessages.INVALID_LONGITUDE.format(self.lng))

    def to_list(self) -> list[float]:
        return [self.lat, self.lng]


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Compute great-circle distance between two points in kilometres.

    Args:
        lat1, lng1: First point (degrees)
        lat2, lng2: Second point (degrees)

    Returns:
        Distance in kilometres
    """
    dphi = math.radians(lat2 - lat1)
    dlam = math.radians(lng2 - lng1)

    a = (
        math.sin(dphi / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlam / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance(a: LocationPoint, b: LocationPoint) -> float:
    """Haversine distance between two points in kilometres."""
    return haversine_km(a.lat, a.lng, b.lat, b.lng)

from __future__ import annotations

from math import atan2, cos, floor, radians, sin, sqrt
from typing import Optional

EARTH_RADIUS_KM = 6371.0


def haversine_distance(
    latitude_1: float,
    longitude_1: float,
    latitude_2: float,
    longitude_2: float,
) -> float:
    """Return the haversine distance in kilometers between two coordinates."""
    lat1_rad = radians(latitude_1)
    lat2_rad = radians(latitude_2)

    diff_lat = lat2_rad - lat1_rad
    diff_lon = radians(longitude_2) - radians(longitude_1)

    a = sin(diff_lat / 2) ** 2 + cos(lat1_rad) * cos(lat2_rad) * sin(diff_lon / 2) ** 2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def has_coordinates(latitude: Optional[float], longitude: Optional[float]) -> bool:
    return latitude is not None and longitude is not None


def distance_band(distance: float, band_size: float = 10.0) -> int:
    """Index of the ``band_size`` wide ring that ``distance`` falls into."""
    return floor(distance / band_size)


__all__ = ["EARTH_RADIUS_KM", "distance_band", "has_coordinates", "haversine_distance"]

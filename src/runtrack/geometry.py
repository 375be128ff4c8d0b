#!/usr/bin/env python3
"""
Coordinate validation and great-circle distance utilities.
"""

from typing import NamedTuple
import math

# WGS84 equatorial radius in meters
EARTH_RADIUS = 6378137.0


class Position(NamedTuple):
    """Represents a geographic position with latitude and longitude."""

    latitude: float
    longitude: float


def is_valid_coordinate(latitude: float, longitude: float) -> bool:
    """
    Check that a latitude/longitude pair is finite and within range.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees

    Returns:
        True if latitude is in [-90, 90], longitude is in [-180, 180]
        and neither is NaN or infinite
    """
    try:
        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            return False
    except TypeError:
        return False
    return -90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0


def haversine_distance(coord1: Position, coord2: Position) -> float:
    """
    Calculate Haversine distance between two coordinates.

    Uses Haversine formula for great circle distance along the Earth's surface.

    Args:
        coord1: First coordinate position
        coord2: Second coordinate position

    Returns:
        Distance in meters
    """
    lat1, lon1 = math.radians(coord1.latitude), math.radians(coord1.longitude)
    lat2, lon2 = math.radians(coord2.latitude), math.radians(coord2.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )

    # Rounding can push a slightly above 1 for antipodal points
    return 2 * EARTH_RADIUS * math.asin(math.sqrt(min(1.0, a)))

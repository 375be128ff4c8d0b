#!/usr/bin/env python3
"""Data structure for a single location reading from a device sensor."""

from typing import Optional
from dataclasses import dataclass, replace

from .geometry import Position


@dataclass(frozen=True)
class Fix:
    """One raw location reading.

    Attributes:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        timestamp: Seconds on a monotonic clock
        accuracy: Horizontal accuracy radius in meters, if reported
        speed: Instantaneous speed in m/s, if reported
        heading: Direction of travel in degrees [0, 360), if reported
    """

    latitude: float
    longitude: float
    timestamp: float
    accuracy: Optional[float] = None
    speed: Optional[float] = None
    heading: Optional[float] = None

    @property
    def position(self) -> Position:
        return Position(self.latitude, self.longitude)

    @property
    def speed_or_zero(self) -> float:
        return self.speed or 0.0

    @property
    def heading_or_zero(self) -> float:
        return self.heading or 0.0

    def moved_to(self, latitude: float, longitude: float) -> "Fix":
        """Return a copy of this fix at a different position, all other fields kept."""
        return replace(self, latitude=latitude, longitude=longitude)

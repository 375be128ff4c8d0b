#!/usr/bin/env python3
"""
Accumulated route of accepted positions.
"""

from typing import Iterator, List, Optional, Tuple
import logging

from .geometry import Position, haversine_distance

logger = logging.getLogger(__name__)


class Track:
    """Ordered accepted points plus the running distance between them.

    The distance is only ever incremented as points are appended, so it
    never decreases while a session is active.
    """

    def __init__(self):
        self.points: List[Position] = []
        self.distance: float = 0.0

    def append(self, position: Position) -> float:
        """
        Append an accepted position and add its distance from the previous point.

        Args:
            position: Accepted position

        Returns:
            The distance added in meters (0 for the first point)
        """
        added = 0.0
        if self.points:
            added = haversine_distance(self.points[-1], position)
            self.distance += added
        self.points.append(Position(position.latitude, position.longitude))
        logger.debug(
            f"Track point {len(self.points)} added {added:.2f} m "
            f"(total {self.distance:.2f} m)"
        )
        return added

    def last(self) -> Optional[Position]:
        return self.points[-1] if self.points else None

    def reset(self) -> None:
        self.points = []
        self.distance = 0.0

    def coordinates(self) -> List[Tuple[float, float]]:
        """Return the points as (latitude, longitude) pairs for display."""
        return [(pos.latitude, pos.longitude) for pos in self.points]

    def get_bbox(self) -> Tuple[float, float, float, float]:
        """
        Calculate the bounding box of the track.

        Returns:
            Tuple of (south, west, north, east) in decimal degrees

        Raises:
            ValueError: If the track is empty
        """
        if not self.points:
            raise ValueError("Cannot calculate bounding box for empty track")
        latitudes = [pos.latitude for pos in self.points]
        longitudes = [pos.longitude for pos in self.points]
        return (min(latitudes), min(longitudes), max(latitudes), max(longitudes))

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index):
        return self.points[index]

    def __iter__(self) -> Iterator[Position]:
        return iter(self.points)

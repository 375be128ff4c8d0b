#!/usr/bin/env python3
"""
Replay of recorded GPX tracks as a feed of fixes.
"""

from typing import List, Optional, TextIO
import logging
import gpxpy
import gpxpy.gpx

from .fix import Fix

logger = logging.getLogger(__name__)


def _point_accuracy(
    point: gpxpy.gpx.GPXTrackPoint, default_accuracy: Optional[float], uere: float
) -> Optional[float]:
    """Estimate horizontal accuracy from HDOP, falling back to a fixed value."""
    if point.horizontal_dilution is not None:
        return point.horizontal_dilution * uere
    return default_accuracy


def fixes_from_gpx(
    file_input: TextIO,
    default_accuracy: Optional[float] = 5.0,
    uere: float = 5.0,
) -> List[Fix]:
    """
    Parse GPX data and turn every track point into a fix.

    Tracks and segments are concatenated in file order. Timestamps are
    seconds since the first timed point; points without a time are placed
    one second after the previous point.

    Args:
        file_input: File-like object containing GPX data
        default_accuracy: Accuracy in meters for points without HDOP
        uere: Range error in meters multiplied with HDOP to estimate accuracy

    Returns:
        List of fixes in file order

    Raises:
        gpxpy.gpx.GPXException: If GPX file is malformed.
    """
    gpx_data = gpxpy.parse(file_input)

    fixes: List[Fix] = []
    start_time = None
    timestamp = -1.0

    for track in gpx_data.tracks:
        for segment in track.segments:
            for point in segment.points:
                if point.time is not None:
                    if start_time is None:
                        start_time = point.time
                    timestamp = (point.time - start_time).total_seconds()
                else:
                    timestamp += 1.0
                fixes.append(
                    Fix(
                        latitude=point.latitude,
                        longitude=point.longitude,
                        timestamp=timestamp,
                        accuracy=_point_accuracy(point, default_accuracy, uere),
                        speed=point.speed,
                        heading=getattr(point, "course", None),
                    )
                )

    if not fixes:
        logger.warning("No track points found in GPX file")
    logger.debug(f"Parsed {len(fixes)} fixes from GPX file")
    return fixes


def load_fixes(
    filename: str,
    default_accuracy: Optional[float] = 5.0,
    uere: float = 5.0,
) -> List[Fix]:
    """
    Load a GPX file as a list of fixes.

    Args:
        filename: Path to GPX file
        default_accuracy: Accuracy in meters for points without HDOP
        uere: Range error in meters multiplied with HDOP to estimate accuracy

    Returns:
        List of fixes in file order

    Raises:
        FileNotFoundError: If file doesn't exist.
        PermissionError: If file can't be read.
        gpxpy.gpx.GPXException: If GPX file is malformed.
    """
    logger.debug(f"Reading GPX file: {filename}")
    with open(filename, "r", encoding="utf-8") as f:
        return fixes_from_gpx(f, default_accuracy, uere)

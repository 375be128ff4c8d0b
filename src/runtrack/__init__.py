#!/usr/bin/env python3
"""
Runtrack - cleans live GPS fixes into a runner's track.

This package scores, validates and dead-reckons a stream of location fixes
and accumulates the accepted positions into a track with a running distance.
"""
import importlib.metadata

__version__ = importlib.metadata.version("runtrack")

# Import main classes for public API
from .fix import Fix
from .geometry import Position, haversine_distance, is_valid_coordinate
from .config import FilterConfig
from .plausibility import RejectionReason
from .session import Accepted, PositionSource, Rejected, TrackingSession
from .track import Track

__all__ = [
    "Fix",
    "Position",
    "haversine_distance",
    "is_valid_coordinate",
    "FilterConfig",
    "RejectionReason",
    "Accepted",
    "PositionSource",
    "Rejected",
    "TrackingSession",
    "Track",
]

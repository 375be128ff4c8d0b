#!/usr/bin/env python3
"""Mutable per-session state of the position filter."""

from typing import Optional
import logging
import math

from .config import HISTORY_SIZE
from .fix import Fix
from .history import PositionHistory

logger = logging.getLogger(__name__)


class FilterState:
    """State owned by exactly one tracking session.

    Holds the last accepted fix, when it was accepted, its speed and the
    history of raw fixes. Only the session pipeline mutates it.
    """

    def __init__(self, history_size: int = HISTORY_SIZE):
        self.last_valid: Optional[Fix] = None
        self.last_update_time: Optional[float] = None
        self.last_speed: float = 0.0
        self.history = PositionHistory(history_size)

    def time_delta(self, fix: Fix) -> float:
        """Seconds between the last accepted fix and ``fix``, 0 if nothing was accepted yet."""
        if self.last_update_time is None:
            return 0.0
        return fix.timestamp - self.last_update_time

    def record_accepted(self, fix: Fix) -> None:
        """Make ``fix`` the reference for the next plausibility check."""
        speed = fix.speed_or_zero
        if not math.isfinite(speed) or speed < 0:
            logger.debug(f"Ignoring unusable speed reading {speed!r}")
            speed = 0.0
        self.last_valid = fix
        self.last_update_time = fix.timestamp
        self.last_speed = speed

    def reset(self) -> None:
        self.last_valid = None
        self.last_update_time = None
        self.last_speed = 0.0
        self.history.clear()

    def decision_snapshot(self) -> tuple:
        """The fields that decide acceptance; rejections leave them untouched."""
        return (self.last_valid, self.last_update_time, self.last_speed)

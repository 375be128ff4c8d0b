#!/usr/bin/env python3
"""
Hard accept/reject checks for fixes against the last accepted fix.
"""

from typing import Optional
from enum import Enum
import logging

from .config import FilterConfig
from .fix import Fix
from .geometry import haversine_distance, is_valid_coordinate
from .state import FilterState

logger = logging.getLogger(__name__)


class RejectionReason(Enum):
    """Enumeration for fix rejection reasons."""

    NONE = "none"
    INVALID_COORDINATE = "invalid_coordinate"
    ACCURACY = "accuracy"
    SPEED = "speed"
    MIN_DISTANCE = "min_distance"
    ACCELERATION = "acceleration"
    INACTIVE = "inactive"

    def __str__(self) -> str:
        return self.value


def check_plausibility(
    fix: Fix,
    state: FilterState,
    time_delta: float,
    config: Optional[FilterConfig] = None,
) -> RejectionReason:
    """
    Run the plausibility gate on a fix.

    Checks are applied in order and the first failing one is reported. A fix
    with no reported accuracy fails the accuracy check.

    Args:
        fix: Candidate fix, possibly already replaced by dead reckoning
        state: Filter state holding the last accepted fix and speed
        time_delta: Seconds since the last accepted fix
        config: Filter thresholds (defaults if omitted)

    Returns:
        RejectionReason.NONE if the fix is plausible, otherwise the reason
    """
    config = config or FilterConfig()

    if not is_valid_coordinate(fix.latitude, fix.longitude):
        return RejectionReason.INVALID_COORDINATE

    if fix.accuracy is None or fix.accuracy > config.min_accuracy:
        return RejectionReason.ACCURACY

    if fix.speed is not None and fix.speed > config.max_speed:
        return RejectionReason.SPEED

    if state.last_valid is not None:
        distance = haversine_distance(state.last_valid.position, fix.position)
        if distance < config.min_distance:
            return RejectionReason.MIN_DISTANCE

        # Allowed speed jump grows with elapsed seconds
        speed_change = abs(fix.speed_or_zero - state.last_speed)
        if speed_change > config.max_acceleration * time_delta:
            return RejectionReason.ACCELERATION

    return RejectionReason.NONE


def accept_fix(
    fix: Fix,
    state: FilterState,
    time_delta: float,
    config: Optional[FilterConfig] = None,
) -> bool:
    """Return True if the fix passes the plausibility gate."""
    reason = check_plausibility(fix, state, time_delta, config)
    if reason != RejectionReason.NONE:
        logger.debug(f"Fix at t={fix.timestamp} rejected: {reason}")
        return False
    return True

#!/usr/bin/env python3
"""
Signal quality scoring for incoming fixes.

The score is a confidence value in [0, 1] built from the accuracy the sensor
reports and from how well the fix agrees with the motion of the last
accepted fix. It decides whether a fix is routed through dead reckoning and
is also reported to the display layer once a fix has been accepted.
"""

from typing import Optional
import logging

from .config import FilterConfig
from .fix import Fix
from .state import FilterState

logger = logging.getLogger(__name__)

SPEED_CHANGE_PENALTY = 0.5
HEADING_CHANGE_PENALTY = 0.7


def accuracy_factor(accuracy: Optional[float], min_accuracy: float) -> float:
    """
    Scale factor for the reported accuracy.

    Args:
        accuracy: Reported accuracy radius in meters, or None if missing
        min_accuracy: Accuracy at or below which no penalty applies

    Returns:
        1.0 for good accuracy, ``min_accuracy / accuracy`` for worse accuracy,
        0.0 when accuracy is missing
    """
    if accuracy is None:
        return 0.0
    if accuracy > min_accuracy:
        return min_accuracy / accuracy
    return 1.0


def score_fix(
    fix: Fix, state: FilterState, config: Optional[FilterConfig] = None
) -> float:
    """
    Compute the quality score of a fix against the current filter state.

    Args:
        fix: The fix to score
        state: Filter state holding the last accepted fix and speed
        config: Filter thresholds (defaults if omitted)

    Returns:
        Quality score between 0 and 1
    """
    config = config or FilterConfig()
    quality = accuracy_factor(fix.accuracy, config.min_accuracy)

    # Flat speed delta, not scaled by elapsed time
    if state.last_speed > 0:
        speed_change = abs(fix.speed_or_zero - state.last_speed)
        if speed_change > config.max_acceleration:
            quality *= SPEED_CHANGE_PENALTY

    last_heading = state.last_valid.heading if state.last_valid else None
    if last_heading is not None:
        heading_change = abs(fix.heading_or_zero - last_heading)
        if heading_change > config.heading_change_limit:
            quality *= HEADING_CHANGE_PENALTY

    logger.debug(f"Quality score {quality:.3f} for fix at t={fix.timestamp}")
    return quality


def is_low_quality(score: float, config: Optional[FilterConfig] = None) -> bool:
    config = config or FilterConfig()
    return score < config.low_quality_threshold

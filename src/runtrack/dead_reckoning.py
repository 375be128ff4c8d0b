#!/usr/bin/env python3
"""
Prediction and dead-reckoning correction for low quality fixes.

When a fix scores below the quality threshold it is replaced by a position
extrapolated from the history buffer, blended with a constant-velocity
estimate from the last accepted fix.
"""

from typing import Optional
import logging
import math

from .config import FilterConfig
from .fix import Fix
from .history import PositionHistory
from .state import FilterState

logger = logging.getLogger(__name__)


def predict_next(history: PositionHistory) -> Optional[Fix]:
    """
    Extrapolate the next position from the last two buffered fixes.

    The step between the two most recent fixes is added to the most recent
    one in raw coordinate space. All other fields come from the most recent
    fix.

    Args:
        history: Buffer of recent raw fixes

    Returns:
        Predicted fix, or None if fewer than two fixes are buffered
    """
    last = history.last()
    previous = history.second_to_last()
    if last is None or previous is None:
        return None

    lat_delta = last.latitude - previous.latitude
    lon_delta = last.longitude - previous.longitude
    return last.moved_to(last.latitude + lat_delta, last.longitude + lon_delta)


def blend(actual: float, expected: float, smoothing_factor: float) -> float:
    return actual * (1 - smoothing_factor) + expected * smoothing_factor


def dead_reckon(
    predicted: Fix,
    last_valid: Optional[Fix],
    last_speed: float,
    time_delta: float,
    config: Optional[FilterConfig] = None,
) -> Fix:
    """
    Blend a predicted fix with a constant-velocity estimate.

    The estimate moves the last accepted position by ``speed * dt`` along the
    last heading, applied directly to degrees. In the default mode the
    heading value is passed to cos/sin unconverted; set
    ``FilterConfig.heading_in_radians`` to convert it from degrees first.

    Args:
        predicted: Fix extrapolated from the history buffer
        last_valid: Last accepted fix, if any
        last_speed: Speed of the last accepted fix in m/s
        time_delta: Seconds since the last accepted fix
        config: Filter thresholds (defaults if omitted)

    Returns:
        Blended fix, or ``predicted`` unchanged if nothing was accepted yet
    """
    if last_valid is None:
        return predicted
    config = config or FilterConfig()

    heading = last_valid.heading_or_zero
    if config.heading_in_radians:
        heading = math.radians(heading)

    expected_lat = last_valid.latitude + last_speed * math.cos(heading) * time_delta
    expected_lon = last_valid.longitude + last_speed * math.sin(heading) * time_delta

    return predicted.moved_to(
        blend(predicted.latitude, expected_lat, config.smoothing_factor),
        blend(predicted.longitude, expected_lon, config.smoothing_factor),
    )


def correct_fix(
    fix: Fix,
    state: FilterState,
    time_delta: float,
    config: Optional[FilterConfig] = None,
) -> Fix:
    """
    Replace a low quality fix by a dead-reckoned one.

    Args:
        fix: The low quality fix (already pushed onto the history buffer)
        state: Filter state with history and last accepted fix
        time_delta: Seconds since the last accepted fix
        config: Filter thresholds (defaults if omitted)

    Returns:
        The corrected fix, or ``fix`` itself when no prediction is possible
    """
    predicted = predict_next(state.history)
    if predicted is None:
        logger.debug("Not enough history for prediction, keeping raw fix")
        return fix

    corrected = dead_reckon(
        predicted, state.last_valid, state.last_speed, time_delta, config
    )
    logger.debug(
        f"Dead reckoning replaced ({fix.latitude:.6f}, {fix.longitude:.6f}) "
        f"with ({corrected.latitude:.6f}, {corrected.longitude:.6f})"
    )
    return corrected

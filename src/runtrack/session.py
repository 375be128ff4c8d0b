#!/usr/bin/env python3
"""
Tracking session: runs every fix through the position quality pipeline.

Each fix is processed to completion before the next one. The pipeline is

    history buffer -> quality score -> [dead reckoning] -> coordinate
    validation + plausibility gate -> track

A rejected fix leaves the track and the accepted-fix state unchanged.
"""

from typing import Iterable, Iterator, Optional, Union
from dataclasses import dataclass
from enum import Enum
import logging

from .acquisition import AcquisitionFailure
from .config import FilterConfig
from .dead_reckoning import correct_fix
from .fix import Fix
from .geometry import Position, is_valid_coordinate
from .kalman import KalmanSmoother
from .plausibility import RejectionReason, check_plausibility
from .quality import is_low_quality, score_fix
from .state import FilterState
from .track import Track

logger = logging.getLogger(__name__)


class PositionSource(Enum):
    """Where an accepted position came from."""

    GPS = "gps"
    DEAD_RECKONING = "dead-reckoning"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Accepted:
    """Outcome for a fix that was appended to the track."""

    point: Position
    distance: float  # cumulative track distance in meters
    quality: float
    source: PositionSource


@dataclass(frozen=True)
class Rejected:
    """Outcome for a fix that was dropped."""

    reason: RejectionReason


ProcessResult = Union[Accepted, Rejected]


class TrackingSession:
    """Owns the filter state and the track of one tracking session."""

    def __init__(self, config: Optional[FilterConfig] = None):
        self.config = config or FilterConfig()
        self.state = FilterState(self.config.history_size)
        self.track = Track()
        self.smoother: Optional[KalmanSmoother] = None
        if self.config.kalman_smoothing:
            self.smoother = KalmanSmoother(self.config.kalman_r, self.config.kalman_q)
        self.active = False
        self.error: Optional[str] = None

    def start_session(self, initial_fix: Optional[Fix] = None) -> Optional[ProcessResult]:
        """
        Reset the filter state and the track and start accepting fixes.

        Args:
            initial_fix: Optional first fix, processed like any other fix

        Returns:
            The outcome for ``initial_fix``, or None if none was given
        """
        self.state.reset()
        self.track.reset()
        if self.smoother is not None:
            self.smoother.reset()
        self.error = None
        self.active = True
        logger.debug("Tracking session started")
        if initial_fix is None:
            return None
        return self.process(initial_fix)

    def stop_session(self) -> None:
        """Freeze the session; later fixes are rejected without effect."""
        self.active = False
        logger.debug(
            f"Tracking session stopped with {len(self.track)} points, "
            f"{self.track.distance:.1f} m"
        )

    def process(self, fix: Fix) -> ProcessResult:
        """
        Decide whether a fix is accepted, corrected or rejected.

        Args:
            fix: Raw fix from the location source

        Returns:
            Accepted with the new point and running distance, or Rejected
        """
        if not self.active:
            return Rejected(RejectionReason.INACTIVE)

        if not is_valid_coordinate(fix.latitude, fix.longitude):
            logger.debug(f"Dropping fix with invalid coordinates at t={fix.timestamp}")
            return Rejected(RejectionReason.INVALID_COORDINATE)

        time_delta = self.state.time_delta(fix)
        self.state.history.push(fix)

        candidate = fix
        source = PositionSource.GPS
        score = score_fix(fix, self.state, self.config)
        if is_low_quality(score, self.config):
            candidate = correct_fix(fix, self.state, time_delta, self.config)
            if candidate is not fix:
                source = PositionSource.DEAD_RECKONING

        reason = check_plausibility(candidate, self.state, time_delta, self.config)
        if reason != RejectionReason.NONE:
            logger.debug(f"Position rejected due to quality checks: {reason}")
            return Rejected(reason)

        self.state.record_accepted(candidate)
        point = candidate.position
        if self.smoother is not None:
            point = Position(*self.smoother.smooth(point.latitude, point.longitude))
        self.track.append(point)

        # Live confidence is reported against the updated state
        quality = score_fix(candidate, self.state, self.config)
        return Accepted(point, self.track.distance, quality, source)

    def handle_failure(self, failure: AcquisitionFailure) -> str:
        """
        Stop tracking after a failure from the location source.

        Returns:
            The error message for display
        """
        self.error = f"Error getting location: {failure.describe()}"
        logger.error(self.error)
        self.stop_session()
        return self.error

    def feed(
        self, events: Iterable[Union[Fix, AcquisitionFailure]]
    ) -> Iterator[ProcessResult]:
        """
        Process a push feed of fixes until it ends or reports a failure.

        Args:
            events: Fixes and acquisition failures in arrival order

        Yields:
            One outcome per fix
        """
        for event in events:
            if isinstance(event, AcquisitionFailure):
                self.handle_failure(event)
                return
            yield self.process(event)

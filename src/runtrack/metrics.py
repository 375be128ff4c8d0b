"""
Module for collecting and logging metrics about a tracking session.
"""

import collections
import logging
from typing import Dict, Iterable, NamedTuple
from .session import Accepted, PositionSource, ProcessResult, Rejected
from .track import Track

logger = logging.getLogger(__name__)


class TrackMetrics(NamedTuple):
    """Container for tracking session metrics."""

    processed: int
    accepted: int
    dead_reckoned: int
    rejection_counts: Dict[str, int]
    track_points: int
    distance: float


def collect_metrics(results: Iterable[ProcessResult], track: Track) -> TrackMetrics:
    """
    Collect metrics from the outcomes of a session.

    Args:
        results: Outcome of every processed fix
        track: The session's track

    Returns:
        TrackMetrics containing all collected metrics
    """
    rejection_counts: Dict[str, int] = collections.defaultdict(int)
    processed = accepted = dead_reckoned = 0

    for result in results:
        processed += 1
        if isinstance(result, Accepted):
            accepted += 1
            if result.source == PositionSource.DEAD_RECKONING:
                dead_reckoned += 1
        elif isinstance(result, Rejected):
            rejection_counts[result.reason.value] += 1

    return TrackMetrics(
        processed=processed,
        accepted=accepted,
        dead_reckoned=dead_reckoned,
        rejection_counts=dict(rejection_counts),
        track_points=len(track),
        distance=track.distance,
    )


def log_metrics(metrics: TrackMetrics, enabled: bool) -> None:
    """
    Log detailed metrics after processing.

    Args:
        metrics: TrackMetrics containing collected metrics
        enabled: Whether structured metrics output was requested
    """
    if not enabled:
        return

    logger.debug("=== RUNTRACK_METRICS ===")
    logger.debug(f"fixes_processed={metrics.processed}")
    logger.debug(f"fixes_accepted={metrics.accepted}")
    logger.debug(f"fixes_dead_reckoned={metrics.dead_reckoned}")
    for key, count in sorted(metrics.rejection_counts.items()):
        logger.debug(f"rejected_reason[{key}]={count}")
    logger.debug(f"track_points={metrics.track_points}")
    logger.debug(f"track_distance_m={metrics.distance:.1f}")
    logger.debug("=== END_RUNTRACK_METRICS ===")

#!/usr/bin/env python3
"""
Failures reported by the location source and the initial-fix policy.

Obtaining a first fix is attempted twice, first with a short and then with
a long timeout. A fix that arrives must have valid coordinates; a fix with
poor accuracy is still used but logged as a warning.
"""

from typing import Callable, Optional, Sequence, Union
from dataclasses import dataclass
from enum import Enum
import logging

from .fix import Fix
from .geometry import is_valid_coordinate

logger = logging.getLogger(__name__)

INITIAL_TIMEOUTS = (5.0, 30.0)  # seconds
LOW_ACCURACY_WARNING = 100.0  # meters


class FailureKind(Enum):
    """Enumeration for location acquisition failures."""

    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


_DESCRIPTIONS = {
    FailureKind.PERMISSION_DENIED: "Location permission denied",
    FailureKind.POSITION_UNAVAILABLE: "Location information unavailable",
    FailureKind.TIMEOUT: "Location request timed out",
}


@dataclass(frozen=True)
class AcquisitionFailure:
    """A failure pushed by the location source instead of a fix."""

    kind: FailureKind
    message: str = ""

    def describe(self) -> str:
        """Human readable description of the failure."""
        return _DESCRIPTIONS.get(self.kind, self.message or "Unknown error")


class AcquisitionError(RuntimeError):
    """Raised when no usable fix could be obtained from the location source."""

    def __init__(self, failure: AcquisitionFailure):
        super().__init__(failure.describe())
        self.failure = failure


PositionRequest = Callable[[float], Union[Fix, AcquisitionFailure]]


def acquire_initial_fix(
    get_position: PositionRequest,
    timeouts: Sequence[float] = INITIAL_TIMEOUTS,
    warning_accuracy: float = LOW_ACCURACY_WARNING,
) -> Fix:
    """
    Obtain the first fix of a session.

    Args:
        get_position: Callable taking a timeout in seconds and returning a Fix,
                      returning an AcquisitionFailure or raising AcquisitionError
        timeouts: Timeout for each attempt, in order
        warning_accuracy: Accuracy in meters above which a warning is logged

    Returns:
        The acquired fix

    Raises:
        AcquisitionError: If every attempt failed or the fix has invalid coordinates
        ValueError: If no attempts are configured
    """
    if not timeouts:
        raise ValueError("At least one acquisition attempt is required")

    last_failure: Optional[AcquisitionFailure] = None
    fix: Optional[Fix] = None
    for attempt, timeout in enumerate(timeouts, start=1):
        try:
            result = get_position(timeout)
        except AcquisitionError as e:
            result = e.failure
        if isinstance(result, AcquisitionFailure):
            last_failure = result
            logger.debug(
                f"Initial fix attempt {attempt}/{len(timeouts)} "
                f"({timeout:.0f}s timeout) failed: {result.describe()}"
            )
            continue
        fix = result
        break

    if fix is None:
        assert last_failure is not None
        raise AcquisitionError(last_failure)

    if not is_valid_coordinate(fix.latitude, fix.longitude):
        raise AcquisitionError(
            AcquisitionFailure(FailureKind.OTHER, "Invalid coordinates received")
        )

    if fix.accuracy is not None and fix.accuracy > warning_accuracy:
        logger.warning(
            f"GPS accuracy is low ({round(fix.accuracy)}m). "
            f"Try moving to an open area."
        )

    return fix

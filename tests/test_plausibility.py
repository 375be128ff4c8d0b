import math
import pytest

from runtrack.config import FilterConfig
from runtrack.plausibility import RejectionReason, accept_fix, check_plausibility
from runtrack.state import FilterState


@pytest.fixture
def state(make_fix):
    state = FilterState()
    state.record_accepted(make_fix(latitude=40.0, longitude=-75.0, speed=2.0))
    return state


def test_first_fix_is_accepted(make_fix):
    assert check_plausibility(make_fix(), FilterState(), 0.0) == RejectionReason.NONE
    assert accept_fix(make_fix(), FilterState(), 0.0)


def test_poor_accuracy_rejected(make_fix):
    reason = check_plausibility(make_fix(accuracy=10.5), FilterState(), 0.0)
    assert reason == RejectionReason.ACCURACY


def test_missing_accuracy_rejected(make_fix):
    reason = check_plausibility(make_fix(accuracy=None), FilterState(), 0.0)
    assert reason == RejectionReason.ACCURACY


def test_excessive_speed_rejected_regardless_of_accuracy(make_fix):
    reason = check_plausibility(make_fix(accuracy=1.0, speed=25.0), FilterState(), 0.0)
    assert reason == RejectionReason.SPEED


def test_invalid_coordinates_rejected(make_fix):
    reason = check_plausibility(make_fix(latitude=math.nan), FilterState(), 0.0)
    assert reason == RejectionReason.INVALID_COORDINATE


def test_jitter_below_min_distance_rejected(make_fix, state):
    # About 0.2 m north of the last accepted fix
    fix = make_fix(latitude=40.0000018, timestamp=1.0)
    assert check_plausibility(fix, state, 1.0) == RejectionReason.MIN_DISTANCE


def test_displacement_above_min_distance_accepted(make_fix, state):
    fix = make_fix(latitude=40.0001, timestamp=1.0)
    assert check_plausibility(fix, state, 1.0) == RejectionReason.NONE


def test_speed_change_scaled_by_elapsed_time(make_fix, state):
    fix = make_fix(latitude=40.0001, speed=8.0)
    # 6 m/s change allowed after one second, not after half a second
    assert check_plausibility(fix, state, 1.0) == RejectionReason.NONE
    assert check_plausibility(fix, state, 0.5) == RejectionReason.ACCELERATION


def test_any_speed_change_rejected_at_zero_elapsed_time(make_fix, state):
    fix = make_fix(latitude=40.0001, speed=2.5)
    assert check_plausibility(fix, state, 0.0) == RejectionReason.ACCELERATION


def test_custom_thresholds(make_fix):
    config = FilterConfig(min_accuracy=50.0, max_speed=40.0)
    fix = make_fix(accuracy=30.0, speed=30.0)
    assert check_plausibility(fix, FilterState(), 0.0, config) == RejectionReason.NONE


def test_rejection_reason_str():
    assert str(RejectionReason.MIN_DISTANCE) == "min_distance"

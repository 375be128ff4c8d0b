from dataclasses import dataclass

MIN_ACCURACY = 10.0  # meters
MAX_SPEED = 20.0  # m/s (about 72 km/h)
MIN_DISTANCE = 0.5  # meters
MAX_ACCELERATION = 10.0
SMOOTHING_FACTOR = 0.3
LOW_QUALITY_THRESHOLD = 0.3
HEADING_CHANGE_LIMIT = 45.0  # degrees
HISTORY_SIZE = 5


@dataclass
class FilterConfig:
    """Thresholds for the position quality pipeline."""

    min_accuracy: float = MIN_ACCURACY
    max_speed: float = MAX_SPEED
    min_distance: float = MIN_DISTANCE
    # Compared against a flat speed delta when scoring and scaled by elapsed
    # seconds when gating.
    max_acceleration: float = MAX_ACCELERATION
    smoothing_factor: float = SMOOTHING_FACTOR
    low_quality_threshold: float = LOW_QUALITY_THRESHOLD
    heading_change_limit: float = HEADING_CHANGE_LIMIT
    history_size: int = HISTORY_SIZE
    heading_in_radians: bool = False
    kalman_smoothing: bool = False
    kalman_r: float = 0.0001
    kalman_q: float = 0.0001

    def __post_init__(self):
        if self.min_accuracy <= 0:
            raise ValueError("min_accuracy must be positive")
        if not 0.0 <= self.smoothing_factor <= 1.0:
            raise ValueError("smoothing_factor must be between 0 and 1")
        if self.history_size < 2:
            raise ValueError("history_size must be at least 2")
        for name in ("max_speed", "min_distance", "max_acceleration"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")


@dataclass
class TrackerConfig:
    """Configuration for the runtrack CLI."""

    default_accuracy: float = 5.0
    uere: float = 5.0
    initial_accuracy_warning: float = 100.0
    log_level: str = "WARNING"
    metrics: bool = False

"""Scalar Kalman filter used to smooth exported track points."""

from typing import Optional, Tuple


class KalmanFilter:
    """One-dimensional Kalman filter with a constant state model.

    The state is seeded with the first measurement rather than 0, so the
    first smoothed coordinate equals the first raw one.
    """

    def __init__(self, r: float = 0.01, q: float = 0.1):
        self.r = r  # measurement noise
        self.q = q  # process noise
        self.p = 1.0  # estimation error covariance
        self.x: Optional[float] = None  # state estimate
        self.k = 0.0  # Kalman gain

    def filter(self, measurement: float) -> float:
        if self.x is None:
            self.x = measurement
            return self.x

        # Prediction update
        self.p = self.p + self.q

        # Measurement update
        self.k = self.p / (self.p + self.r)
        self.x = self.x + self.k * (measurement - self.x)
        self.p = (1 - self.k) * self.p

        return self.x


class KalmanSmoother:
    """A pair of filters, one per coordinate axis, owned by a single session."""

    def __init__(self, r: float = 0.0001, q: float = 0.0001):
        self.r = r
        self.q = q
        self.reset()

    def reset(self) -> None:
        self.latitude_filter = KalmanFilter(self.r, self.q)
        self.longitude_filter = KalmanFilter(self.r, self.q)

    def smooth(self, latitude: float, longitude: float) -> Tuple[float, float]:
        return (
            self.latitude_filter.filter(latitude),
            self.longitude_filter.filter(longitude),
        )

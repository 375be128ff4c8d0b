import pytest

from runtrack.fix import Fix


@pytest.fixture
def make_fix():
    """Factory for fixes with good accuracy near (40, -75)."""

    def _make_fix(
        latitude=40.0,
        longitude=-75.0,
        timestamp=0.0,
        accuracy=5.0,
        speed=2.0,
        heading=None,
    ):
        return Fix(
            latitude=latitude,
            longitude=longitude,
            timestamp=timestamp,
            accuracy=accuracy,
            speed=speed,
            heading=heading,
        )

    return _make_fix

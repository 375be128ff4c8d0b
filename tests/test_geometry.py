import math
import pytest

from runtrack.geometry import Position, haversine_distance, is_valid_coordinate


@pytest.mark.parametrize(
    "lat, lon",
    [
        (0.0, 0.0),
        (90.0, 180.0),
        (-90.0, -180.0),
        (40.0, -75.0),
    ],
)
def test_valid_coordinates(lat, lon):
    assert is_valid_coordinate(lat, lon)


@pytest.mark.parametrize(
    "lat, lon",
    [
        (90.0001, 0.0),
        (-91.0, 0.0),
        (0.0, 180.5),
        (0.0, -181.0),
        (math.nan, 0.0),
        (0.0, math.nan),
        (math.inf, 0.0),
        (0.0, -math.inf),
    ],
)
def test_invalid_coordinates(lat, lon):
    assert not is_valid_coordinate(lat, lon)


def test_validator_never_raises_on_missing_values():
    assert not is_valid_coordinate(None, 0.0)


def test_haversine_distance_zero_distance():
    pos = Position(latitude=40.7128, longitude=-74.0060)
    assert haversine_distance(pos, pos) == 0.0


def test_haversine_distance_one_ten_thousandth_degree():
    # 0.0001 degrees of latitude is about 11.1 m
    pos1 = Position(40.0, -75.0)
    pos2 = Position(40.0001, -75.0)
    assert haversine_distance(pos1, pos2) == pytest.approx(11.13, abs=0.05)


def test_haversine_distance_known_values():
    # Paris to London, roughly 344 km on the WGS84 equatorial sphere
    paris = Position(latitude=48.8566, longitude=2.3522)
    london = Position(latitude=51.5074, longitude=-0.1278)
    assert haversine_distance(paris, london) / 1000 == pytest.approx(343.9, abs=1)


def test_haversine_distance_antipodal_points():
    distance = haversine_distance(Position(0.0, 0.0), Position(0.0, 180.0))
    assert distance == pytest.approx(math.pi * 6378137.0)

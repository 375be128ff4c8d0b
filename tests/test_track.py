import pytest

from runtrack.geometry import Position, haversine_distance
from runtrack.track import Track


def test_first_point_adds_no_distance():
    track = Track()
    added = track.append(Position(40.0, -75.0))
    assert added == 0.0
    assert track.distance == 0.0
    assert track.coordinates() == [(40.0, -75.0)]


def test_distance_accumulates_between_consecutive_points():
    points = [Position(40.0, -75.0), Position(40.0001, -75.0), Position(40.0001, -75.0001)]
    track = Track()
    for point in points:
        track.append(point)

    expected = haversine_distance(points[0], points[1]) + haversine_distance(
        points[1], points[2]
    )
    assert track.distance == pytest.approx(expected)
    assert len(track) == 3
    assert track[-1] == points[-1]
    assert list(track) == points


def test_zero_distance_point_is_still_appended():
    track = Track()
    track.append(Position(40.0, -75.0))
    track.append(Position(40.0, -75.0))
    assert len(track) == 2
    assert track.distance == 0.0


def test_reset():
    track = Track()
    track.append(Position(40.0, -75.0))
    track.append(Position(40.001, -75.0))
    track.reset()
    assert len(track) == 0
    assert track.distance == 0.0
    assert track.last() is None


def test_bbox():
    track = Track()
    track.append(Position(40.0, -75.0))
    track.append(Position(40.002, -75.003))
    assert track.get_bbox() == (40.0, -75.003, 40.002, -75.0)


def test_bbox_of_empty_track_raises():
    with pytest.raises(ValueError):
        Track().get_bbox()

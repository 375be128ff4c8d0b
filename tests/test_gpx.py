import io
import pytest
import gpxpy.gpx

from runtrack.gpx import fixes_from_gpx, load_fixes

GPX_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <trk>
    <trkseg>
{points}
    </trkseg>
  </trk>
</gpx>
"""


def make_gpx(points: str) -> io.StringIO:
    return io.StringIO(GPX_TEMPLATE.format(points=points))


def test_timed_points_become_relative_timestamps():
    data = make_gpx(
        """
      <trkpt lat="40.0" lon="-75.0"><time>2024-05-01T10:00:00Z</time></trkpt>
      <trkpt lat="40.0001" lon="-75.0"><time>2024-05-01T10:00:02Z</time></trkpt>
        """
    )
    fixes = fixes_from_gpx(data)

    assert [f.timestamp for f in fixes] == [0.0, 2.0]
    assert fixes[1].latitude == pytest.approx(40.0001)
    assert fixes[0].accuracy == 5.0


def test_untimed_points_are_one_second_apart():
    data = make_gpx(
        """
      <trkpt lat="40.0" lon="-75.0"></trkpt>
      <trkpt lat="40.0001" lon="-75.0"></trkpt>
      <trkpt lat="40.0002" lon="-75.0"></trkpt>
        """
    )
    assert [f.timestamp for f in fixes_from_gpx(data)] == [0.0, 1.0, 2.0]


def test_accuracy_from_hdop():
    data = make_gpx(
        """
      <trkpt lat="40.0" lon="-75.0"><hdop>1.5</hdop></trkpt>
        """
    )
    fixes = fixes_from_gpx(data, default_accuracy=None, uere=4.0)
    assert fixes[0].accuracy == pytest.approx(6.0)


def test_missing_accuracy_without_default():
    data = make_gpx('<trkpt lat="40.0" lon="-75.0"></trkpt>')
    assert fixes_from_gpx(data, default_accuracy=None)[0].accuracy is None


def test_empty_gpx():
    assert fixes_from_gpx(make_gpx("")) == []


def test_malformed_gpx():
    with pytest.raises(gpxpy.gpx.GPXException):
        fixes_from_gpx(io.StringIO("<gpx><trk>"))


def test_load_fixes_from_file(tmp_path):
    path = tmp_path / "run.gpx"
    path.write_text(
        GPX_TEMPLATE.format(points='<trkpt lat="40.0" lon="-75.0"></trkpt>'),
        encoding="utf-8",
    )
    fixes = load_fixes(str(path))
    assert len(fixes) == 1


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_fixes(str(tmp_path / "missing.gpx"))

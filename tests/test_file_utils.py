import os
import pytest

from runtrack import file_utils
from runtrack.file_utils import generate_output_filename


def test_gpx_extension_is_replaced(tmp_path):
    result = generate_output_filename(str(tmp_path / "morning run.gpx"))
    assert result == str(tmp_path / "morning run track.html")
    assert os.path.exists(result)


def test_other_extension_is_kept(tmp_path):
    result = generate_output_filename(str(tmp_path / "log.txt"))
    assert result == str(tmp_path / "log.txt track.html")


def test_existing_output_gets_numbered(tmp_path):
    (tmp_path / "run track.html").write_text("")
    (tmp_path / "run track (1).html").write_text("")
    result = generate_output_filename(str(tmp_path / "run.GPX"))
    assert result == str(tmp_path / "run track (2).html")


def test_gives_up_after_max_attempts(tmp_path, monkeypatch):
    monkeypatch.setattr(file_utils, "MAX_ATTEMPTS", 1)
    (tmp_path / "run track.html").write_text("")
    (tmp_path / "run track (1).html").write_text("")
    with pytest.raises(RuntimeError):
        generate_output_filename(str(tmp_path / "run.gpx"))


def test_unwritable_directory_raises_value_error(tmp_path):
    with pytest.raises(ValueError):
        generate_output_filename(str(tmp_path / "missing" / "run.gpx"))

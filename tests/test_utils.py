import pytest

from ghupdate.utils import create_dir_if_not_exists


def test_creates_missing_directory(tmp_path):
    target = tmp_path / "update"
    result = create_dir_if_not_exists(target)
    assert target.is_dir()
    assert result == target


def test_existing_directory_is_kept(tmp_path):
    target = tmp_path / "update"
    target.mkdir()
    marker = target / "update.log"
    marker.write_text("kept", encoding="utf-8")
    create_dir_if_not_exists(target)
    assert marker.read_text(encoding="utf-8") == "kept"


def test_accepts_string_path(tmp_path):
    target = tmp_path / "logs"
    create_dir_if_not_exists(str(target))
    assert target.is_dir()


def test_missing_parent_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_dir_if_not_exists(tmp_path / "missing" / "child")


def test_existing_file_is_left_alone(tmp_path):
    target = tmp_path / "update"
    target.write_text("data", encoding="utf-8")
    create_dir_if_not_exists(target)
    assert target.is_file()
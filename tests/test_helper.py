import hashlib
import os

import pytest

from syncr.helper import collect_file_data, is_directory, is_directory_writable

CONTENT = b"This is a test file"


@pytest.mark.parametrize(
    "path, want",
    [("", False), ("/tmp/notexisting", False)],
)
def test_is_directory_cases(path, want):
    assert is_directory(path) is want


def test_is_directory_true_for_existing_dir(tmp_path):
    assert is_directory(tmp_path) is True


def test_is_directory_false_for_file(tmp_path):
    f = tmp_path / "file.txt"
    f.write_bytes(CONTENT)
    assert is_directory(f) is False


def test_is_directory_writable_missing_dir():
    assert is_directory_writable("/tmp/notexisting") is False


def test_is_directory_writable_existing_dir_leaves_no_probe(tmp_path):
    assert is_directory_writable(tmp_path) is True
    assert list(tmp_path.iterdir()) == []


def test_is_directory_writable_false_for_file(tmp_path):
    f = tmp_path / "file.txt"
    f.write_bytes(CONTENT)
    assert is_directory_writable(f) is False


def test_collect_file_data(tmp_path):
    path = tmp_path / "testfile.txt"
    path.write_bytes(CONTENT)
    os.chmod(path, 0o644)

    files = collect_file_data(tmp_path)

    assert len(files) == 1
    assert files[0].name == "testfile.txt"
    assert files[0].checksum == hashlib.sha256(CONTENT).hexdigest()
    assert files[0].size == len(CONTENT)
    assert files[0].permissions == 0o644
    assert files[0].mod_time == os.stat(path).st_mtime_ns


def test_collect_file_data_empty_file_checksum(tmp_path):
    (tmp_path / "empty").write_bytes(b"")
    files = collect_file_data(tmp_path)
    assert files[0].checksum == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )
    assert files[0].size == 0


def test_collect_file_data_recurses_and_uses_base_names(tmp_path):
    sub = tmp_path / "sub" / "deeper"
    sub.mkdir(parents=True)
    (sub / "inner.txt").write_bytes(b"inner")
    (tmp_path / "outer.txt").write_bytes(b"outer")

    names = sorted(f.name for f in collect_file_data(tmp_path))
    assert names == ["inner.txt", "outer.txt"]


def test_collect_file_data_skips_symlinks(tmp_path):
    real = tmp_path / "real.txt"
    real.write_bytes(CONTENT)
    (tmp_path / "link.txt").symlink_to(real)

    names = [f.name for f in collect_file_data(tmp_path)]
    assert names == ["real.txt"]


def test_collect_file_data_empty_dir(tmp_path):
    assert collect_file_data(tmp_path) == []


def test_collect_file_data_missing_dir_raises(tmp_path):
    with pytest.raises(OSError):
        collect_file_data(tmp_path / "absent")
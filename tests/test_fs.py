import os
import time

import pytest

from nodekit import fs
from nodekit.file import FileError


def test_write_and_read_file(tmp_path):
    path = str(tmp_path / "a.txt")
    assert fs.write_file(path, b"abc") == 3
    assert fs.read_file(path) == b"abc"


def test_read_file_empty_path():
    assert fs.read_file("") == b""


def test_read_file_missing_raises(tmp_path):
    with pytest.raises(FileError):
        fs.read_file(str(tmp_path / "missing"))


def test_append_file(tmp_path):
    path = str(tmp_path / "a.txt")
    fs.append_file(path, "one")
    fs.append_file(path, "two")
    assert fs.read_file(path) == b"onetwo"


def test_readable_and_writable(tmp_path):
    path = str(tmp_path / "rw.txt")
    with fs.writable(path) as out:
        out.write(b"data")
    with fs.readable(path) as inp:
        assert inp.read() == b"data"


def test_exists_and_create_file(tmp_path):
    path = str(tmp_path / "c.txt")
    assert not fs.exists_file(path)
    assert fs.create_file(path)
    assert fs.exists_file(path)
    assert fs.is_file(path)
    assert not fs.exists_file("")


def test_create_file_keeps_content(tmp_path):
    path = str(tmp_path / "keep.txt")
    fs.write_file(path, b"keep")
    assert fs.create_file(path)
    assert fs.read_file(path) == b"keep"


def test_create_file_empty_path_raises():
    with pytest.raises(ValueError):
        fs.create_file("")


def test_file_size(tmp_path):
    path = str(tmp_path / "s.txt")
    fs.write_file(path, b"12345")
    assert fs.file_size(path) == 5
    assert fs.file_size(str(tmp_path / "missing")) == 0


def test_rename_and_move(tmp_path):
    src = str(tmp_path / "a.txt")
    mid = str(tmp_path / "b.txt")
    dst = str(tmp_path / "c.txt")
    fs.write_file(src, b"x")
    fs.rename_file(src, mid)
    assert not fs.exists_file(src) and fs.exists_file(mid)
    fs.move_file(mid, dst)
    assert fs.read_file(dst) == b"x"


def test_rename_empty_path_raises(tmp_path):
    with pytest.raises(ValueError):
        fs.rename_file("", str(tmp_path / "x"))


def test_remove_file(tmp_path):
    path = str(tmp_path / "r.txt")
    fs.write_file(path, b"x")
    fs.remove_file(path)
    assert not fs.exists_file(path)
    with pytest.raises(FileError):
        fs.remove_file(path)


def test_copy_file(tmp_path):
    src = str(tmp_path / "src.txt")
    dst = str(tmp_path / "dst.txt")
    fs.write_file(src, b"copy me")
    fs.copy_file(src, dst)
    assert fs.read_file(dst) == fs.read_file(src)
    with pytest.raises(FileError):
        fs.copy_file(str(tmp_path / "none"), dst)


def test_folders(tmp_path):
    folder = str(tmp_path / "dir")
    fs.create_folder(folder)
    assert fs.exists_folder(folder)
    assert fs.is_folder(folder)
    assert not fs.is_file(folder)
    fs.write_file(os.path.join(folder, "b.txt"), b"")
    fs.write_file(os.path.join(folder, "a.txt"), b"")
    assert fs.read_folder(folder) == ["a.txt", "b.txt"]
    assert fs.folder_size(folder) == 2


def test_create_folder_twice_raises(tmp_path):
    folder = str(tmp_path / "dir")
    fs.create_folder(folder)
    with pytest.raises(FileError):
        fs.create_folder(folder)


def test_remove_folder(tmp_path):
    folder = str(tmp_path / "gone")
    fs.create_folder(folder)
    fs.remove_folder(folder)
    assert not fs.exists_folder(folder)
    with pytest.raises(FileError):
        fs.remove_folder(folder)


def test_read_missing_folder_is_empty(tmp_path):
    assert fs.read_folder(str(tmp_path / "missing")) == []
    assert fs.folder_size("") == 0


def test_rename_and_move_folder(tmp_path):
    a = str(tmp_path / "a")
    b = str(tmp_path / "b")
    c = str(tmp_path / "c")
    fs.create_folder(a)
    fs.rename_folder(a, b)
    assert fs.exists_folder(b) and not fs.exists_folder(a)
    fs.move_folder(b, c)
    assert fs.exists_folder(c)


def test_copy_folder(tmp_path):
    src = str(tmp_path / "src")
    dst = str(tmp_path / "dst")
    fs.create_folder(src)
    fs.write_file(os.path.join(src, "f.txt"), b"inside")
    fs.copy_folder(src, dst)
    assert fs.read_file(os.path.join(dst, "f.txt")) == b"inside"
    with pytest.raises(FileError):
        fs.copy_folder(src, dst)


def test_file_times(tmp_path):
    path = str(tmp_path / "t.txt")
    before = int(time.time()) - 5
    fs.write_file(path, b"x")
    after = int(time.time()) + 5
    assert before <= fs.file_modification_time(path) <= after
    assert before <= fs.file_access_time(path) <= after
    assert before <= fs.file_creation_time(path) <= after


def test_file_time_missing_raises(tmp_path):
    with pytest.raises(FileError):
        fs.file_modification_time(str(tmp_path / "missing"))
    with pytest.raises(FileError):
        fs.file_creation_time(str(tmp_path / "missing"))


def test_std_error_free_keeps_descriptor():
    handle = fs.std_error()
    assert handle.fd == 2
    handle.free()
    assert handle.is_closed()
    assert os.write(2, b"") == 0
import sys

import pytest

from mindmerp.fileio import FileIOError, file_size, list_files, read_file, read_process, write_file


def test_text_round_trip(tmp_path):
    path = tmp_path / "note.txt"
    write_file(path, "hello\nmind map")
    assert read_file(path) == "hello\nmind map"


def test_binary_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    data = bytes(range(256))
    write_file(path, data)
    assert read_file(path, True) == data


def test_file_size_matches_written_bytes(tmp_path):
    path = tmp_path / "data.bin"
    data = b"\x00\x01\x02abc"
    write_file(path, data)
    assert file_size(path) == len(data)


def test_missing_file_errors(tmp_path):
    missing = tmp_path / "absent.mmf"
    with pytest.raises(FileIOError, match="could not be opened"):
        read_file(missing)
    with pytest.raises(FileIOError, match="could not be sized"):
        file_size(missing)


def test_write_into_missing_directory(tmp_path):
    with pytest.raises(FileIOError):
        write_file(tmp_path / "nope" / "file.txt", "x")


def test_list_files_separates_folders(tmp_path):
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "sub").mkdir()
    files, folders = list_files(tmp_path)
    assert files == ["a.txt", "b.txt"]
    assert folders == ["sub"]


def test_list_files_missing_directory(tmp_path):
    with pytest.raises(FileIOError, match="could not open directory"):
        list_files(tmp_path / "absent")


def test_read_process_output():
    output = read_process(f'"{sys.executable}" -c "print(42)"')
    assert output.strip() == "42"


def test_read_process_failure():
    with pytest.raises(FileIOError, match="could not be executed"):
        read_process(f'"{sys.executable}" -c "import sys; sys.exit(3)"')
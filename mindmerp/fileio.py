"""File, directory and process helpers."""

from __future__ import annotations

import os
import subprocess


class FileIOError(OSError):
    """A file, directory or process could not be used."""


def _open_error(path: str | os.PathLike) -> FileIOError:
    return FileIOError(f"File: {os.fspath(path)} could not be opened, probably doesn't exist")


def read_process(command: str) -> str:
    """Run a shell command and return what it wrote to standard output."""
    try:
        result = subprocess.run(command, shell=True, stdout=subprocess.PIPE, text=True, check=False)
    except OSError as exc:
        raise FileIOError(f"Executable: {command} could not be executed, probably doesn't exist") from exc
    if result.returncode != 0:
        raise FileIOError(f"Executable: {command} could not be executed, probably doesn't exist")
    return result.stdout


def current_user() -> str:
    """Name of the user running the program."""
    return read_process("whoami").rstrip("\n")


def file_size(path: str | os.PathLike) -> int:
    """Size of a file in bytes."""
    try:
        return os.stat(path).st_size
    except OSError as exc:
        raise FileIOError(f"File {os.fspath(path)} could not be sized, probably doesn't exist") from exc


def read_file(path: str | os.PathLike, binary: bool = False) -> str | bytes:
    """Whole contents of a file, as bytes when binary, otherwise as text."""
    try:
        if binary:
            with open(path, "rb") as handle:
                return handle.read()
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except OSError as exc:
        raise _open_error(path) from exc


def write_file(path: str | os.PathLike, data: str | bytes) -> None:
    """Replace a file's contents with text or bytes."""
    try:
        if isinstance(data, (bytes, bytearray)):
            with open(path, "wb") as handle:
                handle.write(data)
        else:
            with open(path, "w", encoding="utf-8") as handle:
                handle.write(data)
    except OSError as exc:
        raise _open_error(path) from exc


def list_files(path: str | os.PathLike) -> tuple[list[str], list[str]]:
    """Names of the files and of the folders in a directory, each list sorted."""
    try:
        names = os.listdir(path)
    except OSError as exc:
        raise FileIOError(f"could not open directory: {os.fspath(path)}") from exc
    files: list[str] = []
    folders: list[str] = []
    for name in sorted(names):
        full = os.path.join(path, name)
        try:
            is_dir = os.path.isdir(full) if os.path.exists(full) else os.stat(full) and False
        except OSError as exc:
            raise FileIOError(f"stat error on: {full}") from exc
        (folders if is_dir else files).append(name)
    return files, folders
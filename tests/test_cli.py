import subprocess
from unittest import mock

import pytest

from mindmerp.cli import Command, help_text, main, parse_command, tour_path


@pytest.mark.parametrize(
    "argv, expected",
    [
        ([], Command.START),
        (["--help"], Command.HELP),
        (["--version"], Command.VERSION),
        (["--license"], Command.LICENSE),
        (["--tour"], Command.TOUR),
        (["notes.mmf"], Command.OPEN),
        (["--version", "--help"], Command.VERSION),
    ],
)
def test_parse_command(argv, expected):
    assert parse_command(argv) is expected


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out == "MindMerp version: 0.5 beta\n"


def test_license(capsys):
    assert main(["--license"]) == 0
    assert capsys.readouterr().out == "MindMerp license: GPL3\n"


def test_help(capsys):
    assert main(["--help"]) == 0
    out = capsys.readouterr().out
    assert out == help_text() + "\n"
    assert out.startswith("MindMerp user manual.\n\n")
    assert out.rstrip("\n").endswith("automatically selected")
    assert "Ctrl+S saves the mind map to a file\n\n" in out


def test_tour_path_uses_current_user():
    done = subprocess.CompletedProcess("id -un", 0, stdout="alice\n")
    with mock.patch("subprocess.run", return_value=done):
        assert tour_path() == "/home/alice/.local/share/mindmerp/guidedtour.mmf"


def test_tour_path_when_user_lookup_fails():
    failed = subprocess.CompletedProcess("id -un", 1, stdout="")
    with mock.patch("subprocess.run", return_value=failed):
        assert tour_path() == "/home//.local/share/mindmerp/guidedtour.mmf"
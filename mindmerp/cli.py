"""Command-line entry point."""

from __future__ import annotations

import sys
from enum import Enum

from mindmerp.fileio import FileIOError, read_process

VERSION_TEXT = "MindMerp version: 0.5 beta"
LICENSE_TEXT = "MindMerp license: GPL3"
TOUR_FILE = ".local/share/mindmerp/guidedtour.mmf"

_RULE = "=============================================="


class Command(Enum):
    """What the command line asks for."""

    HELP = "--help"
    VERSION = "--version"
    LICENSE = "--license"
    TOUR = "--tour"
    OPEN = "open"
    START = "start"


def parse_command(argv: list[str]) -> Command:
    """The command named by the first argument; later arguments are ignored."""
    if not argv:
        return Command.START
    first = argv[0]
    for command in (Command.HELP, Command.VERSION, Command.LICENSE, Command.TOUR):
        if first == command.value:
            return command
    return Command.OPEN


def help_text() -> str:
    """The user manual printed by --help."""
    return "\n".join(
        [
            "MindMerp user manual.",
            "",
            _RULE,
            "mindmerp --help: of course shows this manual.",
            "mindmerp --version: shows the version of MindMerp.",
            "mindmerp --license: shows the license for MindMerp",
            "mindmerp --tour: will take you on a guided tour of MindMerp's functionality "
            "and how to use it (works when installed)",
            "mindmerp <file>: will load the specified (.mmf) file.",
            _RULE,
            "",
            "Double click on an empty part of the canvas to create a node.",
            "",
            "Double click on a node to edit its text.",
            "",
            "While editing a node's text, pressing the Enter key will exit text editing mode.",
            "",
            "While editing a node's text, if you press the Alt key you can switch on/off "
            "multiline editing mode.",
            "",
            "Holding the left mouse button down over a node will allow you to move the node "
            "around the canvas area.",
            "",
            "Holding the right mouse button down over a node will allow you to create a "
            "child-node and place it wherever you want in the canvas area.",
            "",
            "Holding the right mouse button down on an empty area of the canvas will allow you "
            "to drag the canvas around giving you more room to work with.",
            "",
            "Holding the Ctrl key and clicking on a node will delete the node and all nodes "
            "connected to it except its parent node.",
            "",
            "Ctrl+S saves the mind map to a file",
            "",
            "You'll notice two different colored squares at the top of the window in the middle "
            "of the menu bar, if you click the one on the left you can change",
            "the background color of your nodes, the one on the right changes the text color. "
            "After selecting colors the changes will take place the next time you",
            "create a node or drag out a child node",
            "",
            "When you click to change colors a small window will pop up, it'll be a palette with "
            "4 colors to choose from, you click one of the colors to set the associated",
            "color, if you right click any of them it will open up the system color picker "
            "dialog, and you'll be able to set the associated color within the palette and it'll be",
            "automatically selected",
        ]
    )


def tour_path() -> str:
    """Where the installed guided-tour map lives for the current user."""
    try:
        user = read_process("id -un")
    except FileIOError:
        user = ""
    if user.endswith("\n"):
        user = user[:-1]
    return f"/home/{user}/{TOUR_FILE}"


def main(argv: list[str] | None = None) -> int:
    """Print information, or start the editor with an optional map to load."""
    args = sys.argv[1:] if argv is None else list(argv)
    command = parse_command(args)
    if command is Command.HELP:
        print(help_text())
        return 0
    if command is Command.VERSION:
        print(VERSION_TEXT)
        return 0
    if command is Command.LICENSE:
        print(LICENSE_TEXT)
        return 0

    from mindmerp.app import run

    if command is Command.TOUR:
        run(tour_path())
    elif command is Command.OPEN:
        run(args[0])
    else:
        run(None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""The main window's menu bar: menus, colour buttons and keyboard shortcuts."""

from __future__ import annotations

from enum import Enum

from mindmerp.mindmap import MindMap, Mode

MENU_BAR_HEIGHT = 25
MENU_BAR_COLOR = (200, 200, 200)
MENU_LABELS = ("File", "Info")
MENU_TEXT_RECTS = ((10, 5, 75, 25), (45, 5, 75, 25))
KEY_S = 83
KEY_CONTROL = 16777249
SWATCH_SIZE = 25


class MenuAction(Enum):
    """What a click on the menu bar asks for."""

    FILE = "file"
    INFO = "info"
    NODE_COLOR = "node_color"
    TEXT_COLOR = "text_color"


def _over_file(x: int, y: int) -> bool:
    return 10 < x < 30 and 5 < y < 22


def _over_info(x: int, y: int) -> bool:
    return 45 < x < 75 and 5 < y < 22


class MainWindowController:
    """Menu bar hovering, clicks and the Ctrl shortcuts of the main window."""

    def __init__(self, mindmap: MindMap) -> None:
        self.mindmap = mindmap
        self.menu_hover: tuple[bool, bool] = (False, False)

    def mouse_move(self, x: int, y: int) -> bool:
        """Update which menu label is highlighted; always asks for a redraw."""
        self.menu_hover = (_over_file(x, y), _over_info(x, y))
        return True

    def left_down(self, x: int, y: int, width: int) -> MenuAction | None:
        """The action under a click in a window of the given width, if any."""
        self.menu_hover = (False, False)
        middle = width // 2
        if _over_file(x, y):
            return MenuAction.FILE
        if _over_info(x, y):
            return MenuAction.INFO
        if middle - SWATCH_SIZE < x < middle and 0 < y < MENU_BAR_HEIGHT:
            return MenuAction.NODE_COLOR
        if middle < x < middle + SWATCH_SIZE and 0 < y < MENU_BAR_HEIGHT:
            return MenuAction.TEXT_COLOR
        return None

    def key_down(self, key: int) -> bool:
        """Handle a key press; True when Ctrl+S asks for the map to be saved."""
        save = self.mindmap.mode == Mode.DELETING and key == KEY_S
        if save:
            self.mindmap.mode = Mode.IDLE
        if key == KEY_CONTROL:
            self.mindmap.mode = Mode.DELETING
        return save

    def key_up(self, key: int) -> None:
        """Releasing Ctrl leaves deletion mode."""
        if key == KEY_CONTROL:
            self.mindmap.mode = Mode.IDLE
"""State of the About dialog and of the colour picker popup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from mindmerp.color import Color
from mindmerp.coloroption import ColorOption, quadrant_at

ABOUT_TEXT = (
    "About MindMerp\n-------------------------\n\n"
    "This software allows you to make mind maps.\n\n"
    "Version: 0.5 beta\nDeveloped by: ShreddyKrueger\nJanuary 31, 2026\n"
    "Developed using Qt6\nLicense: GPL3"
)
ABOUT_TEXT_RECT = (10, 10, 350, 175)
OK_BUTTON_RECT = (135, 200, 100, 25)
ABOUT_SIZE = (360, 260)
PICKER_SIZE = (100, 100)

_BUTTON_COLORS = (
    Color(200, 200, 200),
    Color(0, 0, 0),
    Color(255, 255, 255),
    Color(0, 155, 255),
    Color(100, 100, 100),
    Color(155, 155, 155),
)


class ButtonEffect(IntEnum):
    """Visual state of the OK button."""

    NONE = 0
    HOVER = 1
    PRESSED = 2


def _on_ok_button(x: int, y: int) -> bool:
    bx, by, bw, bh = OK_BUTTON_RECT
    return bx < x < bx + bw and by < y < by + bh


@dataclass
class AboutDialogState:
    """The About dialog's OK button; mouse methods report when to redraw or close."""

    effect: ButtonEffect = ButtonEffect.NONE

    def mouse_down(self, x: int, y: int) -> bool:
        """Press the button if the cursor is on it; True when it was pressed."""
        if _on_ok_button(x, y):
            self.effect = ButtonEffect.PRESSED
            return True
        return False

    def mouse_move(self, x: int, y: int) -> bool:
        """Track hovering; True when the button's look changed."""
        if self.effect == ButtonEffect.PRESSED:
            return False
        hover = ButtonEffect.HOVER if _on_ok_button(x, y) else ButtonEffect.NONE
        if hover != self.effect:
            self.effect = hover
            return True
        return False

    def mouse_up(self, x: int, y: int) -> bool:
        """Release the button; True when the dialog should close."""
        self.effect = ButtonEffect.NONE
        return _on_ok_button(x, y)

    def button_colors(self) -> tuple[Color, Color]:
        """Fill and text colour of the OK button in its current state."""
        start = {ButtonEffect.HOVER: 2, ButtonEffect.PRESSED: 4}.get(self.effect, 0)
        return _BUTTON_COLORS[start], _BUTTON_COLORS[start + 1]


@dataclass
class ColorPickerState:
    """The popup showing a palette's four colours as 50x50 quadrants."""

    option: ColorOption

    def _select_at(self, x: int, y: int) -> None:
        index = quadrant_at(x, y)
        if index is not None:
            self.option.select(index)

    def pick(self, x: int, y: int) -> Color:
        """Select the quadrant under the cursor and return the selected colour."""
        self._select_at(x, y)
        self.option.refresh_image()
        return self.option.selected_color

    def replace(self, x: int, y: int, color: Color) -> Color:
        """Select the quadrant under the cursor and replace its colour."""
        self._select_at(x, y)
        self.option.set_color(self.option.selected, color)
        return self.option.selected_color
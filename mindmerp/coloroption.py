"""The four-colour palettes used to pick node and text colours."""

from __future__ import annotations

from mindmerp.color import Color
from mindmerp.image import Image

NODE_PALETTE = (
    Color(155, 155, 155, 255),
    Color(255, 255, 255, 255),
    Color(255, 255, 0, 255),
    Color(0, 255, 255, 255),
)
TEXT_PALETTE = (
    Color(0, 0, 0, 255),
    Color(255, 255, 255, 255),
    Color(255, 0, 0, 255),
    Color(0, 255, 255, 255),
)
SWATCH_SIZE = 25
_BORDER = Color(0, 0, 0)


class ColorOption:
    """A palette of four colours, one selected, with a swatch image of the selection."""

    def __init__(self, for_text: bool = False) -> None:
        self.for_text = bool(for_text)
        self.palette = list(TEXT_PALETTE if self.for_text else NODE_PALETTE)
        self.selected = 0
        self.image = Image(SWATCH_SIZE, SWATCH_SIZE)
        self.refresh_image()

    @property
    def selected_color(self) -> Color:
        return self.palette[self.selected]

    def select(self, index: int) -> None:
        """Select a palette entry."""
        if not 0 <= index < len(self.palette):
            raise IndexError(f"palette index {index} out of range")
        self.selected = index
        self.refresh_image()

    def set_color(self, index: int, color: Color) -> None:
        """Replace a palette entry and select it."""
        self.select(index)
        self.palette[index] = color
        self.refresh_image()

    def refresh_image(self) -> None:
        """Redraw the swatch: the selected colour inside a black border."""
        edge = SWATCH_SIZE - 1
        self.image.fill(self.selected_color)
        self.image.draw_line(0, 0, edge, 0, _BORDER)
        self.image.draw_line(edge, 0, edge, edge, _BORDER)
        self.image.draw_line(edge, edge, 0, edge, _BORDER)
        self.image.draw_line(0, edge, 0, 0, _BORDER)


def quadrant_at(x: int, y: int) -> int | None:
    """Palette index under (x, y) in the 100x100 picker, or None on a boundary or outside."""
    if 0 < x < 50:
        column = 0
    elif 50 < x < 100:
        column = 1
    else:
        return None
    if 0 < y < 50:
        return column
    if 50 < y < 100:
        return column + 2
    return None
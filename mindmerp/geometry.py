"""Integer points and rectangles used for hit testing and pixel addressing."""

from __future__ import annotations

from dataclasses import dataclass

BYTES_PER_PIXEL = 4


@dataclass(frozen=True)
class Point:
    """A point on the canvas or inside an image."""

    x: int = 0
    y: int = 0

    def to_position(self, width: int) -> int:
        """Byte offset of this point in a 4-byte-per-pixel buffer of the given width."""
        return (self.y * width + self.x) * BYTES_PER_PIXEL

    @classmethod
    def from_position(cls, position: int, width: int) -> Point:
        """Point addressed by a byte offset in a 4-byte-per-pixel buffer."""
        if width <= 0:
            raise ValueError("width must be positive")
        y, x = divmod(position // BYTES_PER_PIXEL, width)
        return cls(x, y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def hit_test(self, point: Point) -> bool:
        """Whether the point lies inside; the right edge counts, the others do not."""
        return (
            self.x < point.x <= self.x + self.width
            and self.y < point.y < self.y + self.height
        )
"""A small raster image stored as BGRA bytes, with primitive drawing."""

from __future__ import annotations

import math
import struct
import zlib
from collections import deque

from mindmerp.color import Color

TRANSPARENT = Color(0, 0, 0, 0)

_ARC_RADIUS = 25.0
_ARC_RANGES = {
    0: (90.0, 180.0),
    1: (0.0, 90.0),
    2: (270.0, 360.0),
    3: (180.0, 270.0),
}


class Image:
    """A width x height image with 4 bytes per pixel in B, G, R, A order."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = 0
        self.height = 0
        self.pixels = bytearray()
        self.set_size(width, height)

    def set_size(self, width: int, height: int) -> None:
        """Resize the buffer, keeping existing bytes and zero-filling new ones."""
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        size = width * height * 4
        if size <= len(self.pixels):
            del self.pixels[size:]
        else:
            self.pixels.extend(bytes(size - len(self.pixels)))
        self.width = width
        self.height = height

    def fill(self, color: Color) -> None:
        """Set every pixel to the colour."""
        self.pixels[:] = bytes((color.b, color.g, color.r, color.a)) * (self.width * self.height)

    def in_range(self, x: int, y: int) -> bool:
        """Whether (x, y) addresses a pixel of this image."""
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: float, y: float, color: Color) -> None:
        """Set one pixel; coordinates are truncated and out-of-range ones ignored."""
        px, py = int(x), int(y)
        if self.in_range(px, py):
            offset = (px + self.width * py) * 4
            self.pixels[offset:offset + 4] = bytes((color.b, color.g, color.r, color.a))

    def get_pixel(self, x: float, y: float) -> Color:
        """Colour of one pixel, or transparent black outside the image."""
        px, py = int(x), int(y)
        if not self.in_range(px, py):
            return TRANSPARENT
        offset = (px + self.width * py) * 4
        b, g, r, a = self.pixels[offset:offset + 4]
        return Color(r, g, b, a)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
        """Draw a line from (x0, y0) towards (x1, y1), the end point excluded."""
        dx, dy = x1 - x0, y1 - y0
        length = math.hypot(dx, dy)
        angle = math.radians(-math.degrees(math.atan2(dx, dy)) + 90.0)
        step_x, step_y = math.cos(angle), math.sin(angle)
        i = 0.0
        while i < length:
            self.set_pixel(x0 + step_x * i, y0 + step_y * i, color)
            i += 1.0

    def draw_arc(self, x: int, y: int, quadrant: int, color: Color) -> None:
        """Draw a quarter circle of radius 25 centred on (x, y).

        Quadrant 0 is upper left, 1 upper right, 2 lower right, 3 lower left.
        Any other value draws the single point at angle zero.
        """
        start, end = _ARC_RANGES.get(quadrant, (0.0, 0.0))
        angle = start
        while angle <= end:
            rad = math.radians(angle)
            self.set_pixel(x + math.cos(rad) * _ARC_RADIUS, y - math.sin(rad) * _ARC_RADIUS, color)
            angle += 1.0

    def fill_area(self, x: int, y: int, color: Color) -> None:
        """Flood-fill the 4-connected region of same-coloured pixels around (x, y)."""
        target = self.get_pixel(x, y)
        self.set_pixel(x, y, color)
        if target == color:
            return
        queue = deque([(int(x), int(y))])
        while queue:
            px, py = queue.popleft()
            if not self.in_range(px, py):
                continue
            for nx, ny in ((px - 1, py), (px + 1, py), (px, py - 1), (px, py + 1)):
                if self.get_pixel(nx, ny) == target and self.in_range(nx, ny):
                    self.set_pixel(nx, ny, color)
                    queue.append((nx, ny))

    def to_png(self) -> bytes:
        """Encode the image as an RGBA PNG."""
        if not self.width or not self.height:
            raise ValueError("cannot encode an empty image")
        stride = self.width * 4
        raw = bytearray()
        for row in range(self.height):
            line = bytearray(self.pixels[row * stride:(row + 1) * stride])
            line[0::4], line[2::4] = line[2::4], line[0::4]
            raw.append(0)
            raw += line
        header = struct.pack(">IIBBBBB", self.width, self.height, 8, 6, 0, 0, 0)
        return b"".join(
            (
                b"\x89PNG\r\n\x1a\n",
                _chunk(b"IHDR", header),
                _chunk(b"IDAT", zlib.compress(bytes(raw))),
                _chunk(b"IEND", b""),
            )
        )


def _chunk(tag: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(tag + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + tag + data + struct.pack(">I", crc)
"""RGBA colours."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"colour component {name} must be an integer in 0..255, got {value!r}")

    def to_html(self) -> str:
        """CSS ``rgb(...)`` notation, without alpha."""
        return f"rgb({self.r}, {self.g}, {self.b})"

    def to_hex(self) -> str:
        """``#rrggbb`` notation, without alpha."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
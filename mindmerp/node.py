"""Mind-map nodes: a framed, filled image with text and links to other nodes."""

from __future__ import annotations

from dataclasses import dataclass

from mindmerp.color import Color
from mindmerp.geometry import Point, Rect
from mindmerp.image import TRANSPARENT, Image

DEFAULT_NODE_COLOR = Color(155, 155, 155, 255)
DEFAULT_TEXT_COLOR = Color(0, 0, 0, 255)
DEFAULT_WIDTH = 200
DEFAULT_HEIGHT = 50
CORNER_RADIUS = 25
FRAME_COLOR = Color(0, 0, 0, 255)


@dataclass
class Connection:
    """A link to another node: its id, and its position in the map's node list."""

    ref: int = 0
    index: int = 0


class Node(Image):
    """A rounded box on the canvas with an id, a parent, text and child links."""

    def __init__(
        self,
        node_id: int,
        color: Color = DEFAULT_NODE_COLOR,
        text_color: Color = DEFAULT_TEXT_COLOR,
    ) -> None:
        super().__init__(DEFAULT_WIDTH, DEFAULT_HEIGHT)
        self.id = node_id
        self.color = color
        self.text_color = text_color
        self.x = 0
        self.y = 0
        self.parent_id = -1
        self.text = ""
        self.connections: list[Connection] = []
        self.marked = False
        self.fill(TRANSPARENT)
        self.draw_frame()

    def __repr__(self) -> str:
        return (
            f"Node(id={self.id}, x={self.x}, y={self.y}, "
            f"size={self.width}x{self.height}, parent_id={self.parent_id}, text={self.text!r})"
        )

    @property
    def center(self) -> tuple[int, int]:
        """Canvas coordinates of the middle of the node."""
        return self.x + self.width // 2, self.y + self.height // 2

    def hit_test(self, point: Point) -> bool:
        """Whether a canvas point falls on the node."""
        return Rect(self.x, self.y, self.width, self.height).hit_test(point)

    def draw_frame(self) -> None:
        """Draw the rounded black outline and flood the inside with the node colour."""
        width, height = self.width, self.height
        r = CORNER_RADIUS
        self.draw_arc(r, r, 0, FRAME_COLOR)
        self.draw_arc(width - r, r, 1, FRAME_COLOR)
        self.draw_arc(width - r, height - r, 2, FRAME_COLOR)
        self.draw_arc(r, height - r, 3, FRAME_COLOR)
        self.draw_line(r, 0, width - r, 0, FRAME_COLOR)
        self.draw_line(0, r, 0, height - r, FRAME_COLOR)
        self.draw_line(r, height - 1, width - r, height - 1, FRAME_COLOR)
        self.draw_line(width - 1, r, width - 1, height - r, FRAME_COLOR)
        self.fill_area(width // 2, height // 2, self.color)

    def resize(self, width: int, height: int) -> None:
        """Change the node's size and redraw it."""
        self.set_size(width, height)
        self.fill(TRANSPARENT)
        self.draw_frame()

    def is_visible(self, view_width: int, view_height: int) -> bool:
        """Whether any of the node can show in a view of the given size."""
        if self.x < 0 and self.x + self.width < 0:
            return False
        if self.x > view_width:
            return False
        if self.y < 0 and self.y + self.height < 0:
            return False
        return self.y <= view_height
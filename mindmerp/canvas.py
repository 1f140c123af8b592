"""Mouse handling on the canvas: creating, editing, moving and deleting nodes."""

from __future__ import annotations

from dataclasses import dataclass

from mindmerp.coloroption import ColorOption
from mindmerp.geometry import Point
from mindmerp.mindmap import MindMap, Mode
from mindmerp.node import Node

BACKGROUND = (42, 46, 50)
CHILD_DRAG_LIMIT = 50
CHILD_DRAG_FALLBACK = 25
_EDIT_OFFSET_X = 22
_EDIT_OFFSET_Y = 39
_EDIT_SHRINK_W = 50
_EDIT_SHRINK_H = 25
TEXT_MARGIN = 30


@dataclass(frozen=True)
class TextEditRequest:
    """Where and how to show the text editor for a node."""

    index: int
    x: int
    y: int
    width: int
    height: int
    text: str
    style_sheet: str


class CanvasController:
    """Turns canvas mouse events into changes to a mind map.

    Methods that may change what is on screen return True when a redraw is needed.
    """

    def __init__(self, mindmap: MindMap, node_colors: ColorOption, text_colors: ColorOption) -> None:
        self.mindmap = mindmap
        self.node_colors = node_colors
        self.text_colors = text_colors

    def _hit(self, x: int, y: int) -> tuple[int, Node] | None:
        point = Point(x, y)
        return next(
            ((i, node) for i, node in enumerate(self.mindmap.nodes) if node.hit_test(point)),
            None,
        )

    def _new_node(self) -> Node:
        return self.mindmap.new_node(self.node_colors.selected_color, self.text_colors.selected_color)

    def left_down(self, x: int, y: int) -> None:
        """Start dragging the node under the cursor."""
        self.begin_move_node(x, y)

    def right_down(self, x: int, y: int) -> None:
        """Drag out a child of the node under the cursor, or else drag the canvas."""
        if not self.create_child_node(x, y):
            self.begin_move_canvas(x, y)

    def double_click(self, x: int, y: int) -> TextEditRequest | None:
        """Edit the text of the node under the cursor, or else create a node there."""
        request = self.begin_edit_text(x, y)
        if request is None:
            self.create_node(x, y)
        return request

    def mouse_move(self, x: int, y: int) -> bool:
        """Continue the current drag."""
        mm = self.mindmap
        if mm.mode == Mode.POSITIONING_CHILD:
            node = mm.nodes[-1]
            node.x, node.y = x - mm.drag_x, y - mm.drag_y
        elif mm.mode == Mode.MOVING_NODE:
            node = mm.nodes[mm.target_index]
            node.x, node.y = x - mm.drag_x, y - mm.drag_y
        elif mm.mode == Mode.MOVING_CANVAS:
            dx, dy = x - mm.drag_x, y - mm.drag_y
            for node in mm.nodes:
                node.x += dx
                node.y += dy
            mm.drag_x, mm.drag_y = x, y
        else:
            return False
        return True

    def left_up(self, x: int, y: int) -> bool:
        """End a drag, or in deletion mode delete the branch under the cursor."""
        if self.mindmap.mode == Mode.DELETING:
            return bool(self.delete_branch_at(x, y))
        self.mindmap.mode = Mode.IDLE
        return False

    def right_up(self) -> None:
        """End a drag."""
        self.mindmap.mode = Mode.IDLE

    def create_node(self, x: int, y: int) -> Node:
        """Create a node in the selected colours at (x, y)."""
        node = self._new_node()
        node.x, node.y = x, y
        return node

    def create_child_node(self, x: int, y: int) -> Node | None:
        """Create a child of the node under the cursor and start positioning it."""
        mm = self.mindmap
        if mm.mode != Mode.IDLE:
            return None
        hit = self._hit(x, y)
        if hit is None:
            return None
        _, parent = hit
        mm.mode = Mode.POSITIONING_CHILD
        mm.drag_x, mm.drag_y = x - parent.x, y - parent.y
        if mm.drag_y > CHILD_DRAG_LIMIT:
            mm.drag_y = CHILD_DRAG_FALLBACK
        child = self._new_node()
        child.parent_id = parent.id
        parent.connections.append(_connection_to(child, len(mm.nodes) - 1))
        mm.set_connections(parent)
        return child

    def begin_edit_text(self, x: int, y: int) -> TextEditRequest | None:
        """Enter text editing for the node under the cursor."""
        hit = self._hit(x, y)
        if hit is None:
            return None
        index, node = hit
        self.mindmap.mode = Mode.EDITING_TEXT
        self.mindmap.target_index = index
        style = (
            f"QTextEdit{{background-color:{node.color.to_html()};"
            f"color:{node.text_color.to_html()};border:none;}}"
        )
        return TextEditRequest(
            index,
            node.x + _EDIT_OFFSET_X,
            node.y + _EDIT_OFFSET_Y,
            node.width - _EDIT_SHRINK_W,
            node.height - _EDIT_SHRINK_H,
            node.text,
            style,
        )

    def finish_edit_text(self, text: str, text_height: int) -> bool:
        """Store edited text and fit the node to it; nothing happens in multiline mode."""
        mm = self.mindmap
        if mm.multiline_edit:
            return False
        if mm.target_index is None or not 0 <= mm.target_index < len(mm.nodes):
            raise LookupError("no node is being edited")
        node = mm.nodes[mm.target_index]
        node.text = text
        mm.multiline_edit = False
        node.resize(node.width, text_height + TEXT_MARGIN)
        return True

    def begin_move_node(self, x: int, y: int) -> Node | None:
        """Start moving the node under the cursor, unless another drag is active."""
        mm = self.mindmap
        if mm.mode != Mode.IDLE:
            return None
        hit = self._hit(x, y)
        if hit is None:
            return None
        index, node = hit
        mm.mode = Mode.MOVING_NODE
        mm.target_index = index
        mm.drag_x, mm.drag_y = x - node.x, y - node.y
        return node

    def delete_branch_at(self, x: int, y: int) -> list[Node]:
        """Delete the branch rooted at the node under the cursor; returns removed nodes."""
        hit = self._hit(x, y)
        if hit is None:
            return []
        return self.mindmap.delete_branch(hit[1])

    def begin_move_canvas(self, x: int, y: int) -> None:
        """Start dragging the whole canvas."""
        mm = self.mindmap
        mm.mode = Mode.MOVING_CANVAS
        mm.drag_x, mm.drag_y = x, y


def _connection_to(node: Node, index: int):
    from mindmerp.node import Connection

    return Connection(node.id, index)
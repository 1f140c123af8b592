"""The mind map: its nodes, the links between them and the editing state."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum

from mindmerp.color import Color
from mindmerp.node import DEFAULT_NODE_COLOR, DEFAULT_TEXT_COLOR, Connection, Node

TITLE = "MindMerp"


class Mode(IntEnum):
    """What a mouse drag on the canvas currently does."""

    IDLE = 0
    POSITIONING_CHILD = 1
    MOVING_NODE = 2
    MOVING_CANVAS = 3
    EDITING_TEXT = 4
    DELETING = 5


@dataclass
class MindMap:
    """All nodes of a map together with the state of the current interaction."""

    nodes: list[Node] = field(default_factory=list)
    next_id: int = 0
    mode: Mode = Mode.IDLE
    target_index: int | None = None
    multiline_edit: bool = False
    drag_x: int = 0
    drag_y: int = 0
    filename: str = ""

    def reset(self) -> None:
        """Drop every node and return to the idle state; the filename is kept."""
        self.nodes.clear()
        self.next_id = 0
        self.mode = Mode.IDLE
        self.target_index = None
        self.multiline_edit = False

    def new_node(
        self,
        color: Color = DEFAULT_NODE_COLOR,
        text_color: Color = DEFAULT_TEXT_COLOR,
    ) -> Node:
        """Create a node with the next free id, append it and return it."""
        node = Node(self.next_id, color, text_color)
        self.next_id += 1
        self.nodes.append(node)
        return node

    def get_node_by_id(self, node_id: int) -> Node | None:
        """The node with the given id, or None."""
        return next((node for node in self.nodes if node.id == node_id), None)

    def identify_connection(self, connection: Connection) -> bool:
        """Point the connection's index at the node it refers to; False if it is gone."""
        for index, node in enumerate(self.nodes):
            if node.id == connection.ref:
                connection.index = index
                return True
        return False

    def set_connections(self, node: Node) -> None:
        """Refresh a node's connection indexes and drop links to missing nodes."""
        node.connections[:] = [c for c in node.connections if self.identify_connection(c)]

    def connect_all(self) -> None:
        """Refresh the connections of every node."""
        for node in self.nodes:
            self.set_connections(node)

    def connection_lines(self) -> Iterator[tuple[int, int, int, int]]:
        """Centre-to-centre segments (x0, y0, x1, y1) for every link."""
        for node in self.nodes:
            x0, y0 = node.center
            for connection in node.connections:
                x1, y1 = self.nodes[connection.index].center
                yield x0, y0, x1, y1

    def delete_branch(self, target: Node) -> list[Node]:
        """Remove a node and everything linked below it, never its parent.

        Returns the removed nodes in their former order.
        """
        target.marked = True
        queue = deque(i for i, node in enumerate(self.nodes) if node.id == target.id)
        while queue:
            node = self.nodes[queue.popleft()]
            for connection in node.connections:
                linked = self.nodes[connection.index]
                if linked.id != target.parent_id and not linked.marked:
                    linked.marked = True
                    queue.append(connection.index)
        removed = [node for node in self.nodes if node.marked]
        self.nodes[:] = [node for node in self.nodes if not node.marked]
        self.connect_all()
        return removed


def window_title(filename: str) -> str | None:
    """Window title naming the file, or None when the path holds no usable directory part."""
    slash = filename.rfind("/")
    if slash > 4:
        return f"{TITLE} - {filename[slash + 1:]}"
    return None
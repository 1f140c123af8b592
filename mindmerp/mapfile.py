"""Reading and writing mind maps in the binary .mmf format.

Layout, little-endian: a version byte, the node count, each node, then the
next free node id. A node is x, y, width, height, id, parent id and the
connection count as 32-bit integers; a (ref, index) pair of integers per
connection; node colour and text colour as RGBA bytes; the text length and
the UTF-8 text.
"""

from __future__ import annotations

import os
import struct
from pathlib import Path

from mindmerp.color import Color
from mindmerp.mindmap import MindMap
from mindmerp.node import Connection, Node

FORMAT_VERSION = 1
EXTENSION = ".mmf"

_HEADER = struct.Struct("<Bi")
_NODE = struct.Struct("<7i")
_CONNECTION = struct.Struct("<2i")
_COLORS = struct.Struct("<8B")
_INT = struct.Struct("<i")


class MapFileError(Exception):
    """A map file could not be read or written."""


def has_map_extension(filename: str) -> bool:
    """Whether a save name is accepted without appending '.mmf'.

    Names of four characters or fewer never pass; a longer name passes unless
    none of its last four characters line up with '.', 'k', 'm', 'm'.
    """
    if len(filename) <= 4:
        return False
    return any(a == b for a, b in zip(filename[-4:], ".kmm"))


def ensure_extension(filename: str) -> str:
    """The filename with '.mmf' appended when the save check rejects it."""
    return filename if has_map_extension(filename) else filename + EXTENSION


def _encode_node(node: Node) -> bytes:
    text = node.text.encode("utf-8")
    parts = [
        _NODE.pack(
            node.x, node.y, node.width, node.height,
            node.id, node.parent_id, len(node.connections),
        )
    ]
    parts.extend(_CONNECTION.pack(c.ref, c.index) for c in node.connections)
    c, t = node.color, node.text_color
    parts.append(_COLORS.pack(c.r, c.g, c.b, c.a, t.r, t.g, t.b, t.a))
    parts.append(_INT.pack(len(text)))
    parts.append(text)
    return b"".join(parts)


def encode_map(mindmap: MindMap) -> bytes:
    """The map in .mmf form."""
    parts = [_HEADER.pack(FORMAT_VERSION, len(mindmap.nodes))]
    parts.extend(_encode_node(node) for node in mindmap.nodes)
    parts.append(_INT.pack(mindmap.next_id))
    return b"".join(parts)


def save_map(mindmap: MindMap, path: str | os.PathLike) -> None:
    """Write the map to a file."""
    try:
        data = encode_map(mindmap)
    except struct.error as exc:
        raise MapFileError(f"map cannot be stored: {exc}") from exc
    try:
        Path(path).write_bytes(data)
    except OSError as exc:
        raise MapFileError(
            f"File: {os.fspath(path)} could not be opened, probably doesn't exist"
        ) from exc


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def unpack(self, layout: struct.Struct) -> tuple:
        end = self._pos + layout.size
        if end > len(self._data):
            raise MapFileError("unexpected end of map file")
        values = layout.unpack_from(self._data, self._pos)
        self._pos = end
        return values

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise MapFileError("unexpected end of map file")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk


def _decode_node(reader: _Reader) -> Node:
    x, y, width, height, node_id, parent_id, count = reader.unpack(_NODE)
    if width < 0 or height < 0 or count < 0:
        raise MapFileError("corrupt node record in map file")
    connections = [Connection(*reader.unpack(_CONNECTION)) for _ in range(count)]
    rgba = reader.unpack(_COLORS)
    (length,) = reader.unpack(_INT)
    if length < 0:
        raise MapFileError("corrupt text length in map file")
    text = reader.take(length).decode("utf-8", errors="replace")
    node = Node(node_id, Color(*rgba[:4]), Color(*rgba[4:]))
    node.x, node.y = x, y
    node.parent_id = parent_id
    node.connections = connections
    node.text = text
    node.resize(width, height)
    return node


def decode_map(data: bytes) -> tuple[list[Node], int]:
    """Nodes and next free id read from .mmf data."""
    reader = _Reader(data)
    _version, count = reader.unpack(_HEADER)
    if count < 0:
        raise MapFileError("corrupt node count in map file")
    nodes = [_decode_node(reader) for _ in range(count)]
    (next_id,) = reader.unpack(_INT)
    return nodes, next_id


def load_map(mindmap: MindMap, path: str | os.PathLike) -> None:
    """Replace the map's contents with those of a file; on error the map is untouched."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapFileError(
            f"File: {os.fspath(path)} could not be opened, probably doesn't exist"
        ) from exc
    nodes, next_id = decode_map(data)
    mindmap.reset()
    mindmap.nodes.extend(nodes)
    mindmap.next_id = next_id
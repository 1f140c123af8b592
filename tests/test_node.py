import pytest

from mindmerp.color import Color
from mindmerp.geometry import Point
from mindmerp.image import TRANSPARENT
from mindmerp.node import (
    DEFAULT_HEIGHT,
    DEFAULT_NODE_COLOR,
    DEFAULT_TEXT_COLOR,
    DEFAULT_WIDTH,
    FRAME_COLOR,
    Connection,
    Node,
)


def test_new_node_defaults():
    node = Node(7)
    assert node.id == 7
    assert node.parent_id == -1
    assert (node.width, node.height) == (DEFAULT_WIDTH, DEFAULT_HEIGHT)
    assert node.color == DEFAULT_NODE_COLOR
    assert node.text_color == DEFAULT_TEXT_COLOR
    assert node.connections == []
    assert node.text == ""
    assert not node.marked


def test_frame_is_black_and_inside_is_filled():
    yellow = Color(255, 255, 0, 255)
    node = Node(0, yellow)
    assert node.get_pixel(DEFAULT_WIDTH // 2, DEFAULT_HEIGHT // 2) == yellow
    assert node.get_pixel(DEFAULT_WIDTH // 2, 0) == FRAME_COLOR
    assert node.get_pixel(DEFAULT_WIDTH // 2, DEFAULT_HEIGHT - 1) == FRAME_COLOR


def test_rounded_corners_stay_transparent():
    node = Node(0)
    assert node.get_pixel(0, 0) == TRANSPARENT
    assert node.get_pixel(DEFAULT_WIDTH - 1, DEFAULT_HEIGHT - 1) == TRANSPARENT


def test_resize_redraws_frame_at_new_size():
    color = Color(0, 255, 255, 255)
    node = Node(1, color)
    node.resize(DEFAULT_WIDTH, 2 * DEFAULT_HEIGHT)
    assert node.height == 2 * DEFAULT_HEIGHT
    assert len(node.pixels) == node.width * node.height * 4
    assert node.get_pixel(DEFAULT_WIDTH // 2, 2 * DEFAULT_HEIGHT - 1) == FRAME_COLOR
    assert node.get_pixel(DEFAULT_WIDTH // 2, DEFAULT_HEIGHT) == color
    assert node.get_pixel(0, DEFAULT_HEIGHT) == FRAME_COLOR


def test_hit_test_excludes_left_and_top_edges():
    node = Node(0)
    node.x, node.y = 100, 40
    assert node.hit_test(Point(101, 41))
    assert node.hit_test(Point(100 + DEFAULT_WIDTH, 41))
    assert not node.hit_test(Point(100, 41))
    assert not node.hit_test(Point(101, 40))
    assert not node.hit_test(Point(101, 40 + DEFAULT_HEIGHT))


@pytest.mark.parametrize(
    "x, y, visible",
    [
        (0, 0, True),
        (-DEFAULT_WIDTH + 1, 0, True),
        (-DEFAULT_WIDTH - 1, 0, False),
        (800, 0, True),
        (801, 0, False),
        (0, 600, True),
        (0, 601, False),
        (0, -DEFAULT_HEIGHT - 1, False),
    ],
)
def test_is_visible(x, y, visible):
    node = Node(0)
    node.x, node.y = x, y
    assert node.is_visible(800, 600) is visible


def test_center_tracks_position():
    node = Node(0)
    node.x, node.y = 10, 20
    cx, cy = node.center
    assert (cx - node.x, cy - node.y) == (DEFAULT_WIDTH // 2, DEFAULT_HEIGHT // 2)


def test_connection_defaults_and_fields():
    assert Connection() == Connection(0, 0)
    conn = Connection(ref=4, index=2)
    conn.index = 3
    assert (conn.ref, conn.index) == (4, 3)
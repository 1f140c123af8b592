import pytest

from mindmerp.color import Color
from mindmerp.coloroption import ColorOption, quadrant_at

BLACK = Color(0, 0, 0)


def border_points():
    edge = 24
    for i in range(25):
        yield from ((i, 0), (i, edge), (0, i), (edge, i))


def test_default_palettes():
    assert ColorOption(False).palette[0] == Color(155, 155, 155, 255)
    assert ColorOption(True).palette[0] == Color(0, 0, 0, 255)
    assert ColorOption(True).selected == 0


def test_palettes_have_four_entries():
    assert len(ColorOption(False).palette) == len(ColorOption(True).palette) == 4


def test_swatch_shows_selected_color_with_border():
    option = ColorOption(False)
    assert option.image.get_pixel(12, 12) == option.selected_color
    assert all(option.image.get_pixel(x, y) == BLACK for x, y in border_points())


def test_select_updates_swatch():
    option = ColorOption(False)
    option.select(2)
    assert option.selected_color == option.palette[2]
    assert option.image.get_pixel(12, 12) == option.palette[2]


def test_select_out_of_range():
    option = ColorOption(True)
    with pytest.raises(IndexError):
        option.select(4)


def test_set_color_replaces_and_selects():
    option = ColorOption(True)
    color = Color(1, 2, 3)
    option.set_color(3, color)
    assert option.palette[3] == color
    assert option.selected == 3
    assert option.image.get_pixel(5, 5) == color


def test_palettes_are_independent():
    first, second = ColorOption(False), ColorOption(False)
    first.set_color(1, Color(9, 9, 9))
    assert second.palette[1] != first.palette[1]
    assert second.palette[1] == ColorOption(False).palette[1]


@pytest.mark.parametrize(
    "x,y,expected",
    [(25, 25, 0), (75, 25, 1), (25, 75, 2), (75, 75, 3), (50, 25, None), (0, 10, None), (10, 100, None)],
)
def test_quadrant_at(x, y, expected):
    assert quadrant_at(x, y) == expected
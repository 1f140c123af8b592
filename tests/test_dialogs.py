from mindmerp.color import Color
from mindmerp.coloroption import ColorOption
from mindmerp.dialogs import AboutDialogState, ButtonEffect, ColorPickerState


def test_hover_changes_once():
    state = AboutDialogState()
    assert state.mouse_move(150, 210) is True
    assert state.effect == ButtonEffect.HOVER
    assert state.mouse_move(160, 212) is False
    assert state.mouse_move(10, 10) is True
    assert state.effect == ButtonEffect.NONE


def test_press_blocks_hover():
    state = AboutDialogState()
    assert state.mouse_down(150, 210) is True
    assert state.effect == ButtonEffect.PRESSED
    assert state.mouse_move(10, 10) is False
    assert state.effect == ButtonEffect.PRESSED


def test_press_outside():
    state = AboutDialogState()
    assert state.mouse_down(10, 10) is False
    assert state.effect == ButtonEffect.NONE


def test_release_closes_only_on_button():
    state = AboutDialogState()
    state.mouse_down(150, 210)
    assert state.mouse_up(150, 210) is True
    assert state.effect == ButtonEffect.NONE
    state.mouse_down(150, 210)
    assert state.mouse_up(300, 250) is False
    assert state.effect == ButtonEffect.NONE


def test_button_edges_excluded():
    state = AboutDialogState()
    assert state.mouse_down(135, 210) is False
    assert state.mouse_down(150, 225) is False


def test_button_colors():
    state = AboutDialogState()
    assert state.button_colors() == (Color(200, 200, 200), Color(0, 0, 0))
    state.effect = ButtonEffect.HOVER
    assert state.button_colors() == (Color(255, 255, 255), Color(0, 155, 255))
    state.effect = ButtonEffect.PRESSED
    assert state.button_colors() == (Color(100, 100, 100), Color(155, 155, 155))


def test_pick_selects_quadrant():
    picker = ColorPickerState(ColorOption(False))
    assert picker.pick(75, 25) == Color(255, 255, 255, 255)
    assert picker.option.selected == 1


def test_pick_on_boundary_keeps_selection():
    picker = ColorPickerState(ColorOption(False))
    picker.pick(75, 75)
    assert picker.pick(50, 25) == picker.option.palette[3]
    assert picker.option.selected == 3


def test_replace_sets_and_selects():
    picker = ColorPickerState(ColorOption(True))
    new = Color(1, 2, 3)
    assert picker.replace(25, 75, new) == new
    assert picker.option.selected == 2
    assert picker.option.palette[2] == new
    assert picker.option.image.get_pixel(12, 12) == new


def test_replace_outside_replaces_current():
    picker = ColorPickerState(ColorOption(True))
    picker.pick(75, 25)
    new = Color(9, 8, 7)
    picker.replace(150, 150, new)
    assert picker.option.selected == 1
    assert picker.option.palette[1] == new
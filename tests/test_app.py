from tkinter import filedialog
from unittest import mock

import pytest

from mindmerp.app import MindMerpApp, translate_key
from mindmerp.mapfile import MapFileError
from mindmerp.mindmap import window_title


@pytest.mark.parametrize(
    "keysym, code",
    [
        ("Control_L", 16777249),
        ("Control_R", 16777249),
        ("Return", 16777220),
        ("Alt_L", 16777251),
        ("s", 83),
        ("S", 83),
    ],
)
def test_translate_key(keysym, code):
    assert translate_key(keysym) == code


@pytest.mark.parametrize("keysym", ["F13", "", "Shift_L"])
def test_translate_unknown_key(keysym):
    assert translate_key(keysym) is None


def _sample(app):
    parent = app.canvas_events.create_node(30, 40)
    parent.text = "hello"
    child = app.canvas_events.create_child_node(100, 60)
    app.canvas_events.mouse_move(400, 300)
    app.canvas_events.right_up()
    return parent, child


def _summary(app):
    return [(n.id, n.x, n.y, n.text, n.parent_id, [c.ref for c in n.connections]) for n in app.mindmap.nodes]


def test_initial_title():
    assert MindMerpApp().title == "MindMerp"


def test_save_and_open_round_trip(tmp_path):
    app = MindMerpApp()
    _sample(app)
    path = str(tmp_path / "map.mmf")
    app.mindmap.filename = path
    assert app.save() is True

    other = MindMerpApp()
    other.open_path(path)
    assert _summary(other) == _summary(app)
    assert other.mindmap.next_id == app.mindmap.next_id
    assert other.title == window_title(path)


def test_save_cancelled_writes_nothing(tmp_path):
    app = MindMerpApp()
    _sample(app)
    with mock.patch.object(filedialog, "asksaveasfilename", return_value=""):
        assert app.save() is False
    assert app.mindmap.filename == ""
    assert list(tmp_path.iterdir()) == []


def test_save_as_appends_extension(tmp_path):
    app = MindMerpApp()
    _sample(app)
    target = str(tmp_path / "plan")
    with mock.patch.object(filedialog, "asksaveasfilename", return_value=target):
        assert app.save_as() is True
    assert app.mindmap.filename == target + ".mmf"
    assert (tmp_path / "plan.mmf").exists()


def test_open_missing_file_raises_and_keeps_nodes(tmp_path):
    app = MindMerpApp()
    _sample(app)
    before = _summary(app)
    missing = str(tmp_path / "absent.mmf")
    with pytest.raises(MapFileError):
        app.open_path(missing)
    assert _summary(app) == before
    assert app.mindmap.filename == missing


def test_new_map_clears_everything(tmp_path):
    app = MindMerpApp()
    _sample(app)
    app.mindmap.filename = str(tmp_path / "x.mmf")
    app.new_map()
    assert app.mindmap.nodes == []
    assert app.mindmap.next_id == 0
    assert app.mindmap.filename == ""
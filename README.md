# mindmerp

mindmerp is a small desktop application for drawing mind maps. Nodes are
rounded boxes that hold a line or a few lines of text. Lines join child nodes
to their parents. A map is saved to a compact binary `.mmf` file.

The window is built with Tkinter, so your Python needs its Tk component. The
package has no other runtime dependencies.

## Installing

```
pip install .
```

## Running

```
mindmerp                 # start with an empty map
mindmerp notes.mmf       # open a map file
mindmerp --tour          # open the guided tour map
mindmerp --help          # print the user manual
mindmerp --version       # print the version
mindmerp --license       # print the licence name
```

Only the first argument is looked at. `--tour` opens
`/home/<user>/.local/share/mindmerp/guidedtour.mmf`, where `<user>` is the
name reported by `id -un`. That file has to be installed separately. If the
file named on the command line cannot be loaded, the editor starts with an
empty map.

## Using the canvas

- Double-click an empty spot to create a node.
- Double-click a node to edit its text. Enter finishes editing. Alt switches
  multi-line editing on and off. While multi-line editing is on, Enter adds a
  new line. The node grows or shrinks to fit the text.
- Drag a node with the left mouse button to move it.
- Drag from a node with the right mouse button to pull out a new child node.
- Drag an empty spot with the right mouse button to pan the whole map.
- Hold Ctrl and click a node to delete it. Every node linked below it is
  deleted too. Its parent stays.
- Ctrl+S saves the map. If the map has no file name yet, you are asked for
  one.

There are two colour squares in the middle of the menu bar. The left one sets
the fill colour of new nodes. The right one sets the text colour of new nodes.
Click a square to open a palette of four colours. Left-click a colour to
select it. Right-click a colour to replace it with one from the system colour
picker. The new colour is then selected. Nodes that already exist keep their
colours.

The File menu has New, Open, Save, Save As and Exit. The Info menu has About.
If a file cannot be read or written, an error box explains why.

## Using maps from Python

You can use the map model and its file format without the window:

```python
from mindmerp.mindmap import MindMap
from mindmerp.mapfile import ensure_extension, load_map, save_map

mindmap = MindMap()
load_map(mindmap, "notes.mmf")
root = mindmap.new_node()
root.text = "Ideas"
save_map(mindmap, ensure_extension("copy"))   # writes copy.mmf
```

The modules:

- `mindmerp.mindmap`: `MindMap` holds the nodes and the editing state.
  It provides `new_node`, `get_node_by_id`, `connect_all`,
  `connection_lines` and `delete_branch`. It also holds `Mode`, and
  `window_title` builds the window title from a file name.
- `mindmerp.node`: `Node` is a node with its position, size, text, colours
  and `Connection` links. It is also its own rendered image.
- `mindmerp.mapfile`: `save_map`, `load_map`, `encode_map`, `decode_map`,
  `has_map_extension` and `ensure_extension`. These functions raise
  `MapFileError` when a file cannot be read or written, or when its data is
  cut short or corrupt. If `load_map` fails, it leaves the map unchanged. The
  module docstring describes the byte layout.
- `mindmerp.canvas`, `mindmerp.mainwindow`, `mindmerp.dialogs`: these turn
  mouse and key events into changes to the map. They do not depend on a
  toolkit.
- `mindmerp.image`, `mindmerp.color`, `mindmerp.coloroption`,
  `mindmerp.geometry`: a small BGRA raster with `to_png`, RGBA colours,
  four-colour palettes, and points and rectangles.
- `mindmerp.fileio`: helpers for files, directories and shell commands. They
  raise `FileIOError`.
- `mindmerp.app`: the Tkinter window (`MindMerpApp`, `run`).
- `mindmerp.cli`: the `mindmerp` command (`main`).

## Limitations

The only file format is `.mmf`. There is no export to images or to other
mind-map formats, and there is no undo.

## Running the tests

```
pip install .[test]
pytest
```
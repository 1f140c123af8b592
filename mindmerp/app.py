"""The MindMerp window: menu bar, canvas, text editor, About dialog and colour picker."""

from __future__ import annotations

import base64
import os
import tkinter as tk
from collections.abc import Callable
from tkinter import colorchooser, filedialog, messagebox
from tkinter import font as tkfont

from mindmerp.canvas import BACKGROUND, TEXT_MARGIN, CanvasController, TextEditRequest
from mindmerp.color import Color
from mindmerp.coloroption import ColorOption
from mindmerp.dialogs import (
    ABOUT_SIZE,
    ABOUT_TEXT,
    ABOUT_TEXT_RECT,
    OK_BUTTON_RECT,
    PICKER_SIZE,
    AboutDialogState,
    ColorPickerState,
)
from mindmerp.image import Image
from mindmerp.mainwindow import (
    KEY_CONTROL,
    MENU_BAR_COLOR,
    MENU_BAR_HEIGHT,
    MENU_LABELS,
    MENU_TEXT_RECTS,
    SWATCH_SIZE,
    MainWindowController,
    MenuAction,
)
from mindmerp.mapfile import MapFileError, ensure_extension, load_map, save_map
from mindmerp.mindmap import TITLE, MindMap, window_title

KEY_RETURN = 16777220
KEY_ALT = 16777251
FILE_TYPES = (("mindmerp files", "*.mmf"), ("All Files", "*"))
TEXT_INSET = 60
MENU_OFFSET_Y = 22 + 5

_KEYSYMS = {
    "Control_L": KEY_CONTROL,
    "Control_R": KEY_CONTROL,
    "Return": KEY_RETURN,
    "KP_Enter": KEY_RETURN,
    "Alt_L": KEY_ALT,
    "Alt_R": KEY_ALT,
}


def translate_key(keysym: str) -> int | None:
    """The key code the controllers expect for a Tk keysym, or None if it has none."""
    if keysym in _KEYSYMS:
        return _KEYSYMS[keysym]
    if len(keysym) == 1 and keysym.isascii() and keysym.isprintable():
        return ord(keysym.upper())
    return None


def _hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def _wrapped_lines(paragraph: str, width: int, measure: Callable[[str], int]) -> int:
    lines = 1
    current = ""
    for word in paragraph.split(" "):
        candidate = f"{current} {word}" if current else word
        if current and measure(candidate) > width:
            lines += 1
            current = word
        else:
            current = candidate
    return lines


class MindMerpApp:
    """The whole editor. Without a root window it keeps the model only."""

    def __init__(self, root: tk.Tk | None = None) -> None:
        self.root = root
        self.mindmap = MindMap()
        self.node_colors = ColorOption(False)
        self.text_colors = ColorOption(True)
        self.canvas_events = CanvasController(self.mindmap, self.node_colors, self.text_colors)
        self.menu_events = MainWindowController(self.mindmap)
        self.about_state = AboutDialogState()
        self.title = TITLE
        self._editing = False
        self._images: list[tk.PhotoImage] = []
        self._bar_images: list[tk.PhotoImage] = []
        self._about: tk.Toplevel | None = None
        self._picker: tk.Toplevel | None = None
        if root is not None:
            self._build(root)

    # --- file operations -------------------------------------------------

    def open_path(self, path: str | os.PathLike) -> None:
        """Load a map file; the filename is remembered even when loading fails."""
        path = os.fspath(path)
        self._stop_editing()
        self.mindmap.filename = path
        load_map(self.mindmap, path)
        self._update_title()
        self.redraw()

    def save(self) -> bool:
        """Save to the current file, asking for one first if there is none.

        Returns False when the user cancels the file dialog.
        """
        if not self.mindmap.filename and not self._choose_save_path():
            return False
        save_map(self.mindmap, self.mindmap.filename)
        self._update_title()
        return True

    def save_as(self) -> bool:
        """Ask for a file name and save there; False when cancelled."""
        if not self._choose_save_path():
            return False
        save_map(self.mindmap, self.mindmap.filename)
        self._update_title()
        return True

    def new_map(self) -> None:
        """Start an empty, unnamed map."""
        self._stop_editing()
        self.mindmap.reset()
        self.mindmap.filename = ""
        self.redraw()

    def _choose_save_path(self) -> bool:
        path = filedialog.asksaveasfilename(
            parent=self.root, title="Save mind map", filetypes=FILE_TYPES
        )
        if not path:
            return False
        self.mindmap.filename = ensure_extension(str(path))
        return True

    def _open_dialog(self) -> None:
        path = filedialog.askopenfilename(
            parent=self.root, title="Open mind map", filetypes=FILE_TYPES
        )
        if path:
            self.open_path(path)

    def _update_title(self) -> None:
        title = window_title(self.mindmap.filename)
        if title is not None:
            self.title = title
            if self.root is not None:
                self.root.title(title)

    def _guarded(self, action: Callable[[], object]) -> Callable[[], None]:
        def run_action() -> None:
            try:
                action()
            except MapFileError as exc:
                messagebox.showerror(TITLE, str(exc), parent=self.root)

        return run_action

    # --- window construction ---------------------------------------------

    def _build(self, root: tk.Tk) -> None:
        root.title(self.title)
        self._font = tkfont.nametofont("TkDefaultFont")
        self.menu_bar = tk.Canvas(
            root, height=MENU_BAR_HEIGHT, highlightthickness=0, bg=_hex(MENU_BAR_COLOR)
        )
        self.menu_bar.pack(side=tk.TOP, fill=tk.X)
        self.canvas = tk.Canvas(root, highlightthickness=0, bg=_hex(BACKGROUND))
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self.editor = tk.Text(
            root, borderwidth=0, highlightthickness=0, wrap=tk.WORD, font=self._font
        )

        self.menu_bar.bind("<Configure>", lambda e: self.draw_menu_bar())
        self.menu_bar.bind("<Motion>", self._on_menu_motion)
        self.menu_bar.bind("<Button-1>", self._on_menu_click)

        self.canvas.bind("<Configure>", lambda e: self.redraw())
        self.canvas.bind("<Button-1>", self._on_left_down)
        self.canvas.bind("<Button-3>", self._on_right_down)
        self.canvas.bind("<Motion>", self._on_motion)
        self.canvas.bind("<B1-Motion>", self._on_motion)
        self.canvas.bind("<B3-Motion>", self._on_motion)
        self.canvas.bind("<ButtonRelease-1>", self._on_left_up)
        self.canvas.bind("<ButtonRelease-3>", lambda e: self.canvas_events.right_up())
        self.canvas.bind("<Double-Button-1>", self._on_double_click)

        root.bind("<KeyPress>", self._on_key_down)
        root.bind("<KeyRelease>", self._on_key_up)

        self.editor.bind("<Return>", self._on_editor_return)
        self.editor.bind("<KP_Enter>", self._on_editor_return)
        self.editor.bind("<KeyPress-Alt_L>", self._on_editor_alt)
        self.editor.bind("<KeyPress-Alt_R>", self._on_editor_alt)
        self.editor.bind("<<Modified>>", self._on_editor_modified)

    def _photo(self, image: Image) -> tk.PhotoImage:
        data = base64.b64encode(image.to_png()).decode("ascii")
        return tk.PhotoImage(data=data, format="png", master=self.root)

    # --- drawing ---------------------------------------------------------

    def redraw(self) -> None:
        """Repaint the canvas: links first, then the visible nodes with their text."""
        if self.root is None:
            return
        canvas = self.canvas
        canvas.delete("all")
        self._images.clear()
        width, height = canvas.winfo_width(), canvas.winfo_height()
        for x0, y0, x1, y1 in self.mindmap.connection_lines():
            canvas.create_line(x0, y0, x1, y1, fill="#000000")
        for node in self.mindmap.nodes:
            if not node.width or not node.height or not node.is_visible(width, height):
                continue
            photo = self._photo(node)
            self._images.append(photo)
            canvas.create_image(node.x, node.y, image=photo, anchor=tk.NW)
            if node.text:
                canvas.create_text(
                    node.x + 25,
                    node.y + 14,
                    text=node.text,
                    anchor=tk.NW,
                    width=max(node.width - TEXT_INSET, 1),
                    fill=node.text_color.to_hex(),
                    font=self._font,
                )

    def draw_menu_bar(self) -> None:
        """Repaint the menu labels and the two colour swatches."""
        if self.root is None:
            return
        bar = self.menu_bar
        bar.delete("all")
        self._bar_images.clear()
        width = bar.winfo_width()
        bar.create_rectangle(0, 0, width, MENU_BAR_HEIGHT, fill=_hex(MENU_BAR_COLOR), outline="")
        for label, rect, hover in zip(MENU_LABELS, MENU_TEXT_RECTS, self.menu_events.menu_hover):
            bar.create_text(
                rect[0], rect[1], text=label, anchor=tk.NW,
                fill="#ffffff" if hover else "#000000", font=self._font,
            )
        middle = width // 2
        for option, x in ((self.node_colors, middle - SWATCH_SIZE), (self.text_colors, middle)):
            photo = self._photo(option.image)
            self._bar_images.append(photo)
            bar.create_image(x, 0, image=photo, anchor=tk.NW)

    # --- menu bar --------------------------------------------------------

    def _on_menu_motion(self, event: tk.Event) -> None:
        if self.menu_events.mouse_move(event.x, event.y):
            self.draw_menu_bar()

    def _on_menu_click(self, event: tk.Event) -> None:
        action = self.menu_events.left_down(event.x, event.y, self.menu_bar.winfo_width())
        self.draw_menu_bar()
        if action is MenuAction.FILE:
            self._popup_menu(
                [
                    ("New", self.new_map),
                    ("Open", self._open_dialog),
                    ("Save", self.save),
                    ("Save As", self.save_as),
                    ("Exit", self.root.quit),
                ],
                10,
            )
        elif action is MenuAction.INFO:
            self._popup_menu([("About", self.show_about)], 45)
        elif action is MenuAction.NODE_COLOR:
            self._show_picker(self.node_colors, -PICKER_SIZE[0])
        elif action is MenuAction.TEXT_COLOR:
            self._show_picker(self.text_colors, 0)

    def _popup_menu(self, items: list[tuple[str, Callable[[], object]]], x: int) -> None:
        menu = tk.Menu(self.root, tearoff=0)
        for label, action in items:
            menu.add_command(label=label, command=self._guarded(action))
        try:
            menu.tk_popup(self.root.winfo_rootx() + x, self.root.winfo_rooty() + MENU_OFFSET_Y)
        finally:
            menu.grab_release()

    # --- keyboard --------------------------------------------------------

    def _on_key_down(self, event: tk.Event) -> None:
        if event.widget is self.editor:
            return
        key = translate_key(event.keysym)
        if key is not None and self.menu_events.key_down(key):
            self._guarded(self.save)()

    def _on_key_up(self, event: tk.Event) -> None:
        if event.widget is self.editor:
            return
        key = translate_key(event.keysym)
        if key is not None:
            self.menu_events.key_up(key)

    # --- canvas ----------------------------------------------------------

    def _on_left_down(self, event: tk.Event) -> None:
        self.canvas.focus_set()
        self.canvas_events.left_down(event.x, event.y)

    def _on_right_down(self, event: tk.Event) -> None:
        self.canvas_events.right_down(event.x, event.y)
        self.redraw()

    def _on_motion(self, event: tk.Event) -> None:
        if self.canvas_events.mouse_move(event.x, event.y):
            self.redraw()

    def _on_left_up(self, event: tk.Event) -> None:
        if self.canvas_events.left_up(event.x, event.y):
            self.redraw()

    def _on_double_click(self, event: tk.Event) -> None:
        request = self.canvas_events.double_click(event.x, event.y)
        if request is not None:
            self._show_editor(request)
        self.redraw()

    # --- text editing ----------------------------------------------------

    def _text_height(self, text: str, wrap_width: int) -> int:
        lines = sum(
            _wrapped_lines(paragraph, wrap_width, self._font.measure)
            for paragraph in text.split("\n")
        )
        return lines * self._font.metrics("linespace")

    def _show_editor(self, request: TextEditRequest) -> None:
        node = self.mindmap.nodes[request.index]
        editor = self.editor
        editor.configure(
            bg=node.color.to_hex(), fg=node.text_color.to_hex(),
            insertbackground=node.text_color.to_hex(),
        )
        self._editing = False
        editor.delete("1.0", tk.END)
        editor.insert("1.0", request.text)
        editor.edit_modified(False)
        editor.place(
            x=request.x, y=request.y,
            width=max(request.width, 1), height=max(request.height, 1),
        )
        self._editing = True
        editor.focus_set()

    def _edited_node(self):
        index = self.mindmap.target_index
        if index is None or not 0 <= index < len(self.mindmap.nodes):
            return None
        return self.mindmap.nodes[index]

    def _on_editor_modified(self, event: tk.Event) -> None:
        if not self.editor.edit_modified():
            return
        self.editor.edit_modified(False)
        node = self._edited_node()
        if not self._editing or node is None:
            return
        text = self.editor.get("1.0", "end-1c")
        height = self._text_height(text, node.width - TEXT_INSET)
        self.editor.place_configure(height=max(height, 1))
        node.resize(node.width, height + TEXT_MARGIN)
        self.redraw()

    def _on_editor_alt(self, event: tk.Event) -> str:
        self.mindmap.multiline_edit = not self.mindmap.multiline_edit
        return "break"

    def _on_editor_return(self, event: tk.Event) -> str | None:
        if self.mindmap.multiline_edit:
            return None
        self._finish_editing()
        return "break"

    def _finish_editing(self) -> None:
        node = self._edited_node()
        if node is None:
            return
        text = self.editor.get("1.0", "end-1c")
        height = self._text_height(text, node.width - TEXT_INSET)
        if self.canvas_events.finish_edit_text(text, height):
            self._stop_editing()
            self.root.focus_set()
            self.redraw()

    def _stop_editing(self) -> None:
        self._editing = False
        if self.root is not None:
            self.editor.place_forget()
            self.editor.delete("1.0", tk.END)
            self.editor.edit_modified(False)

    # --- About dialog ----------------------------------------------------

    def show_about(self) -> None:
        """Show the About dialog centred on the main window."""
        if self._about is None:
            top = tk.Toplevel(self.root)
            top.title("About MindMerp")
            top.resizable(False, False)
            top.transient(self.root)
            top.attributes("-topmost", True)
            top.protocol("WM_DELETE_WINDOW", top.withdraw)
            canvas = tk.Canvas(top, width=ABOUT_SIZE[0], height=ABOUT_SIZE[1], highlightthickness=0)
            canvas.pack()
            canvas.bind("<Motion>", self._on_about_motion)
            canvas.bind("<Button-1>", self._on_about_down)
            canvas.bind("<ButtonRelease-1>", self._on_about_up)
            self._about, self._about_canvas = top, canvas
        root = self.root
        x = root.winfo_rootx() + root.winfo_width() // 2 - ABOUT_SIZE[0] // 2
        y = root.winfo_rooty() + root.winfo_height() // 2 - ABOUT_SIZE[1] // 2
        self._about.geometry(f"{ABOUT_SIZE[0]}x{ABOUT_SIZE[1]}+{x}+{y}")
        self._draw_about()
        self._about.deiconify()

    def _draw_about(self) -> None:
        canvas = self._about_canvas
        canvas.delete("all")
        x, y, w, h = ABOUT_TEXT_RECT
        canvas.create_text(
            x + w // 2, y + h // 2, text=ABOUT_TEXT, justify=tk.CENTER, font=self._font
        )
        fill, text = self.about_state.button_colors()
        bx, by, bw, bh = OK_BUTTON_RECT
        canvas.create_rectangle(bx, by, bx + bw, by + bh, fill=fill.to_hex(), outline="")
        canvas.create_text(bx + bw // 2, by + bh // 2, text="OK", fill=text.to_hex(), font=self._font)

    def _on_about_motion(self, event: tk.Event) -> None:
        if self.about_state.mouse_move(event.x, event.y):
            self._draw_about()

    def _on_about_down(self, event: tk.Event) -> None:
        if self.about_state.mouse_down(event.x, event.y):
            self._draw_about()

    def _on_about_up(self, event: tk.Event) -> None:
        close = self.about_state.mouse_up(event.x, event.y)
        self._draw_about()
        if close:
            self._about.withdraw()

    # --- colour picker ---------------------------------------------------

    def _show_picker(self, option: ColorOption, offset: int) -> None:
        self._close_picker()
        state = ColorPickerState(option)
        top = tk.Toplevel(self.root)
        top.overrideredirect(True)
        root = self.root
        x = root.winfo_rootx() + root.winfo_width() // 2 + offset
        top.geometry(f"{PICKER_SIZE[0]}x{PICKER_SIZE[1]}+{x}+{root.winfo_rooty()}")
        canvas = tk.Canvas(top, width=PICKER_SIZE[0], height=PICKER_SIZE[1], highlightthickness=0)
        canvas.pack()
        for index, color in enumerate(option.palette):
            qx, qy = (index % 2) * 50, (index // 2) * 50
            canvas.create_rectangle(qx, qy, qx + 50, qy + 50, fill=color.to_hex(), outline="")
        canvas.create_rectangle(0, 0, PICKER_SIZE[0] - 1, PICKER_SIZE[1] - 1, outline="#000000")
        canvas.bind("<Button-1>", lambda e: self._pick_color(state, e.x, e.y))
        canvas.bind("<Button-3>", lambda e: self._replace_color(state, e.x, e.y))
        top.bind("<FocusOut>", lambda e: self._close_picker())
        self._picker = top
        top.focus_force()

    def _close_picker(self) -> None:
        if self._picker is not None:
            picker, self._picker = self._picker, None
            picker.destroy()

    def _pick_color(self, state: ColorPickerState, x: int, y: int) -> None:
        state.pick(x, y)
        self._close_picker()
        self.draw_menu_bar()

    def _replace_color(self, state: ColorPickerState, x: int, y: int) -> None:
        self._close_picker()
        rgb, _ = colorchooser.askcolor(
            initialcolor="#ffffff", title="Select color", parent=self.root
        )
        if rgb is not None:
            state.replace(x, y, Color(*(int(v) for v in rgb)))
        self.draw_menu_bar()


def run(path: str | None = None) -> None:
    """Open the main window, load a map if a path is given, and run until it closes."""
    root = tk.Tk()
    root.geometry(f"{root.winfo_screenwidth()}x{root.winfo_screenheight()}+0+0")
    app = MindMerpApp(root)
    if path:
        try:
            app.open_path(path)
        except MapFileError:
            pass
    root.mainloop()
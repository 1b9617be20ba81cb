"""The editor window: a toolbar, a canvas and the wiring between them."""

from __future__ import annotations

import argparse
import dataclasses
from collections.abc import Callable, Sequence
from typing import Any

from vectorsketch.controller import EditorMode, GraphicController
from vectorsketch.drawing import FRAME_COLOR, DrawOp, draw_shape
from vectorsketch.geometry import Font, Point
from vectorsketch.model import SCENE_RECT, GraphicModel
from vectorsketch.shape import CURSOR_ARROW, CURSOR_BDIAG, CURSOR_FDIAG

WINDOW_TITLE = "Graphic Editor"
VIEW_WIDTH = 800
VIEW_HEIGHT = 600

_TOOLS = (
    ("Select", EditorMode.SELECT),
    ("Line", EditorMode.CREATE_LINE),
    ("Rectangle", EditorMode.CREATE_RECT),
    ("Ellipse", EditorMode.CREATE_ELLIPSE),
    ("Star", EditorMode.CREATE_STAR),
    ("Text", EditorMode.CREATE_TEXT),
)

_TK_CURSORS = {
    CURSOR_ARROW: "arrow",
    CURSOR_FDIAG: "top_left_corner",
    CURSOR_BDIAG: "top_right_corner",
}


def font_sizes() -> list[int]:
    """Point sizes offered by the size selector."""
    return list(range(8, 49, 2))


def to_scene(x: float, y: float) -> Point:
    """Convert canvas coordinates to scene coordinates."""
    return Point(x + SCENE_RECT.x, y + SCENE_RECT.y)


def to_canvas(point: Point) -> tuple[float, float]:
    """Convert a scene point to canvas coordinates."""
    return point.x - SCENE_RECT.x, point.y - SCENE_RECT.y


def _flat_coords(points: Sequence[Point]) -> list[float]:
    return [c for p in points for c in to_canvas(p)]


def _tk_font(font: Font) -> tuple[Any, ...]:
    styles = [
        name
        for name, on in (("bold", font.bold), ("italic", font.italic), ("underline", font.underline))
        if on
    ]
    return (font.family, font.point_size, *styles)


def _paint(canvas: Any, op: DrawOp) -> None:
    coords = _flat_coords(op.points)
    outline = op.color or ""
    dash = (4, 2) if op.dashed else None
    width = op.width if op.color else 0
    if op.kind == "line":
        canvas.create_line(*coords, fill=outline, width=width)
    elif op.kind in ("rect", "ellipse"):
        options: dict[str, Any] = {"outline": outline, "width": width, "fill": op.fill or ""}
        if dash is not None:
            options["dash"] = dash
        if op.fill and op.fill_alpha < 255:
            options["stipple"] = "gray25"
        create = canvas.create_rectangle if op.kind == "rect" else canvas.create_oval
        create(*coords, **options)
    elif op.kind == "polygon":
        canvas.create_polygon(*coords, outline=outline, fill="", width=width)
    elif op.kind == "text":
        canvas.create_text(
            *coords,
            text=op.text,
            fill=outline,
            font=_tk_font(op.font or Font()),
            anchor="sw",
        )


class MainWindow:
    """Ties a model and controller to a toolbar and a drawing canvas.

    Without ``root`` no widgets are built; ``canvas`` may then be any object
    with the canvas drawing methods, and the dialogs are the given callables.
    """

    def __init__(
        self,
        root: Any = None,
        *,
        canvas: Any = None,
        color_picker: Callable[[str], str | None] | None = None,
        text_prompt: Callable[[], str | None] | None = None,
    ) -> None:
        self.model = GraphicModel()
        self.controller = GraphicController(self.model)
        self.canvas = canvas
        self.color_picker = color_picker
        self._root = root

        scene = self.model.scene
        scene.on_press = self.controller.mouse_pressed
        scene.on_move = self.controller.mouse_moved
        scene.on_release = self.controller.mouse_released
        self.model.subscribe(self.redraw)

        if root is not None:
            self._build_ui(root)
        if text_prompt is not None:
            self.controller.text_prompt = text_prompt

    @property
    def mode(self) -> EditorMode:
        return self.controller.mode

    def set_mode(self, mode: EditorMode) -> None:
        """Choose the tool; rubber-band selection is only on for Select."""
        self.controller.mode = mode
        self.model.scene.rubber_band = mode is EditorMode.SELECT

    def choose_color(self) -> str | None:
        """Ask for a colour and apply it to the tool and the selected shapes."""
        if self.color_picker is None:
            return None
        color = self.color_picker(self.controller.current_color)
        if color:
            self.controller.current_color = color
            self.controller.change_selected_color(color)
            self.redraw()
        return color or None

    def _update_font(self, apply_to_selection: bool = True, **changes: Any) -> Font:
        font = dataclasses.replace(self.controller.current_font, **changes)
        self.controller.current_font = font
        if apply_to_selection:
            self.controller.change_selected_font(font)
            self.redraw()
        return font

    def set_font_family(self, family: str) -> Font:
        return self._update_font(family=family)

    def set_font_size(self, size: int) -> Font:
        """Set the size used for new text; existing text keeps its size."""
        return self._update_font(apply_to_selection=False, point_size=int(size))

    def set_bold(self, checked: bool) -> Font:
        return self._update_font(bold=bool(checked))

    def set_italic(self, checked: bool) -> Font:
        return self._update_font(italic=bool(checked))

    def set_underline(self, checked: bool) -> Font:
        return self._update_font(underline=bool(checked))

    def redraw(self) -> list[DrawOp]:
        """Repaint the canvas; returns the operations drawn, in scene coordinates."""
        ops = [op for shape in self.model.shapes for op in draw_shape(shape)]
        band = self.model.scene.band
        if band is not None:
            ops.append(
                DrawOp("rect", (band.top_left, band.bottom_right), FRAME_COLOR, 1, dashed=True)
            )
        if self.canvas is not None:
            self.canvas.delete("all")
            for op in ops:
                _paint(self.canvas, op)
        return ops

    def _delete_selected(self) -> None:
        self.controller.delete_selected()
        self.redraw()

    def _clear(self) -> None:
        self.controller.clear_all()
        self.redraw()

    def _undo(self) -> None:
        self.controller.undo()
        self.redraw()

    def _redo(self) -> None:
        self.controller.redo()
        self.redraw()

    def _event_pos(self, event: Any) -> Point:
        return to_scene(self.canvas.canvasx(event.x), self.canvas.canvasy(event.y))

    def _on_press(self, event: Any) -> None:
        self.model.scene.press(self._event_pos(event))
        self.redraw()

    def _on_move(self, event: Any) -> None:
        scene = self.model.scene
        scene.move(self._event_pos(event))
        self.canvas.configure(cursor=_TK_CURSORS.get(scene.cursor, "arrow"))
        self.redraw()

    def _on_release(self, _event: Any) -> None:
        self.model.scene.release()
        self.redraw()

    def _build_ui(self, root: Any) -> None:
        import tkinter as tk
        from tkinter import colorchooser, simpledialog, ttk
        from tkinter import font as tkfont

        root.title(WINDOW_TITLE)

        toolbar = ttk.Frame(root, padding=4)
        toolbar.pack(side="left", fill="y")

        def separator() -> None:
            ttk.Separator(toolbar, orient="horizontal").pack(fill="x", pady=4)

        for label, mode in _TOOLS:
            ttk.Button(toolbar, text=label, command=lambda m=mode: self.set_mode(m)).pack(fill="x")
        separator()
        ttk.Button(toolbar, text="Color", command=self.choose_color).pack(fill="x")
        separator()
        ttk.Button(toolbar, text="Delete", command=self._delete_selected).pack(fill="x")
        ttk.Button(toolbar, text="Clear", command=self._clear).pack(fill="x")
        separator()

        current = self.controller.current_font
        family_var = tk.StringVar(value=current.family)
        families = sorted(set(tkfont.families(root)))
        family_box = ttk.Combobox(
            toolbar, textvariable=family_var, values=families, state="readonly", width=14
        )
        family_box.bind("<<ComboboxSelected>>", lambda _e: self.set_font_family(family_var.get()))
        family_box.pack(fill="x")

        size_var = tk.StringVar(value=str(current.point_size))
        size_box = ttk.Combobox(
            toolbar,
            textvariable=size_var,
            values=[str(s) for s in font_sizes()],
            state="readonly",
            width=4,
        )
        size_box.bind("<<ComboboxSelected>>", lambda _e: self.set_font_size(int(size_var.get())))
        size_box.pack(fill="x")

        for label, setter in (("B", self.set_bold), ("I", self.set_italic), ("U", self.set_underline)):
            var = tk.BooleanVar(value=False)
            ttk.Checkbutton(
                toolbar, text=label, variable=var, command=lambda v=var, s=setter: s(v.get())
            ).pack(fill="x")
        separator()
        ttk.Button(toolbar, text="\u2190", command=self._undo).pack(fill="x")
        ttk.Button(toolbar, text="\u2192", command=self._redo).pack(fill="x")

        view = ttk.Frame(root)
        view.pack(side="left", fill="both", expand=True)
        canvas = tk.Canvas(
            view,
            width=VIEW_WIDTH,
            height=VIEW_HEIGHT,
            background="white",
            scrollregion=(0, 0, SCENE_RECT.width, SCENE_RECT.height),
        )
        xbar = ttk.Scrollbar(view, orient="horizontal", command=canvas.xview)
        ybar = ttk.Scrollbar(view, orient="vertical", command=canvas.yview)
        canvas.configure(xscrollcommand=xbar.set, yscrollcommand=ybar.set)
        ybar.pack(side="right", fill="y")
        xbar.pack(side="bottom", fill="x")
        canvas.pack(side="left", fill="both", expand=True)
        centre_x, centre_y = to_canvas(Point(0, 0))
        canvas.xview_moveto(max(0.0, (centre_x - VIEW_WIDTH / 2) / SCENE_RECT.width))
        canvas.yview_moveto(max(0.0, (centre_y - VIEW_HEIGHT / 2) / SCENE_RECT.height))

        canvas.bind("<ButtonPress-1>", self._on_press)
        canvas.bind("<B1-Motion>", self._on_move)
        canvas.bind("<Motion>", self._on_move)
        canvas.bind("<ButtonRelease-1>", self._on_release)
        root.bind("<Delete>", lambda _e: self._delete_selected())
        self.canvas = canvas

        if self.color_picker is None:
            self.color_picker = lambda color: colorchooser.askcolor(
                color=color, title="Select Color", parent=root
            )[1]
        self.controller.text_prompt = lambda: simpledialog.askstring(
            "Enter Text", "Text:", parent=root
        )
        self.redraw()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the editor window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="vectorsketch", description="A simple vector drawing editor.")
    parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    MainWindow(root)
    root.mainloop()
    return 0
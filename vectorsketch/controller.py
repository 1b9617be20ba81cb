"""Editing logic: turns pointer input and tool choices into commands."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from vectorsketch.commands import (
    AddShapeCommand,
    ClearAllCommand,
    ColorCommand,
    DeleteShapeCommand,
    MoveShapeCommand,
    UndoStack,
)
from vectorsketch.geometry import Font, Point
from vectorsketch.model import GraphicModel
from vectorsketch.shape import DEFAULT_COLOR, Shape, ShapeType


class EditorMode(Enum):
    SELECT = "select"
    CREATE_LINE = "line"
    CREATE_RECT = "rectangle"
    CREATE_ELLIPSE = "ellipse"
    CREATE_TEXT = "text"
    CREATE_STAR = "star"


_CREATES = {
    EditorMode.CREATE_LINE: ShapeType.LINE,
    EditorMode.CREATE_RECT: ShapeType.RECTANGLE,
    EditorMode.CREATE_ELLIPSE: ShapeType.ELLIPSE,
    EditorMode.CREATE_STAR: ShapeType.STAR,
}


class GraphicController:
    """Applies the current tool to a :class:`GraphicModel` through an undo stack.

    ``text_prompt`` is asked for the text of a new text shape and returns
    ``None`` when the user cancels.
    """

    def __init__(
        self,
        model: GraphicModel,
        text_prompt: Callable[[], str | None] | None = None,
    ) -> None:
        self.model = model
        self.text_prompt = text_prompt
        self.undo_stack = UndoStack()
        self.mode = EditorMode.SELECT
        self.current_color = DEFAULT_COLOR
        self.current_font = Font()
        self._current_shape: Shape | None = None
        self._selected_shape: Shape | None = None
        self._drawing = False
        self._moving = False
        self._move_start = Point()

    @property
    def is_drawing(self) -> bool:
        return self._drawing

    @property
    def is_moving(self) -> bool:
        return self._moving

    def change_selected_font(self, font: Font) -> None:
        for shape in self.model.shapes:
            if shape.selected and shape.shape_type is ShapeType.TEXT:
                shape.font = font

    def change_selected_color(self, color: str) -> None:
        for shape in self.model.shapes:
            if shape.selected:
                self.undo_stack.push(ColorCommand(shape, shape.color, color))

    def undo(self) -> None:
        self.undo_stack.undo()

    def redo(self) -> None:
        self.undo_stack.redo()

    def _add(self, shape_type: ShapeType, pos: Point) -> Shape:
        command = AddShapeCommand(
            self.model, shape_type, pos, self.current_color, self.current_font
        )
        self.undo_stack.push(command)
        assert command.shape is not None
        return command.shape

    def mouse_pressed(self, pos: Point) -> None:
        if self.mode is EditorMode.SELECT:
            hits = self.model.scene.items_at(pos)
            if hits:
                shape = hits[0]
                self._moving = True
                self._selected_shape = shape
                self._move_start = shape.pos
            return
        if self.mode is EditorMode.CREATE_TEXT:
            text = self.text_prompt() if self.text_prompt is not None else None
            if text:
                self._add(ShapeType.TEXT, pos).text = text
            return
        shape_type = _CREATES.get(self.mode)
        if shape_type is None:
            return
        self._current_shape = self._add(shape_type, pos)
        self._drawing = True

    def mouse_moved(self, pos: Point) -> None:
        if self._moving and self._selected_shape is not None:
            shape = self._selected_shape
            shape.pos = pos - shape.bounding_rect().center()
        elif self._drawing and self._current_shape is not None:
            self._current_shape.end_pos = pos

    def mouse_released(self) -> None:
        if self._moving and self._selected_shape is not None:
            new_pos = self._selected_shape.pos
            if new_pos != self._move_start:
                self.undo_stack.push(
                    MoveShapeCommand(self._selected_shape, self._move_start, new_pos)
                )
        self._moving = False
        self._drawing = False
        self._selected_shape = None
        self._current_shape = None

    def delete_selected(self) -> None:
        for shape in self.model.shapes:
            if shape.selected:
                self.undo_stack.push(DeleteShapeCommand(self.model, shape))

    def clear_all(self) -> None:
        self.undo_stack.push(ClearAllCommand(self.model, self.model.shapes))
        self.model.clear()
"""Undoable editing commands and the stack that runs them."""

from __future__ import annotations

from collections.abc import Iterable

from vectorsketch.geometry import Font, Point
from vectorsketch.model import GraphicModel
from vectorsketch.shape import Shape, ShapeType


class UndoCommand:
    """A reversible action; a plain command runs its children in order."""

    def __init__(self, text: str = "", parent: UndoCommand | None = None) -> None:
        self.text = text
        self.children: list[UndoCommand] = []
        if parent is not None:
            parent.children.append(self)

    def redo(self) -> None:
        for child in self.children:
            child.redo()

    def undo(self) -> None:
        for child in reversed(self.children):
            child.undo()


class UndoStack:
    """A history of commands with a current position."""

    def __init__(self) -> None:
        self._commands: list[UndoCommand] = []
        self._index = 0

    def __len__(self) -> int:
        return len(self._commands)

    @property
    def index(self) -> int:
        """Number of commands currently applied."""
        return self._index

    @property
    def undo_text(self) -> str:
        return self._commands[self._index - 1].text if self.can_undo() else ""

    @property
    def redo_text(self) -> str:
        return self._commands[self._index].text if self.can_redo() else ""

    def push(self, command: UndoCommand) -> None:
        """Apply ``command`` and record it, dropping anything that could be redone."""
        del self._commands[self._index:]
        command.redo()
        self._commands.append(command)
        self._index = len(self._commands)

    def undo(self) -> None:
        if self.can_undo():
            self._index -= 1
            self._commands[self._index].undo()

    def redo(self) -> None:
        if self.can_redo():
            self._commands[self._index].redo()
            self._index += 1

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._commands)

    def clear(self) -> None:
        self._commands.clear()
        self._index = 0


class AddShapeCommand(UndoCommand):
    """Create a shape the first time, then re-add the same object on redo."""

    def __init__(
        self,
        model: GraphicModel,
        shape_type: ShapeType,
        pos: Point,
        color: str,
        font: Font | None = None,
        parent: UndoCommand | None = None,
    ) -> None:
        super().__init__("Add Shape", parent)
        self.model = model
        self.shape_type = shape_type
        self.pos = pos
        self.color = color
        self.font = font if font is not None else Font()
        self.shape: Shape | None = None

    def undo(self) -> None:
        if self.shape is not None:
            self.model.remove_existing_shape(self.shape)

    def redo(self) -> None:
        if self.shape is None:
            self.shape = self.model.add_shape(self.shape_type, self.pos, self.color, self.font)
        else:
            self.model.add_existing_shape(self.shape)


class DeleteShapeCommand(UndoCommand):
    def __init__(
        self, model: GraphicModel, shape: Shape, parent: UndoCommand | None = None
    ) -> None:
        super().__init__("Delete Shape", parent)
        self.model = model
        self.shape = shape

    def undo(self) -> None:
        self.model.add_existing_shape(self.shape)

    def redo(self) -> None:
        self.model.remove_existing_shape(self.shape)


class MoveShapeCommand(UndoCommand):
    def __init__(
        self,
        shape: Shape,
        from_pos: Point,
        to_pos: Point,
        parent: UndoCommand | None = None,
    ) -> None:
        super().__init__("Move Shape", parent)
        self.shape = shape
        self.from_pos = from_pos
        self.to_pos = to_pos

    def undo(self) -> None:
        self.shape.pos = self.from_pos

    def redo(self) -> None:
        self.shape.pos = self.to_pos


class ColorCommand(UndoCommand):
    def __init__(
        self,
        shape: Shape,
        old_color: str,
        new_color: str,
        parent: UndoCommand | None = None,
    ) -> None:
        super().__init__("Change Color", parent)
        self.shape = shape
        self.old_color = old_color
        self.new_color = new_color

    def undo(self) -> None:
        self.shape.color = self.old_color

    def redo(self) -> None:
        self.shape.color = self.new_color


class ClearAllCommand(UndoCommand):
    """Take out the given shapes, keeping them so undo can bring them back."""

    def __init__(
        self,
        model: GraphicModel,
        shapes: Iterable[Shape],
        parent: UndoCommand | None = None,
    ) -> None:
        super().__init__("Clear All", parent)
        self.model = model
        self.shapes = list(shapes)

    def undo(self) -> None:
        for shape in self.shapes:
            self.model.add_existing_shape(shape)

    def redo(self) -> None:
        for shape in self.shapes:
            self.model.remove_existing_shape(shape)
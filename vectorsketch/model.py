"""The document: the list of shapes and the scene that shows them."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from vectorsketch.geometry import Font, Point, Rect
from vectorsketch.scene import Scene
from vectorsketch.shape import Shape, ShapeType

SCENE_RECT = Rect(-500, -500, 1000, 1000)


class GraphicModel:
    """Shapes in drawing order, kept in step with a :class:`Scene`.

    Subscribers are called with no arguments whenever the set of shapes changes.
    """

    def __init__(self) -> None:
        self.scene = Scene(SCENE_RECT)
        self._shapes: list[Shape] = []
        self._listeners: list[Callable[[], None]] = []

    @property
    def shapes(self) -> list[Shape]:
        return list(self._shapes)

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Call ``callback`` on every change; returns a function that unsubscribes."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback()

    def add_shape(
        self,
        shape_type: ShapeType,
        pos: Point,
        color: str,
        font: Font | None = None,
    ) -> Shape:
        """Create a shape starting at ``pos`` and add it on top."""
        shape = Shape(shape_type, pos, color, font if font is not None else Font())
        self._shapes.append(shape)
        self.scene.add_item(shape)
        self._notify()
        return shape

    def remove_shape(self, shape: Shape) -> None:
        """Remove ``shape`` for good; does nothing if it is not here."""
        self.remove_existing_shape(shape)

    def clear(self) -> None:
        for shape in self._shapes:
            self.scene.remove_item(shape)
        self._shapes.clear()
        self._notify()

    def add_existing_shape(self, shape: Shape) -> None:
        """Put back a shape created earlier; does nothing if already present."""
        if shape not in self._shapes:
            self._shapes.append(shape)
            self.scene.add_item(shape)
            self._notify()

    def remove_existing_shape(self, shape: Shape) -> None:
        """Take ``shape`` out while keeping it usable for a later undo."""
        if shape in self._shapes:
            self._shapes.remove(shape)
            self.scene.remove_item(shape)
            self._notify()

    def set_shapes(self, shapes: Iterable[Shape]) -> None:
        """Replace all shapes with ``shapes``."""
        self.clear()
        for shape in shapes:
            self._shapes.append(shape)
            self.scene.add_item(shape)
        self._notify()
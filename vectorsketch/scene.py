"""A scene holding shapes and routing pointer input to them or to listeners."""

from __future__ import annotations

from collections.abc import Callable

from vectorsketch.geometry import Point, Rect
from vectorsketch.shape import CURSOR_ARROW, Shape


class Scene:
    """Shapes in stacking order, with selection, dragging and a rubber band.

    Pointer events that no shape takes are passed on to ``on_press``,
    ``on_move`` and ``on_release``.
    """

    def __init__(self, rect: Rect | None = None) -> None:
        self.rect = rect
        self.rubber_band = True
        self.cursor = CURSOR_ARROW
        self.on_press: Callable[[Point], None] | None = None
        self.on_move: Callable[[Point], None] | None = None
        self.on_release: Callable[[], None] | None = None
        self._items: list[Shape] = []
        self._grabber: Shape | None = None
        self._pressed = False
        self._press_pos: Point | None = None
        self._last_pos: Point | None = None
        self._band_origin: Point | None = None
        self._band: Rect | None = None

    @property
    def items(self) -> list[Shape]:
        return list(self._items)

    @property
    def band(self) -> Rect | None:
        """The rubber-band rectangle being dragged, if any."""
        return self._band

    @property
    def grabber(self) -> Shape | None:
        return self._grabber

    def add_item(self, item: Shape) -> None:
        if item not in self._items:
            self._items.append(item)

    def remove_item(self, item: Shape) -> None:
        if item not in self._items:
            raise ValueError("item is not in the scene")
        self._items.remove(item)
        if self._grabber is item:
            self._grabber = None

    def items_at(self, pos: Point) -> list[Shape]:
        """Shapes under ``pos``, topmost first."""
        return [item for item in reversed(self._items) if item.contains(pos)]

    def selected_items(self) -> list[Shape]:
        return [item for item in self._items if item.selected]

    def clear_selection(self) -> None:
        for item in self._items:
            item.selected = False

    def select_in(self, rect: Rect) -> list[Shape]:
        """Select exactly the shapes that intersect ``rect``."""
        for item in self._items:
            item.selected = item.scene_rect().intersects(rect)
        return self.selected_items()

    def press(self, pos: Point) -> None:
        self._pressed = True
        hits = self.items_at(pos)
        if hits:
            item = hits[0]
            if not item.selected:
                self.clear_selection()
                item.selected = True
            item.press(pos - item.pos)
            self._grabber = item
            self._press_pos = pos
            self._last_pos = pos
            return
        self.clear_selection()
        if self.rubber_band:
            self._band_origin = pos
            self._band = Rect.from_points(pos, pos)
        if self.on_press is not None:
            self.on_press(pos)

    def move(self, pos: Point) -> None:
        grabber = self._grabber
        if grabber is not None and self._last_pos is not None:
            delta = pos - self._last_pos
            self._last_pos = pos
            if not grabber.drag(delta):
                for other in self.selected_items():
                    if other is not grabber:
                        other.pos = other.pos + delta
            return
        if not self._pressed:
            hits = self.items_at(pos)
            if hits:
                top = hits[0]
                self.cursor = top.cursor_at(pos - top.pos)
                return
            self.cursor = CURSOR_ARROW
        elif self._band_origin is not None:
            self._band = Rect.from_points(self._band_origin, pos).normalized()
            self.select_in(self._band)
        if self.on_move is not None:
            self.on_move(pos)

    def release(self) -> None:
        self._pressed = False
        grabber = self._grabber
        if grabber is not None:
            grabber.release()
            if self._last_pos == self._press_pos:
                self.clear_selection()
                grabber.selected = True
            self._grabber = None
            self._press_pos = None
            self._last_pos = None
            return
        self._band_origin = None
        self._band = None
        if self.on_release is not None:
            self.on_release()
"""Editable shapes: geometry, selection state and handle-based resizing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from vectorsketch.geometry import Font, Point, Rect

PADDING = 10.0
HANDLE_SIZE = 8.0
DEFAULT_COLOR = "#000000"

CURSOR_ARROW = "arrow"
CURSOR_FDIAG = "size_fdiag"
CURSOR_BDIAG = "size_bdiag"


class ShapeType(Enum):
    LINE = "line"
    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    TEXT = "text"
    STAR = "star"


class ResizeHandle(IntEnum):
    NONE = 0
    TOP_LEFT = 1
    TOP_RIGHT = 2
    BOTTOM_LEFT = 3
    BOTTOM_RIGHT = 4


CORNER_HANDLES = (
    ResizeHandle.TOP_LEFT,
    ResizeHandle.TOP_RIGHT,
    ResizeHandle.BOTTOM_LEFT,
    ResizeHandle.BOTTOM_RIGHT,
)


@dataclass(eq=False)
class Shape:
    """A shape spanning ``start_pos`` to ``end_pos`` in item coordinates.

    ``pos`` is the item's offset in the scene.
    """

    shape_type: ShapeType
    start_pos: Point
    color: str = DEFAULT_COLOR
    font: Font = field(default_factory=Font)
    text: str = ""
    end_pos: Point = field(init=False)
    pos: Point = field(init=False, default_factory=Point)
    selected: bool = field(init=False, default=False)
    editing: bool = field(init=False, default=False)
    _handle: ResizeHandle = field(init=False, default=ResizeHandle.NONE, repr=False)
    _resizing: bool = field(init=False, default=False, repr=False)

    def __post_init__(self) -> None:
        self.end_pos = self.start_pos

    @property
    def is_resizing(self) -> bool:
        return self._resizing

    @property
    def current_handle(self) -> ResizeHandle:
        return self._handle

    def bounding_rect(self) -> Rect:
        """Area covered by the shape in item coordinates, with a margin."""
        return (
            Rect.from_points(self.start_pos, self.end_pos)
            .normalized()
            .adjusted(-PADDING, -PADDING, PADDING, PADDING)
        )

    def scene_rect(self) -> Rect:
        return self.bounding_rect().translated(self.pos)

    def contains(self, scene_pos: Point) -> bool:
        return self.scene_rect().contains(scene_pos)

    def handle_rect(self, handle: ResizeHandle) -> Rect:
        """Square of the given resize handle, centred on its corner."""
        r = Rect.from_points(self.start_pos, self.end_pos).normalized()
        corners = {
            ResizeHandle.TOP_LEFT: r.top_left,
            ResizeHandle.TOP_RIGHT: r.top_right,
            ResizeHandle.BOTTOM_LEFT: r.bottom_left,
            ResizeHandle.BOTTOM_RIGHT: r.bottom_right,
        }
        corner = corners.get(handle)
        if corner is None:
            return Rect()
        half = HANDLE_SIZE / 2
        return Rect(corner.x - half, corner.y - half, HANDLE_SIZE, HANDLE_SIZE)

    def handle_at(self, pos: Point) -> ResizeHandle:
        """The handle under ``pos`` (item coordinates); text has none."""
        if self.shape_type is ShapeType.TEXT:
            return ResizeHandle.NONE
        return next(
            (h for h in CORNER_HANDLES if self.handle_rect(h).contains(pos)),
            ResizeHandle.NONE,
        )

    def cursor_at(self, pos: Point) -> str:
        handle = self.handle_at(pos)
        if handle in (ResizeHandle.TOP_LEFT, ResizeHandle.BOTTOM_RIGHT):
            return CURSOR_FDIAG
        if handle in (ResizeHandle.TOP_RIGHT, ResizeHandle.BOTTOM_LEFT):
            return CURSOR_BDIAG
        return CURSOR_ARROW

    def press(self, pos: Point) -> bool:
        """Start an interaction at ``pos``; returns whether a resize began."""
        self._handle = self.handle_at(pos)
        self._resizing = self._handle is not ResizeHandle.NONE
        return self._resizing

    def drag(self, delta: Point) -> bool:
        """Resize by ``delta`` if a handle is held, else move the item.

        Returns whether the shape was resized.
        """
        if not self._resizing:
            self.pos = self.pos + delta
            return False
        start, end = self.start_pos, self.end_pos
        if self._handle is ResizeHandle.TOP_LEFT:
            self.start_pos = start + delta
        elif self._handle is ResizeHandle.TOP_RIGHT:
            self.end_pos = Point(end.x + delta.x, end.y)
            self.start_pos = Point(start.x, start.y + delta.y)
        elif self._handle is ResizeHandle.BOTTOM_LEFT:
            self.start_pos = Point(start.x + delta.x, start.y)
            self.end_pos = Point(end.x, end.y + delta.y)
        elif self._handle is ResizeHandle.BOTTOM_RIGHT:
            self.end_pos = end + delta
        return True

    def release(self) -> None:
        self._resizing = False
        self._handle = ResizeHandle.NONE
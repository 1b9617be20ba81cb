"""Plane geometry values and the font description used by shapes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point or offset in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; width and height may be negative."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_points(cls, a: Point, b: Point) -> Rect:
        """Rectangle with top-left corner ``a`` and bottom-right corner ``b``."""
        return cls(a.x, a.y, b.x - a.x, b.y - a.y)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def top_right(self) -> Point:
        return Point(self.right, self.top)

    @property
    def bottom_left(self) -> Point:
        return Point(self.left, self.bottom)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    def normalized(self) -> Rect:
        """The same area with non-negative width and height."""
        x, width = (self.x + self.width, -self.width) if self.width < 0 else (self.x, self.width)
        y, height = (self.y + self.height, -self.height) if self.height < 0 else (self.y, self.height)
        return Rect(x, y, width, height)

    def adjusted(self, dx1: float, dy1: float, dx2: float, dy2: float) -> Rect:
        """Move the top-left corner by (dx1, dy1) and the bottom-right by (dx2, dy2)."""
        return Rect(
            self.x + dx1,
            self.y + dy1,
            self.width + dx2 - dx1,
            self.height + dy2 - dy1,
        )

    def translated(self, offset: Point) -> Rect:
        return Rect(self.x + offset.x, self.y + offset.y, self.width, self.height)

    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, point: Point) -> bool:
        """Whether ``point`` lies inside or on the edge; an empty rectangle holds nothing."""
        r = self.normalized()
        if r.width == 0 or r.height == 0:
            return False
        return r.left <= point.x <= r.right and r.top <= point.y <= r.bottom

    def intersects(self, other: Rect) -> bool:
        """Whether the two rectangles share interior area."""
        a, b = self.normalized(), other.normalized()
        if a.width == 0 or a.height == 0 or b.width == 0 or b.height == 0:
            return False
        return a.left < b.right and b.left < a.right and a.top < b.bottom and b.top < a.bottom


@dataclass(frozen=True)
class Font:
    """Text font settings."""

    family: str = "Sans Serif"
    point_size: int = 10
    bold: bool = False
    italic: bool = False
    underline: bool = False
"""Turn shapes into backend-neutral drawing operations in scene coordinates."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

from vectorsketch.geometry import Font, Point, Rect
from vectorsketch.shape import CORNER_HANDLES, Shape, ShapeType

SHAPE_PEN_WIDTH = 2
FRAME_COLOR = "#0000ff"
HANDLE_OUTLINE = "#000000"
HANDLE_FILL = "#ffffff"
HIGHLIGHT_FILL = "#0078d7"
HIGHLIGHT_ALPHA = 50
STAR_POINTS = 5


@dataclass(frozen=True)
class DrawOp:
    """One primitive: ``kind`` is "line", "rect", "ellipse", "polygon" or "text".

    Rectangles and ellipses carry their top-left and bottom-right corners;
    text carries its baseline origin.
    """

    kind: str
    points: tuple[Point, ...]
    color: str | None = None
    width: float = 1
    fill: str | None = None
    fill_alpha: int = 255
    dashed: bool = False
    text: str = ""
    font: Font | None = None


def star_points(rect: Rect) -> list[Point]:
    """Vertices of a five-pointed star inscribed in ``rect``, top point first."""
    r = rect.normalized()
    c = r.center()
    outer = min(r.width, r.height) / 2
    points = []
    for i in range(2 * STAR_POINTS):
        angle = math.pi / STAR_POINTS * i - math.pi / 2
        radius = outer if i % 2 == 0 else outer / 2
        points.append(Point(c.x + radius * math.cos(angle), c.y + radius * math.sin(angle)))
    return points


def text_extent(text: str, font: Font) -> tuple[float, float, float]:
    """Estimated (width, height, ascent) of ``text`` set in ``font``."""
    size = font.point_size
    advance = size * (0.65 if font.bold else 0.6)
    ascent = float(size)
    descent = size * 0.25
    return len(text) * advance, ascent + descent, ascent


def _corners(rect: Rect) -> tuple[Point, Point]:
    return rect.top_left, rect.bottom_right


def draw_shape(shape: Shape) -> list[DrawOp]:
    """Operations that paint ``shape``, including its selection frame and handles."""
    ops: list[DrawOp] = []
    rect = shape.bounding_rect()
    pen = shape.color
    kind = shape.shape_type

    if kind is ShapeType.LINE:
        ops.append(DrawOp("line", (shape.start_pos, shape.end_pos), pen, SHAPE_PEN_WIDTH))
    elif kind is ShapeType.RECTANGLE:
        ops.append(DrawOp("rect", _corners(rect), pen, SHAPE_PEN_WIDTH))
    elif kind is ShapeType.ELLIPSE:
        ops.append(DrawOp("ellipse", _corners(rect), pen, SHAPE_PEN_WIDTH))
    elif kind is ShapeType.STAR:
        ops.append(DrawOp("polygon", tuple(star_points(rect)), pen, SHAPE_PEN_WIDTH))
    elif kind is ShapeType.TEXT:
        width, height, ascent = text_extent(shape.text, shape.font)
        if shape.selected:
            highlight = Rect(shape.start_pos.x, shape.start_pos.y, width, height)
            ops.append(
                DrawOp(
                    "rect",
                    _corners(highlight),
                    None,
                    0,
                    fill=HIGHLIGHT_FILL,
                    fill_alpha=HIGHLIGHT_ALPHA,
                )
            )
        ops.append(
            DrawOp(
                "text",
                (shape.start_pos + Point(0, ascent),),
                pen,
                SHAPE_PEN_WIDTH,
                text=shape.text,
                font=shape.font,
            )
        )

    if shape.selected or shape.editing:
        ops.append(DrawOp("rect", _corners(rect), FRAME_COLOR, 1, dashed=True))
        if kind is not ShapeType.TEXT:
            ops.extend(
                DrawOp("rect", _corners(shape.handle_rect(h)), HANDLE_OUTLINE, 1, fill=HANDLE_FILL)
                for h in CORNER_HANDLES
            )

    offset = shape.pos
    return [
        dataclasses.replace(op, points=tuple(p + offset for p in op.points)) for op in ops
    ]
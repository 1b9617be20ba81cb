from vectorsketch.geometry import Point, Rect
from vectorsketch.shape import (
    CURSOR_ARROW,
    CURSOR_BDIAG,
    CURSOR_FDIAG,
    HANDLE_SIZE,
    ResizeHandle,
    Shape,
    ShapeType,
)

START = Point(0, 0)
END = Point(100, 50)


def make(start=START, end=END, kind=ShapeType.RECTANGLE):
    s = Shape(kind, start)
    s.end_pos = end
    return s


def test_new_shape_is_degenerate_and_unselected():
    s = Shape(ShapeType.LINE, Point(5, 6), "#ff0000")
    assert s.end_pos == s.start_pos == Point(5, 6)
    assert s.pos == Point()
    assert not s.selected
    assert s.color == "#ff0000"


def test_bounding_rect_pads_by_ten():
    s = make()
    inner = Rect.from_points(START, END)
    assert s.bounding_rect().adjusted(10, 10, -10, -10) == inner


def test_bounding_rect_same_for_reversed_drag():
    assert make(START, END).bounding_rect() == make(END, START).bounding_rect()


def test_scene_rect_and_contains_follow_pos():
    s = make()
    s.pos = Point(30, 40)
    assert s.scene_rect().top_left == s.bounding_rect().top_left + s.pos
    assert s.contains(END + s.pos)
    assert not s.contains(END + s.pos + Point(50, 50))


def test_handle_rects_are_centred_on_corners():
    s = make()
    inner = Rect.from_points(START, END)
    corners = {
        ResizeHandle.TOP_LEFT: inner.top_left,
        ResizeHandle.TOP_RIGHT: inner.top_right,
        ResizeHandle.BOTTOM_LEFT: inner.bottom_left,
        ResizeHandle.BOTTOM_RIGHT: inner.bottom_right,
    }
    for handle, corner in corners.items():
        hr = s.handle_rect(handle)
        assert hr.center() == corner
        assert hr.width == hr.height == HANDLE_SIZE


def test_none_handle_rect_is_empty():
    s = make()
    hr = s.handle_rect(ResizeHandle.NONE)
    assert hr.width == 0
    assert not hr.contains(hr.top_left)


def test_handle_at_corners_and_middle():
    s = make()
    inner = Rect.from_points(START, END)
    assert s.handle_at(inner.top_left) is ResizeHandle.TOP_LEFT
    assert s.handle_at(inner.top_right) is ResizeHandle.TOP_RIGHT
    assert s.handle_at(inner.bottom_left) is ResizeHandle.BOTTOM_LEFT
    assert s.handle_at(inner.bottom_right) is ResizeHandle.BOTTOM_RIGHT
    assert s.handle_at(inner.center()) is ResizeHandle.NONE


def test_text_has_no_handles():
    s = make(kind=ShapeType.TEXT)
    assert s.handle_at(START) is ResizeHandle.NONE
    assert s.cursor_at(START) == CURSOR_ARROW


def test_cursor_at():
    s = make()
    inner = Rect.from_points(START, END)
    assert s.cursor_at(inner.top_left) == CURSOR_FDIAG
    assert s.cursor_at(inner.bottom_right) == CURSOR_FDIAG
    assert s.cursor_at(inner.top_right) == CURSOR_BDIAG
    assert s.cursor_at(inner.bottom_left) == CURSOR_BDIAG
    assert s.cursor_at(inner.center()) == CURSOR_ARROW


def test_resize_bottom_right():
    s = make()
    delta = Point(5, 7)
    assert s.press(END)
    assert s.is_resizing
    assert s.drag(delta)
    assert s.end_pos == END + delta
    assert s.start_pos == START
    assert s.pos == Point()
    s.release()
    assert not s.is_resizing
    assert s.current_handle is ResizeHandle.NONE


def test_resize_top_left():
    s = make()
    delta = Point(-3, -4)
    s.press(START)
    s.drag(delta)
    assert s.start_pos == START + delta
    assert s.end_pos == END


def test_resize_top_right_mixes_coordinates():
    s = make()
    delta = Point(5, 7)
    s.press(Point(END.x, START.y))
    s.drag(delta)
    assert s.end_pos == Point(END.x + delta.x, END.y)
    assert s.start_pos == Point(START.x, START.y + delta.y)


def test_resize_bottom_left_mixes_coordinates():
    s = make()
    delta = Point(5, 7)
    s.press(Point(START.x, END.y))
    s.drag(delta)
    assert s.start_pos == Point(START.x + delta.x, START.y)
    assert s.end_pos == Point(END.x, END.y + delta.y)


def test_drag_without_handle_moves_item():
    s = make()
    delta = Point(12, -8)
    assert not s.press(Rect.from_points(START, END).center())
    assert not s.drag(delta)
    assert s.pos == delta
    assert (s.start_pos, s.end_pos) == (START, END)
from vectorsketch.controller import EditorMode, GraphicController
from vectorsketch.geometry import Font, Point
from vectorsketch.model import GraphicModel
from vectorsketch.shape import ShapeType


def _controller(prompt=None):
    return GraphicController(GraphicModel(), prompt)


def test_defaults():
    controller = _controller()
    assert controller.mode is EditorMode.SELECT
    assert controller.current_color == "#000000"
    assert controller.current_font == Font()


def test_draw_rectangle_and_undo():
    controller = _controller()
    controller.mode = EditorMode.CREATE_RECT
    controller.current_color = "#ff0000"
    controller.mouse_pressed(Point(1, 2))
    assert controller.is_drawing
    controller.mouse_moved(Point(30, 40))
    controller.mouse_released()
    (shape,) = controller.model.shapes
    assert shape.shape_type is ShapeType.RECTANGLE
    assert shape.start_pos == Point(1, 2)
    assert shape.end_pos == Point(30, 40)
    assert shape.color == "#ff0000"
    assert not controller.is_drawing
    controller.undo()
    assert controller.model.shapes == []
    controller.redo()
    assert controller.model.shapes == [shape]


def test_each_create_mode_makes_its_shape():
    pairs = {
        EditorMode.CREATE_LINE: ShapeType.LINE,
        EditorMode.CREATE_ELLIPSE: ShapeType.ELLIPSE,
        EditorMode.CREATE_STAR: ShapeType.STAR,
    }
    for mode, shape_type in pairs.items():
        controller = _controller()
        controller.mode = mode
        controller.mouse_pressed(Point())
        assert controller.model.shapes[0].shape_type is shape_type


def test_select_mode_on_empty_space_does_nothing():
    controller = _controller()
    controller.mouse_pressed(Point(100, 100))
    controller.mouse_released()
    assert controller.model.shapes == []
    assert not controller.undo_stack.can_undo()


def test_move_shape_is_undoable():
    controller = _controller()
    shape = controller.model.add_shape(ShapeType.RECTANGLE, Point(), "#000000")
    controller.mouse_pressed(Point(0, 0))
    assert controller.is_moving
    target = Point(50, 60)
    controller.mouse_moved(target)
    assert shape.pos + shape.bounding_rect().center() == target
    moved = shape.pos
    controller.mouse_released()
    assert controller.undo_stack.undo_text == "Move Shape"
    controller.undo()
    assert shape.pos == Point()
    controller.redo()
    assert shape.pos == moved


def test_release_without_motion_pushes_nothing():
    controller = _controller()
    controller.model.add_shape(ShapeType.RECTANGLE, Point(), "#000000")
    controller.mouse_pressed(Point(0, 0))
    controller.mouse_released()
    assert not controller.undo_stack.can_undo()
    assert not controller.is_moving


def test_text_mode_uses_prompt():
    controller = _controller(lambda: "hello")
    controller.mode = EditorMode.CREATE_TEXT
    controller.mouse_pressed(Point(5, 5))
    (shape,) = controller.model.shapes
    assert shape.shape_type is ShapeType.TEXT
    assert shape.text == "hello"
    assert not controller.is_drawing


def test_text_mode_cancel_or_empty_creates_nothing():
    for answer in (None, ""):
        controller = _controller(lambda: answer)
        controller.mode = EditorMode.CREATE_TEXT
        controller.mouse_pressed(Point())
        assert controller.model.shapes == []


def test_delete_selected_and_undo():
    controller = _controller()
    a = controller.model.add_shape(ShapeType.LINE, Point(), "#000000")
    b = controller.model.add_shape(ShapeType.STAR, Point(100, 100), "#000000")
    a.selected = True
    controller.delete_selected()
    assert controller.model.shapes == [b]
    controller.undo()
    assert set(controller.model.shapes) == {a, b}


def test_clear_all_and_undo():
    controller = _controller()
    a = controller.model.add_shape(ShapeType.LINE, Point(), "#000000")
    b = controller.model.add_shape(ShapeType.ELLIPSE, Point(9, 9), "#000000")
    controller.clear_all()
    assert controller.model.shapes == []
    controller.undo()
    assert controller.model.shapes == [a, b]


def test_change_selected_color_is_undoable():
    controller = _controller()
    a = controller.model.add_shape(ShapeType.LINE, Point(), "#000000")
    b = controller.model.add_shape(ShapeType.STAR, Point(), "#000000")
    a.selected = True
    controller.change_selected_color("#abcdef")
    assert a.color == "#abcdef"
    assert b.color == "#000000"
    controller.undo()
    assert a.color == "#000000"


def test_change_selected_font_only_touches_text():
    controller = _controller()
    text = controller.model.add_shape(ShapeType.TEXT, Point(), "#000000")
    line = controller.model.add_shape(ShapeType.LINE, Point(), "#000000")
    text.selected = line.selected = True
    font = Font(family="Mono", bold=True)
    controller.change_selected_font(font)
    assert text.font == font
    assert line.font == Font()
# vectorsketch

A small desktop editor for vector drawings. You place lines, rectangles,
ellipses, five-pointed stars and text on a canvas, move and resize them,
recolour them, change the font of text, and step back and forth through
edits with undo and redo.

The window is built on Tk (`tkinter`), which ships with most Python
installations; no other packages are needed.

## Installing

```
pip install .
```

## Running

```
vectorsketch
```

The command opens the editor window and runs until the window is closed.
It takes no options besides `--help`.

## Using the editor

The toolbar on the left holds the tools:

- **Select** – press on a shape to select it and drag it; the other
  selected shapes move with it. Dragging on empty canvas draws a rubber
  band and selects every shape whose area touches it.
- **Line**, **Rectangle**, **Ellipse**, **Star** – press on empty canvas
  and drag to size the new shape. Pressing on an existing shape picks
  that shape up instead.
- **Text** – click on empty canvas and type the text in the dialog.
  Cancelled or empty text is not added.
- **Color** – choose the drawing colour for new shapes; selected shapes
  take the new colour at once.
- **Delete** (or the Delete key) removes the selected shapes;
  **Clear** removes everything.
- Font family, size (8 to 48 points in steps of 2), **B**, **I** and
  **U** set the font for new text. Family, bold, italic and underline
  changes also apply to selected text; a size change applies only to new
  text.
- The arrow buttons undo and redo.

Selected shapes show a dashed frame and, except for text, four corner
handles. Pressing on a corner handle and dragging resizes the shape; the
pointer changes over the handles.

Adding, deleting, recolouring and clearing are undoable. Clearing keeps
the removed shapes, so one undo brings them all back. Dragging shapes
around with the pointer in the window is not recorded in the undo
history.

Text width on the canvas is estimated from the font size, so the
selection highlight behind text is approximate.

## What it does not do

Drawings live only as long as the window is open: there is no saving,
loading, exporting or printing.

## Using it as a library

The editing logic does not need the window and can be driven from code:

- `vectorsketch.geometry` has `Point`, `Rect` and `Font`.
- `vectorsketch.shape` has `Shape`, `ShapeType` and `ResizeHandle`.
  A shape knows its bounding rectangle, its handles, and resizes or moves
  itself through `press`, `drag` and `release`.
- `vectorsketch.scene` has `Scene`, which keeps shapes in stacking order,
  handles selection, dragging and the rubber band, and passes pointer
  events that no shape takes to its `on_press`, `on_move` and
  `on_release` callbacks.
- `vectorsketch.model` has `GraphicModel`, which owns the shapes and the
  scene and calls subscribers (`subscribe`) whenever its contents change.
- `vectorsketch.commands` has `UndoStack` and the undoable commands
  `AddShapeCommand`, `DeleteShapeCommand`, `MoveShapeCommand`,
  `ColorCommand` and `ClearAllCommand`.
- `vectorsketch.controller` has `GraphicController` and `EditorMode`;
  feed it `mouse_pressed`, `mouse_moved` and `mouse_released` and it
  creates and sizes shapes through its undo stack. In `SELECT` mode it
  picks up the shape under the pointer and records the move as a
  `MoveShapeCommand` on release.
- `vectorsketch.drawing` turns a shape into a list of `DrawOp` drawing
  operations with `draw_shape`, for any backend that can draw lines,
  rectangles, ellipses, polygons and text; `star_points` and
  `text_extent` are the helpers it uses.
- `vectorsketch.app` has `MainWindow`. Built without a Tk root, it makes
  no widgets and draws onto whatever `canvas` object it is given, using
  the `color_picker` and `text_prompt` callables for its dialogs;
  `redraw` returns the operations drawn. `main` starts the window.

## Running the tests

```
pip install .[test]
pytest
```
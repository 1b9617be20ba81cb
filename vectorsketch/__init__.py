"""A small Tk vector drawing editor with shapes, selection and undoable edits."""

__version__ = "0.1.0"
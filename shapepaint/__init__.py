"""ShapePaint vector drawing module built with PySide6 and QML.

Shapes are placed on a pannable, zoomable canvas, can be undone one commit
at a time, and the drawing can be exported as standalone source code.
"""

from .codegen import Instruction, Op, document_instructions, generate_code, shape_instructions
from .document import Document, parse_canvas_size
from .errors import InvalidCanvasSize, UnknownTool
from .history import History
from .model import PaintModel
from .qml import SHAPEPAINT_QML
from .render import render_document, render_to_image
from .transform import ViewTransform, clamp_to_canvas
from .types import Point, RgbColor, Shape, ShapeKind, ShapeStyle
from .ui import create_paint_window, main

__all__ = [
    "Document",
    "History",
    "Instruction",
    "InvalidCanvasSize",
    "Op",
    "PaintModel",
    "Point",
    "RgbColor",
    "SHAPEPAINT_QML",
    "Shape",
    "ShapeKind",
    "ShapeStyle",
    "UnknownTool",
    "ViewTransform",
    "clamp_to_canvas",
    "create_paint_window",
    "document_instructions",
    "generate_code",
    "main",
    "parse_canvas_size",
    "render_document",
    "render_to_image",
    "shape_instructions",
]

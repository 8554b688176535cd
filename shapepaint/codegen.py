"""Export a drawing as standalone source code.

The committed shapes are first turned into a flat list of drawing
instructions, which is then rendered as text for one of the supported
targets. Each shape emits its own colour and stroke instructions; the only
shortcut is skipping the second colour change when a shape's fill colour
equals its stroke colour.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from .constants import DEFAULT_CODE_TARGET
from .types import RgbColor, Shape, ShapeKind

logger = logging.getLogger(__name__)


class Op(Enum):
    """Drawing instruction kinds."""

    SET_COLOR = "setColor"
    SET_STROKE = "setStroke"
    DRAW_LINE = "drawLine"
    DRAW_RECT = "drawRect"
    FILL_RECT = "fillRect"
    DRAW_OVAL = "drawOval"
    FILL_OVAL = "fillOval"
    DRAW_POLYGON = "drawPolygon"
    FILL_POLYGON = "fillPolygon"


@dataclass(frozen=True)
class Instruction:
    """A single drawing instruction.

    ``args`` is ``(r, g, b)`` for SET_COLOR, ``(width,)`` for SET_STROKE,
    ``(x1, y1, x2, y2)`` for lines, ``(x, y, w, h)`` for rectangles and ovals,
    and ``(xs, ys)`` tuples for polygons.
    """

    op: Op
    args: Tuple


_OUTLINE_OPS = {
    ShapeKind.RECTANGLE: Op.DRAW_RECT,
    ShapeKind.OVAL: Op.DRAW_OVAL,
    ShapeKind.POLYGON: Op.DRAW_POLYGON,
}
_FILL_OPS = {
    ShapeKind.RECTANGLE: Op.FILL_RECT,
    ShapeKind.OVAL: Op.FILL_OVAL,
    ShapeKind.POLYGON: Op.FILL_POLYGON,
}


def _set_color(color: RgbColor) -> Instruction:
    return Instruction(Op.SET_COLOR, (color.r, color.g, color.b))


def _geometry_args(shape: Shape) -> Tuple:
    if shape.kind is ShapeKind.LINE:
        return (shape.start.x, shape.start.y, shape.end.x, shape.end.y)
    if shape.kind is ShapeKind.POLYGON:
        xs = tuple(pt.x for pt in shape.vertices)
        ys = tuple(pt.y for pt in shape.vertices)
        return (xs, ys)
    return shape.bounds()


def shape_instructions(shape: Shape) -> List[Instruction]:
    style = shape.style
    args = _geometry_args(shape)
    outline_op = Op.DRAW_LINE if shape.kind is ShapeKind.LINE else _OUTLINE_OPS[shape.kind]

    instructions = [
        _set_color(style.stroke_color),
        Instruction(Op.SET_STROKE, (style.stroke_width,)),
        Instruction(outline_op, args),
    ]
    if style.fill_color is not None and shape.kind.is_closed:
        if style.fill_color != style.stroke_color:
            instructions.append(_set_color(style.fill_color))
        instructions.append(Instruction(_FILL_OPS[shape.kind], args))
    return instructions


def document_instructions(shapes: Iterable[Shape]) -> List[Instruction]:
    """Instructions for every shape, in paint order."""
    result: List[Instruction] = []
    for shape in shapes:
        result.extend(shape_instructions(shape))
    return result


# --- Java2D target ---------------------------------------------------------
def _java_color(r: int, g: int, b: int) -> str:
    return f"new Color({r}, {g}, {b})"


def _java_int_array(values: Sequence[int]) -> str:
    return "new int[] {" + ", ".join(str(v) for v in values) + "}"


def java_statement(instruction: Instruction) -> str:
    op, args = instruction.op, instruction.args
    if op is Op.SET_COLOR:
        return f"g2d.setColor({_java_color(*args)});"
    if op is Op.SET_STROKE:
        return f"g2d.setStroke(new BasicStroke({args[0]}));"
    if op in (Op.DRAW_POLYGON, Op.FILL_POLYGON):
        xs, ys = args
        return f"g2d.{op.value}({_java_int_array(xs)}, {_java_int_array(ys)}, {len(xs)});"
    return f"g2d.{op.value}({', '.join(str(v) for v in args)});"


def render_java(
    instructions: Sequence[Instruction],
    width: int,
    height: int,
    background: RgbColor,
) -> str:
    lines = [
        "import java.awt.*;",
        "import javax.swing.*;",
        "",
        "public class GeneratedDrawing extends JPanel {",
        "    public GeneratedDrawing() {",
        f"        setBackground({_java_color(background.r, background.g, background.b)});",
        "    }",
        "",
        "    @Override",
        "    protected void paintComponent(Graphics g) {",
        "        super.paintComponent(g);",
        "        Graphics2D g2d = (Graphics2D) g;",
    ]
    lines.extend("        " + java_statement(instr) for instr in instructions)
    lines.extend([
        "    }",
        "",
        "    public static void main(String[] args) {",
        '        JFrame frame = new JFrame("Generated Drawing");',
        "        frame.setDefaultCloseOperation(JFrame.EXIT_ON_CLOSE);",
        "        frame.add(new GeneratedDrawing());",
        f"        frame.setSize({width}, {height});",
        "        frame.setResizable(false);",
        "        frame.setVisible(true);",
        "    }",
        "}",
    ])
    return "\n".join(lines) + "\n"


# --- PySide6 target --------------------------------------------------------
def _int_list(values: Sequence[int]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def pyside6_statements(instruction: Instruction) -> List[str]:
    op, args = instruction.op, instruction.args
    if op is Op.SET_COLOR:
        return ["color = QColor({}, {}, {})".format(*args)]
    if op is Op.SET_STROKE:
        return [f"width = {args[0]}"]
    if op is Op.DRAW_LINE:
        return ["outline(painter, color, width)", "painter.drawLine({}, {}, {}, {})".format(*args)]
    if op is Op.DRAW_RECT:
        return ["outline(painter, color, width)", "painter.drawRect({}, {}, {}, {})".format(*args)]
    if op is Op.FILL_RECT:
        return ["painter.fillRect({}, {}, {}, {}, color)".format(*args)]
    if op is Op.DRAW_OVAL:
        return ["outline(painter, color, width)", "painter.drawEllipse({}, {}, {}, {})".format(*args)]
    if op is Op.FILL_OVAL:
        return ["solid(painter, color)", "painter.drawEllipse({}, {}, {}, {})".format(*args)]
    xs, ys = args
    polygon = f"painter.drawPolygon(polygon({_int_list(xs)}, {_int_list(ys)}))"
    if op is Op.DRAW_POLYGON:
        return ["outline(painter, color, width)", polygon]
    return ["solid(painter, color)", polygon]


def render_pyside6(
    instructions: Sequence[Instruction],
    width: int,
    height: int,
    background: RgbColor,
) -> str:
    lines = [
        '"""Drawing exported from ShapePaint."""',
        "",
        "import sys",
        "",
        "from PySide6.QtCore import QPoint, Qt",
        "from PySide6.QtGui import QColor, QPainter, QPalette, QPen, QPolygon",
        "from PySide6.QtWidgets import QApplication, QWidget",
        "",
        "",
        "def outline(painter, color, width):",
        "    painter.setPen(QPen(color, width))",
        "    painter.setBrush(Qt.NoBrush)",
        "",
        "",
        "def solid(painter, color):",
        "    painter.setPen(Qt.NoPen)",
        "    painter.setBrush(color)",
        "",
        "",
        "def polygon(xs, ys):",
        "    return QPolygon([QPoint(x, y) for x, y in zip(xs, ys)])",
        "",
        "",
        "class GeneratedDrawing(QWidget):",
        "    def __init__(self):",
        "        super().__init__()",
        '        self.setWindowTitle("Generated Drawing")',
        f"        self.setFixedSize({width}, {height})",
        "        palette = self.palette()",
        f"        palette.setColor(QPalette.Window, QColor({background.r}, {background.g}, {background.b}))",
        "        self.setPalette(palette)",
        "        self.setAutoFillBackground(True)",
        "",
        "    def paintEvent(self, event):",
        "        painter = QPainter(self)",
        "        color = QColor(0, 0, 0)",
        "        width = 1",
    ]
    for instr in instructions:
        lines.extend("        " + statement for statement in pyside6_statements(instr))
    lines.extend([
        "        painter.end()",
        "",
        "",
        'if __name__ == "__main__":',
        "    app = QApplication(sys.argv)",
        "    window = GeneratedDrawing()",
        "    window.show()",
        "    sys.exit(app.exec())",
    ])
    return "\n".join(lines) + "\n"


CODE_RENDERERS: Dict[str, Callable[[Sequence[Instruction], int, int, RgbColor], str]] = {
    "java": render_java,
    "pyside6": render_pyside6,
}


def generate_code(
    shapes: Iterable[Shape],
    width: int,
    height: int,
    background: RgbColor,
    target: str = DEFAULT_CODE_TARGET,
) -> str:
    """Return the source of a program that reproduces the drawing.

    Raises:
        KeyError: if ``target`` is not one of ``CODE_RENDERERS``.
    """
    renderer = CODE_RENDERERS[target]
    instructions = document_instructions(shapes)
    logger.debug("Generating %s code from %d instructions", target, len(instructions))
    return renderer(instructions, width, height, background)

"""QPainter render pass for ShapePaint documents."""

from __future__ import annotations

from typing import Iterable, Optional

from PySide6.QtCore import QPoint, QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QImage, QPainter, QPen, QPolygon

from .constants import (
    DEFAULT_BACKGROUND_COLOR,
    MARKER_COLOR,
    MARKER_FONT_FAMILY,
    MARKER_FONT_SIZE,
    MARKER_LABEL_OFFSET,
    MARKER_RADIUS,
)
from .document import Document
from .transform import ViewTransform
from .types import Point, RgbColor, Shape, ShapeKind


def qcolor(color: RgbColor) -> QColor:
    return QColor(color.r, color.g, color.b)


def _polygon(points: Iterable[Point]) -> QPolygon:
    return QPolygon([QPoint(pt.x, pt.y) for pt in points])


def draw_shape(painter: QPainter, shape: Shape) -> None:
    """Stroke the outline of ``shape``, then fill it when it has a fill colour."""
    style = shape.style
    painter.setPen(QPen(qcolor(style.stroke_color), style.stroke_width))
    painter.setBrush(Qt.NoBrush)

    kind = shape.kind
    if kind is ShapeKind.LINE:
        painter.drawLine(shape.start.x, shape.start.y, shape.end.x, shape.end.y)
        return

    if kind is ShapeKind.POLYGON:
        if not shape.vertices:
            return
        polygon = _polygon(shape.vertices)
        painter.drawPolygon(polygon)
        if style.fill_color is not None:
            painter.setPen(Qt.NoPen)
            painter.setBrush(QBrush(qcolor(style.fill_color)))
            painter.drawPolygon(polygon)
        return

    x, y, width, height = shape.bounds()
    if kind is ShapeKind.RECTANGLE:
        painter.drawRect(x, y, width, height)
        if style.fill_color is not None:
            painter.fillRect(x, y, width, height, qcolor(style.fill_color))
    elif kind is ShapeKind.OVAL:
        painter.drawEllipse(x, y, width, height)
        if style.fill_color is not None:
            painter.setPen(Qt.NoPen)
            painter.setBrush(QBrush(qcolor(style.fill_color)))
            painter.drawEllipse(x, y, width, height)


def draw_vertex_markers(painter: QPainter, vertices: Iterable[Point]) -> None:
    """Mark pending polygon vertices with a dot and a 1-based index."""
    color = qcolor(MARKER_COLOR)
    font = QFont(MARKER_FONT_FAMILY)
    font.setPixelSize(MARKER_FONT_SIZE)
    font.setBold(True)
    painter.setFont(font)
    dx, dy = MARKER_LABEL_OFFSET
    for index, pt in enumerate(vertices, start=1):
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(color))
        painter.drawEllipse(
            pt.x - MARKER_RADIUS, pt.y - MARKER_RADIUS, 2 * MARKER_RADIUS, 2 * MARKER_RADIUS
        )
        painter.setPen(QPen(color))
        painter.drawText(pt.x + dx, pt.y + dy, str(index))


def render_document(
    painter: QPainter,
    document: Document,
    transform: ViewTransform,
    background: RgbColor = DEFAULT_BACKGROUND_COLOR,
    include_gesture: bool = True,
) -> None:
    """Paint the document through the viewport transform.

    With ``include_gesture`` the preview shape and pending polygon markers are
    drawn on top of the committed shapes. The painter state is saved and
    restored, so callers can keep drawing in device coordinates afterwards.
    """
    painter.save()
    try:
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.scale(transform.scale, transform.scale)
        painter.translate(QPointF(transform.origin_x / transform.scale, transform.origin_y / transform.scale))

        painter.fillRect(0, 0, document.canvas_width, document.canvas_height, qcolor(background))

        for shape in document.committed:
            draw_shape(painter, shape)
        if include_gesture and document.preview is not None:
            draw_shape(painter, document.preview)

        if include_gesture and document.tool is ShapeKind.POLYGON:
            draw_vertex_markers(painter, document.pending_vertices)
    finally:
        painter.restore()


def render_to_image(
    document: Document,
    background: RgbColor = DEFAULT_BACKGROUND_COLOR,
    transform: Optional[ViewTransform] = None,
    include_gesture: bool = False,
) -> QImage:
    """Rasterise the committed drawing at canvas size (identity view unless given)."""
    image = QImage(document.canvas_width, document.canvas_height, QImage.Format_ARGB32)
    image.fill(Qt.transparent)
    painter = QPainter(image)
    try:
        render_document(painter, document, transform or ViewTransform(), background, include_gesture)
    finally:
        painter.end()
    return image

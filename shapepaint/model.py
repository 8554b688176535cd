"""Core PaintModel class for ShapePaint.

This module provides the Qt object that QML talks to. It owns the document,
the viewport transform and the current style settings, and translates
pointer events in device pixels into document operations.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from PySide6.QtCore import Property, QObject, Signal, Slot
from PySide6.QtGui import QGuiApplication

from .codegen import CODE_RENDERERS, generate_code
from .constants import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_CODE_TARGET,
    DEFAULT_DRAW_COLOR,
    DEFAULT_FILL_COLOR,
    MAX_STROKE_WIDTH,
    MIN_STROKE_WIDTH,
    TOOL_NAMES,
    WHEEL_STEP_DELTA,
)
from .document import Document, parse_canvas_size
from .errors import InvalidCanvasSize, UnknownTool
from .render import render_to_image
from .transform import ViewTransform
from .types import RgbColor, ShapeKind, ShapeStyle

logger = logging.getLogger(__name__)


class PaintModel(QObject):
    """Qt model exposing a ShapePaint document to QML."""

    documentChanged = Signal()
    viewChanged = Signal()
    styleChanged = Signal()
    toolChanged = Signal()
    canvasSizeChanged = Signal()
    errorChanged = Signal()

    def __init__(
        self,
        canvas_width: int = DEFAULT_CANVAS_WIDTH,
        canvas_height: int = DEFAULT_CANVAS_HEIGHT,
    ) -> None:
        super().__init__()
        self.document = Document(canvas_width, canvas_height)
        self.transform = ViewTransform()
        self._draw_color: RgbColor = DEFAULT_DRAW_COLOR
        self._fill_color: RgbColor = DEFAULT_FILL_COLOR
        self._fill_enabled = False
        self._stroke_width = MIN_STROKE_WIDTH
        self._background_color: RgbColor = DEFAULT_BACKGROUND_COLOR
        self._last_error = ""
        self._wheel_delta = 0

    # --- Style -------------------------------------------------------------
    def current_style(self) -> ShapeStyle:
        """Style read at the moment of use, not snapshotted earlier."""
        return ShapeStyle(
            stroke_color=self._draw_color,
            fill_color=self._fill_color if self._fill_enabled else None,
            stroke_width=self._stroke_width,
        )

    @property
    def background_color(self) -> RgbColor:
        return self._background_color

    def _parse_color(self, value: str) -> Optional[RgbColor]:
        try:
            return RgbColor.from_hex(value)
        except ValueError:
            logger.warning("Ignoring invalid colour %r", value)
            return None

    @Property(str, notify=styleChanged)
    def drawColor(self) -> str:
        return self._draw_color.hex

    @drawColor.setter  # type: ignore[no-redef]
    def drawColor(self, value: str) -> None:
        self.setDrawColor(value)

    @Slot(str)
    def setDrawColor(self, value: str) -> None:
        color = self._parse_color(value)
        if color is not None and color != self._draw_color:
            self._draw_color = color
            self.styleChanged.emit()

    @Property(str, notify=styleChanged)
    def fillColor(self) -> str:
        return self._fill_color.hex

    @fillColor.setter  # type: ignore[no-redef]
    def fillColor(self, value: str) -> None:
        self.setFillColor(value)

    @Slot(str)
    def setFillColor(self, value: str) -> None:
        color = self._parse_color(value)
        if color is not None and color != self._fill_color:
            self._fill_color = color
            self.styleChanged.emit()

    @Property(bool, notify=styleChanged)
    def fillEnabled(self) -> bool:
        return self._fill_enabled

    @fillEnabled.setter  # type: ignore[no-redef]
    def fillEnabled(self, value: bool) -> None:
        self.setFillEnabled(value)

    @Slot(bool)
    def setFillEnabled(self, enabled: bool) -> None:
        if self._fill_enabled != bool(enabled):
            self._fill_enabled = bool(enabled)
            self.styleChanged.emit()

    @Property(int, notify=styleChanged)
    def strokeWidth(self) -> int:
        return self._stroke_width

    @strokeWidth.setter  # type: ignore[no-redef]
    def strokeWidth(self, value: int) -> None:
        self.setStrokeWidth(value)

    @Slot(int)
    def setStrokeWidth(self, width: int) -> None:
        clamped = max(MIN_STROKE_WIDTH, min(MAX_STROKE_WIDTH, int(width)))
        if self._stroke_width != clamped:
            self._stroke_width = clamped
            self.styleChanged.emit()

    @Property(str, notify=styleChanged)
    def backgroundColor(self) -> str:
        return self._background_color.hex

    @backgroundColor.setter  # type: ignore[no-redef]
    def backgroundColor(self, value: str) -> None:
        self.setBackgroundColor(value)

    @Slot(str)
    def setBackgroundColor(self, value: str) -> None:
        color = self._parse_color(value)
        if color is not None and color != self._background_color:
            self._background_color = color
            self.styleChanged.emit()
            self.documentChanged.emit()

    # --- Tool --------------------------------------------------------------
    @Property(str, notify=toolChanged)
    def tool(self) -> str:
        return self.document.tool.value

    @Property(list, constant=True)
    def toolNames(self) -> List[str]:
        return list(TOOL_NAMES)

    @Property(bool, notify=toolChanged)
    def isPolygonTool(self) -> bool:
        return self.document.tool is ShapeKind.POLYGON

    @Slot(str)
    def setTool(self, name: str) -> None:
        try:
            kind = ShapeKind.from_name(name)
        except UnknownTool as exc:
            logger.warning("%s", exc)
            return
        self.document.switch_tool(kind)
        logger.debug("Tool switched to %s", kind.value)
        self.toolChanged.emit()
        self.documentChanged.emit()

    # --- Canvas size -------------------------------------------------------
    @Property(int, notify=canvasSizeChanged)
    def canvasWidth(self) -> int:
        return self.document.canvas_width

    @Property(int, notify=canvasSizeChanged)
    def canvasHeight(self) -> int:
        return self.document.canvas_height

    @Property(str, notify=errorChanged)
    def lastError(self) -> str:
        return self._last_error

    def _set_last_error(self, message: str) -> None:
        if self._last_error != message:
            self._last_error = message
            self.errorChanged.emit()

    @Slot(str, str, result=bool)
    def applyCanvasSize(self, width_text: str, height_text: str) -> bool:
        """Resize the canvas from form input. Invalid input leaves the size unchanged."""
        try:
            width, height = parse_canvas_size(width_text, height_text)
        except InvalidCanvasSize as exc:
            logger.warning("%s", exc)
            self._set_last_error(str(exc))
            return False
        self._set_last_error("")
        if (width, height) != (self.document.canvas_width, self.document.canvas_height):
            self.document.resize_canvas(width, height)
            self.canvasSizeChanged.emit()
            self.documentChanged.emit()
        return True

    # --- Document state ----------------------------------------------------
    @Property(int, notify=documentChanged)
    def shapeCount(self) -> int:
        return len(self.document.committed)

    @Property(bool, notify=documentChanged)
    def canUndo(self) -> bool:
        return bool(self.document.history)

    @Property(int, notify=documentChanged)
    def pendingVertexCount(self) -> int:
        return len(self.document.pending_vertices)

    # --- Gestures (device coordinates) -------------------------------------
    @Slot(float, float)
    def pressAt(self, x: float, y: float) -> None:
        point = self.transform.to_logical(x, y)
        if self.document.begin_stroke(point):
            self.documentChanged.emit()

    @Slot(float, float)
    def dragTo(self, x: float, y: float) -> None:
        point = self.transform.to_logical(x, y)
        if self.document.update_stroke(point, self.current_style()):
            self.documentChanged.emit()

    @Slot()
    def releaseAt(self) -> None:
        if self.document.commit_stroke(self.current_style()) is not None:
            self.documentChanged.emit()

    @Slot()
    def finishPolygon(self) -> None:
        if self.document.finish_polygon(self.current_style()) is not None:
            self.documentChanged.emit()

    @Slot()
    def cancelGesture(self) -> None:
        self.document.cancel_gesture()
        self.documentChanged.emit()

    @Slot()
    def undo(self) -> None:
        if self.document.undo():
            self.documentChanged.emit()

    @Slot()
    def clear(self) -> None:
        self.document.clear()
        self.documentChanged.emit()

    # --- Viewport ----------------------------------------------------------
    @Property(float, notify=viewChanged)
    def scale(self) -> float:
        return self.transform.scale

    @Property(float, notify=viewChanged)
    def originX(self) -> float:
        return self.transform.origin_x

    @Property(float, notify=viewChanged)
    def originY(self) -> float:
        return self.transform.origin_y

    @Slot(float, float, int)
    def zoomAt(self, x: float, y: float, angle_delta: int) -> None:
        """Zoom one step per full wheel notch; positive deltas zoom in.

        Partial deltas from touchpads and high-resolution wheels accumulate
        until they add up to a notch. Reversing direction drops the remainder.
        """
        if angle_delta == 0:
            return
        if (angle_delta > 0) != (self._wheel_delta > 0):
            self._wheel_delta = 0
        self._wheel_delta += angle_delta
        steps = int(self._wheel_delta / WHEEL_STEP_DELTA)
        if steps == 0:
            return
        self._wheel_delta -= steps * WHEEL_STEP_DELTA
        direction = 1 if steps > 0 else -1
        changed = False
        for _ in range(abs(steps)):
            changed = self.transform.zoom(x, y, direction) or changed
        if changed:
            self.viewChanged.emit()

    @Slot(float, float)
    def panBy(self, dx: float, dy: float) -> None:
        if dx or dy:
            self.transform.pan(dx, dy)
            self.viewChanged.emit()

    @Slot()
    def resetView(self) -> None:
        self.transform.reset()
        self._wheel_delta = 0
        self.viewChanged.emit()

    # --- Export ------------------------------------------------------------
    @Property(list, constant=True)
    def codeTargets(self) -> List[str]:
        return list(CODE_RENDERERS)

    @Slot(str, result=str)
    def generateCode(self, target: str = DEFAULT_CODE_TARGET) -> str:
        target = target or DEFAULT_CODE_TARGET
        if target not in CODE_RENDERERS:
            logger.warning("Unknown code target %r, using %s", target, DEFAULT_CODE_TARGET)
            target = DEFAULT_CODE_TARGET
        return generate_code(
            self.document.committed,
            self.document.canvas_width,
            self.document.canvas_height,
            self._background_color,
            target,
        )

    @Slot(str, result=bool)
    def copyCodeToClipboard(self, target: str) -> bool:
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            return False
        clipboard.setText(self.generateCode(target))
        return True

    @Slot(result=bool)
    def copyImageToClipboard(self) -> bool:
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            return False
        clipboard.setImage(render_to_image(self.document, self._background_color))
        return True

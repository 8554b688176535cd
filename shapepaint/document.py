"""Drawing state machine for a single ShapePaint document.

Line, Rectangle and Oval are placed with a drag gesture
(``begin_stroke`` -> ``update_stroke``* -> ``commit_stroke``). Polygons collect
one vertex per ``begin_stroke`` and are committed by ``finish_polygon``.
Every commit records a snapshot in the undo history.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .constants import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH, DEFAULT_TOOL, MAX_CANVAS_SIZE
from .errors import InvalidCanvasSize
from .history import History
from .transform import clamp_to_canvas, in_canvas
from .types import Point, Shape, ShapeKind, ShapeStyle

logger = logging.getLogger(__name__)


def _parse_dimension(text) -> int:
    raw = str(text).strip()
    try:
        value = int(raw)
    except ValueError:
        raise InvalidCanvasSize(raw) from None
    if value <= 0:
        raise InvalidCanvasSize(raw)
    if value > MAX_CANVAS_SIZE:
        raise InvalidCanvasSize(raw, MAX_CANVAS_SIZE)
    return value


def parse_canvas_size(width_text, height_text) -> Tuple[int, int]:
    """Parse the width/height fields of the canvas size form."""
    return _parse_dimension(width_text), _parse_dimension(height_text)


class Document:
    """Committed shapes plus the in-progress gesture."""

    def __init__(
        self,
        canvas_width: int = DEFAULT_CANVAS_WIDTH,
        canvas_height: int = DEFAULT_CANVAS_HEIGHT,
        tool: ShapeKind = DEFAULT_TOOL,
    ) -> None:
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.tool = tool
        self.history = History()
        self._committed: Tuple[Shape, ...] = ()
        self._preview: Optional[Shape] = None
        self._start: Optional[Point] = None
        self._pending_vertices: List[Point] = []

    # --- Read access -------------------------------------------------------
    @property
    def committed(self) -> Tuple[Shape, ...]:
        return self._committed

    @property
    def preview(self) -> Optional[Shape]:
        return self._preview

    @property
    def start(self) -> Optional[Point]:
        return self._start

    @property
    def pending_vertices(self) -> Tuple[Point, ...]:
        return tuple(self._pending_vertices)

    @property
    def is_drawing(self) -> bool:
        return self._start is not None

    # --- Gestures ----------------------------------------------------------
    def begin_stroke(self, point: Point) -> bool:
        """Start a drag, or add a polygon vertex. Points off the canvas are ignored."""
        if not in_canvas(point, self.canvas_width, self.canvas_height):
            return False
        if self.tool is ShapeKind.POLYGON:
            self._pending_vertices.append(point)
            return True
        self._start = point
        self._preview = None
        return True

    def update_stroke(self, point: Point, style: ShapeStyle) -> bool:
        if self._start is None or self.tool is ShapeKind.POLYGON:
            return False
        end = clamp_to_canvas(point, self.canvas_width, self.canvas_height)
        self._preview = Shape.between(self.tool, self._start, end, style)
        return True

    def commit_stroke(self, style: ShapeStyle) -> Optional[Shape]:
        """Commit the previewed shape, or a degenerate one when nothing was dragged."""
        if self._start is None or self.tool is ShapeKind.POLYGON:
            return None
        shape = self._preview
        if shape is None:
            shape = Shape.between(self.tool, self._start, self._start, style)
        self._commit(shape)
        self._preview = None
        self._start = None
        return shape

    def finish_polygon(self, style: ShapeStyle) -> Optional[Shape]:
        if len(self._pending_vertices) <= 2:
            return None
        shape = Shape.polygon(self._pending_vertices, style)
        self._commit(shape)
        self._pending_vertices.clear()
        return shape

    def switch_tool(self, tool: ShapeKind) -> None:
        """Change tool, abandoning any uncommitted gesture."""
        self.tool = tool
        self.cancel_gesture()

    def cancel_gesture(self) -> None:
        self._preview = None
        self._start = None
        self._pending_vertices.clear()

    # --- History -----------------------------------------------------------
    def _commit(self, shape: Shape) -> None:
        self._committed = self._committed + (shape,)
        self.history.commit(self._committed)
        logger.debug("Committed %s (%d shapes)", shape.kind.value, len(self._committed))

    def undo(self) -> bool:
        if not self.history:
            return False
        self._committed = self.history.undo()
        logger.debug("Undo (%d shapes remain)", len(self._committed))
        return True

    def clear(self) -> None:
        self._committed = ()
        self.history.clear()
        self.cancel_gesture()

    def resize_canvas(self, width: int, height: int) -> None:
        """Change the canvas size. Committed shapes are left as they are."""
        self.canvas_width = width
        self.canvas_height = height

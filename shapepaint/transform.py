"""Viewport transform between device pixels and logical canvas coordinates."""

from __future__ import annotations

import logging
from typing import Tuple

from .constants import MAX_SCALE, MIN_SCALE, ZOOM_FACTOR
from .types import Point

logger = logging.getLogger(__name__)


def clamp_to_canvas(point: Point, width: int, height: int) -> Point:
    """Clamp each axis of ``point`` into ``[0, width] x [0, height]``."""
    return Point(max(0, min(point.x, width)), max(0, min(point.y, height)))


def in_canvas(point: Point, width: int, height: int) -> bool:
    return 0 <= point.x <= width and 0 <= point.y <= height


class ViewTransform:
    """Pan offset and zoom scale of the drawing viewport.

    ``origin`` is the device position of logical (0, 0). A device point maps
    to ``(device - origin) / scale``.
    """

    def __init__(
        self,
        scale: float = 1.0,
        origin: Tuple[float, float] = (0.0, 0.0),
        min_scale: float = MIN_SCALE,
        max_scale: float = MAX_SCALE,
    ) -> None:
        self.min_scale = min_scale
        self.max_scale = max_scale
        self.scale = max(min_scale, min(max_scale, scale))
        self.origin_x = float(origin[0])
        self.origin_y = float(origin[1])

    @property
    def origin(self) -> Tuple[float, float]:
        return self.origin_x, self.origin_y

    def to_logical(self, x: float, y: float) -> Point:
        """Map a device point to logical coordinates, truncating toward zero."""
        return Point(
            int((x - self.origin_x) / self.scale),
            int((y - self.origin_y) / self.scale),
        )

    def to_device(self, point: Point) -> Tuple[float, float]:
        return (
            point.x * self.scale + self.origin_x,
            point.y * self.scale + self.origin_y,
        )

    def pan(self, dx: float, dy: float) -> None:
        self.origin_x += dx
        self.origin_y += dy

    def zoom(self, anchor_x: float, anchor_y: float, direction: int) -> bool:
        """Zoom one step around a device anchor.

        ``direction > 0`` zooms in, ``direction < 0`` zooms out. Returns False
        when the clamped scale does not change.
        """
        if direction > 0:
            new_scale = min(self.max_scale, self.scale * ZOOM_FACTOR)
        elif direction < 0:
            new_scale = max(self.min_scale, self.scale / ZOOM_FACTOR)
        else:
            return False

        if new_scale == self.scale:
            return False

        logical_x = (anchor_x - self.origin_x) / self.scale
        logical_y = (anchor_y - self.origin_y) / self.scale
        self.scale = new_scale
        self.origin_x = anchor_x - logical_x * new_scale
        self.origin_y = anchor_y - logical_y * new_scale
        logger.debug("Zoom to %.3f around (%.1f, %.1f)", new_scale, anchor_x, anchor_y)
        return True

    def reset(self) -> None:
        self.scale = 1.0
        self.origin_x = 0.0
        self.origin_y = 0.0

    def __repr__(self) -> str:
        return f"ViewTransform(scale={self.scale!r}, origin=({self.origin_x!r}, {self.origin_y!r}))"

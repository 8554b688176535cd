"""Data types for ShapePaint drawings.

This module contains the core data structures used throughout the
ShapePaint drawing system. Every record is frozen: once a shape has been
committed to a document it is never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .errors import UnknownTool


class ShapeKind(Enum):
    """Supported shape kinds (the drawing tools)."""

    LINE = "Line"
    RECTANGLE = "Rectangle"
    OVAL = "Oval"
    POLYGON = "Polygon"

    @classmethod
    def from_name(cls, name: str) -> "ShapeKind":
        """Parse a tool name such as ``"Oval"`` (case-insensitive)."""
        key = (name or "").strip().lower()
        for kind in cls:
            if kind.value.lower() == key:
                return kind
        raise UnknownTool(name)

    @property
    def is_closed(self) -> bool:
        return self is not ShapeKind.LINE


@dataclass(frozen=True)
class Point:
    """A point in logical canvas coordinates."""

    x: int
    y: int


@dataclass(frozen=True)
class RgbColor:
    """An opaque 8-bit RGB colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Colour channel out of range: {channel}")

    @classmethod
    def from_hex(cls, value: str) -> "RgbColor":
        text = value.strip().lstrip("#")
        if len(text) == 8:
            text = text[2:]  # #aarrggbb
        if len(text) != 6:
            raise ValueError(f"Invalid colour: {value!r}")
        return cls(int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


BLACK = RgbColor(0, 0, 0)
WHITE = RgbColor(255, 255, 255)
RED = RgbColor(255, 0, 0)


@dataclass(frozen=True)
class ShapeStyle:
    """Stroke and fill settings captured when a shape is built."""

    stroke_color: RgbColor = BLACK
    fill_color: Optional[RgbColor] = None
    stroke_width: int = 1

    def __post_init__(self) -> None:
        if self.stroke_width < 1:
            raise ValueError(f"Stroke width must be >= 1, got {self.stroke_width}")


@dataclass(frozen=True)
class Shape:
    """A drawn primitive.

    Line, Rectangle and Oval are defined by ``start`` and ``end``; Polygon by
    ``vertices``. The bounding box of closed two-point shapes is derived on
    demand from the defining points and never stored.
    """

    kind: ShapeKind
    style: ShapeStyle
    start: Optional[Point] = None
    end: Optional[Point] = None
    vertices: Tuple[Point, ...] = field(default_factory=tuple)

    @classmethod
    def between(cls, kind: ShapeKind, start: Point, end: Point, style: ShapeStyle) -> "Shape":
        if kind is ShapeKind.POLYGON:
            raise ValueError("Polygons are built from a vertex list")
        return cls(kind=kind, style=style, start=start, end=end)

    @classmethod
    def polygon(cls, vertices, style: ShapeStyle) -> "Shape":
        return cls(kind=ShapeKind.POLYGON, style=style, vertices=tuple(vertices))

    def bounds(self) -> Tuple[int, int, int, int]:
        """Return ``(x, y, width, height)`` normalised from the two points."""
        if self.start is None or self.end is None:
            raise ValueError(f"{self.kind.value} has no bounding points")
        return (
            min(self.start.x, self.end.x),
            min(self.start.y, self.end.y),
            abs(self.start.x - self.end.x),
            abs(self.start.y - self.end.y),
        )

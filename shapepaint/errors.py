"""Errors raised by ShapePaint input validation."""

from __future__ import annotations

from typing import Optional


class ShapePaintError(Exception):
    """Base class for ShapePaint errors."""


class InvalidCanvasSize(ShapePaintError, ValueError):
    """Canvas size text that is not a positive integer within the size limit."""

    def __init__(self, text: str, limit: Optional[int] = None) -> None:
        if limit is None:
            message = f"Canvas size must be a positive integer, got {text!r}"
        else:
            message = f"Canvas size must be at most {limit}, got {text!r}"
        super().__init__(message)
        self.text = text
        self.limit = limit


class UnknownTool(ShapePaintError, ValueError):
    """Tool name that does not match a shape kind."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown drawing tool: {name!r}")
        self.name = name

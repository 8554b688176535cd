"""QML canvas item that paints a PaintModel."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Property, QObject, Signal
from PySide6.QtGui import QColor, QPainter
from PySide6.QtQuick import QQuickPaintedItem

from .constants import SURROUND_COLOR
from .render import render_document

QML_MODULE = "ShapePaint"
QML_MAJOR_VERSION = 1
QML_MINOR_VERSION = 0


class PaintCanvas(QQuickPaintedItem):
    """Paints the model's document on a dark surround, repainting on every change."""

    modelChanged = Signal()

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self._model: Optional[QObject] = None
        self.setAntialiasing(True)

    def _get_model(self) -> Optional[QObject]:
        return self._model

    def _set_model(self, model: Optional[QObject]) -> None:
        if model is self._model:
            return
        if self._model is not None:
            for signal in (self._model.documentChanged, self._model.viewChanged, self._model.styleChanged):
                signal.disconnect(self.update)
        self._model = model
        if model is not None:
            for signal in (model.documentChanged, model.viewChanged, model.styleChanged):
                signal.connect(self.update)
        self.modelChanged.emit()
        self.update()

    model = Property(QObject, _get_model, _set_model, notify=modelChanged)

    def paint(self, painter: QPainter) -> None:  # type: ignore[override]
        painter.fillRect(0, 0, int(self.width()), int(self.height()), QColor(SURROUND_COLOR))
        if self._model is None:
            return
        render_document(painter, self._model.document, self._model.transform, self._model.background_color)

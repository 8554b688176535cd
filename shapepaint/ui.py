"""UI creation functions for ShapePaint."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QByteArray, QUrl
from PySide6.QtQml import QQmlApplicationEngine, qmlRegisterType

from .canvas import QML_MAJOR_VERSION, QML_MINOR_VERSION, QML_MODULE, PaintCanvas
from .constants import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV_VAR,
    SMOKE_ENV_VAR,
)
from .document import parse_canvas_size
from .errors import InvalidCanvasSize
from .logging_config import LoggingConfig
from .model import PaintModel
from .qml import SHAPEPAINT_QML

logger = logging.getLogger(__name__)

_canvas_registered = False


def register_qml_types() -> None:
    global _canvas_registered
    if not _canvas_registered:
        qmlRegisterType(PaintCanvas, QML_MODULE, QML_MAJOR_VERSION, QML_MINOR_VERSION, "PaintCanvas")
        _canvas_registered = True


def create_paint_window(paint_model: PaintModel) -> QQmlApplicationEngine:
    """Create and return a QQmlApplicationEngine hosting the ShapePaint UI."""
    register_qml_types()
    engine = QQmlApplicationEngine()
    engine.rootContext().setContextProperty("paintModel", paint_model)
    engine.loadData(QByteArray(SHAPEPAINT_QML.encode("utf-8")), QUrl("shapepaint.qml"))
    if not engine.rootObjects():
        logger.error("Failed to load the ShapePaint window")
    return engine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shapepaint", description="Draw shapes and export them as code.")
    parser.add_argument("--width", default=str(DEFAULT_CANVAS_WIDTH), help="initial canvas width")
    parser.add_argument("--height", default=str(DEFAULT_CANVAS_HEIGHT), help="initial canvas height")
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL),
        help=f"logging level (default from ${LOG_LEVEL_ENV_VAR})",
    )
    parser.add_argument("--log-dir", type=Path, default=None, help="also write logs to this directory")
    parser.add_argument("--smoke", action="store_true", help="load the window and exit")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for ShapePaint."""
    from PySide6.QtWidgets import QApplication

    args, qt_args = build_parser().parse_known_args(sys.argv[1:] if argv is None else argv)
    LoggingConfig.setup_logging(args.log_level, args.log_dir)
    smoke_mode = args.smoke or os.environ.get(SMOKE_ENV_VAR) == "1"

    try:
        width, height = parse_canvas_size(args.width, args.height)
    except InvalidCanvasSize as exc:
        logger.error("%s", exc)
        return 2

    app = QApplication.instance()
    if app is None:
        app = QApplication([sys.argv[0], *qt_args])

    paint_model = PaintModel(width, height)
    engine = create_paint_window(paint_model)
    if not engine.rootObjects():
        return 1

    logger.info("ShapePaint started with a %dx%d canvas", width, height)
    if LoggingConfig.get_log_file_path() is not None:
        logger.info("Writing log to %s", LoggingConfig.get_log_file_path())
    if smoke_mode:
        return 0

    return app.exec()

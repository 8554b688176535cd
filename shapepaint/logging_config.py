"""Centralized logging configuration for ShapePaint."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union


class LoggingConfig:
    """Configure the root logger once per process."""

    _initialized = False
    _log_file_path: Optional[Path] = None

    @classmethod
    def setup_logging(cls, level: Union[int, str] = logging.INFO, log_dir: Optional[Path] = None) -> None:
        if cls._initialized:
            return

        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                level = logging.INFO

        logger = logging.getLogger()
        logger.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(console_handler)

        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
            cls._log_file_path = log_dir / "shapepaint.log"
            file_handler = logging.FileHandler(cls._log_file_path, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            logger.addHandler(file_handler)

        cls._initialized = True
        logger.debug("Logging system initialized")

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        return cls._log_file_path


__all__ = ["LoggingConfig"]

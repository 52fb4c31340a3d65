"""Centralized logging utilities for the mhchain package."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "mhchain"


class MHChainLogger:
    """Factory class for configured mhchain loggers."""

    _formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    @classmethod
    def get_logger(
        cls,
        name: str = PACKAGE_LOGGER,
        level: Optional[int] = None,
        log_file: Optional[str] = None,
    ) -> logging.Logger:
        """
        Return a logger with consistent mhchain formatting/handlers.

        The package logger owns the handlers. Module loggers (``mhchain.*``)
        propagate to it and only get a level when one is given.
        """
        logger = logging.getLogger(name)

        if name != PACKAGE_LOGGER and name.startswith(PACKAGE_LOGGER + "."):
            cls.get_logger(PACKAGE_LOGGER, log_file=log_file)
            if level is not None:
                logger.setLevel(level)
            return logger

        if level is not None:
            logger.setLevel(level)
        elif logger.level == logging.NOTSET:
            logger.setLevel(logging.INFO)
        logger.propagate = False

        if not logger.handlers:
            stream_handler = logging.StreamHandler()
            stream_handler.setFormatter(cls._formatter)
            logger.addHandler(stream_handler)

        if log_file is not None:
            log_path = Path(log_file)
            has_file_handler = any(
                isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(log_path)
                for handler in logger.handlers
            )
            if not has_file_handler:
                log_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(log_path)
                file_handler.setFormatter(cls._formatter)
                logger.addHandler(file_handler)

        return logger

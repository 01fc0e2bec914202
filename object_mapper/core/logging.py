"""
Logging for the ``object_mapper`` package.

Every module logs through a child of the ``object_mapper`` logger, which
carries a ``NullHandler`` so nothing is printed unless someone asks for it.
Embedding applications usually just configure their own root logger and let
records propagate.

``setup_logging`` is for standalone use (``python -m object_mapper``): it
attaches one stream handler to the package logger only, in either format:
  - **console** (default): ``time | LEVEL | logger | message``.
  - **json**: one python-json-logger object per line, ``extra`` fields included.

Root handlers are never touched, and calling it again replaces only the
handler it installed before.
"""

import logging
import sys
from typing import IO, Literal

from pythonjsonlogger import json as json_logger

PACKAGE_LOGGER = "object_mapper"

LOG_FORMAT_CONSOLE = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "object_mapper.stream"


def setup_logging(
    level: str = "INFO",
    log_format: Literal["json", "console"] = "console",
    stream: IO[str] | None = None,
) -> logging.Logger:
    """
    Send ``object_mapper`` records to ``stream`` (stderr by default).

    The package logger stops propagating once configured, so records are
    not printed twice when the root logger has handlers of its own.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level.upper())

    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    if log_format == "json":
        handler.setFormatter(json_logger.JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt=LOG_DATE_FORMAT,
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
        ))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT_CONSOLE, datefmt=LOG_DATE_FORMAT))

    package_logger.addHandler(handler)
    package_logger.propagate = False
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Per-module logger; call with ``__name__`` from inside the package."""
    return logging.getLogger(name)

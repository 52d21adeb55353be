"""Logging for the analyzer: one stdout handler on the root logger.

Modules call :func:`get_logger` at import time, which installs the handler at
``log_cfg.level``.  Entry points call :func:`setup_logging` again once they
know what they are running; a second call retunes the level of the existing
handler instead of being ignored.
"""

from __future__ import annotations

import logging
import sys

from fpl_analyzer.config import log_cfg

HANDLER_NAME = "fpl_analyzer"


def _own_handler(root: logging.Logger) -> logging.Handler | None:
    for handler in root.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None


def setup_logging(level: int | str | None = None) -> None:
    """Install the console handler, or set a new *level* on it.

    *level* defaults to ``log_cfg.level`` (``FPL_ANALYZER_LOG_LEVEL``).
    """
    if level is None:
        level = log_cfg.level
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger()
    handler = _own_handler(root)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(log_cfg.fmt, datefmt=log_cfg.datefmt))
        root.addHandler(handler)

    root.setLevel(level)
    handler.setLevel(level)

    for name in log_cfg.quiet_loggers:
        logging.getLogger(name).setLevel(log_cfg.quiet_level)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger, installing the handler on first use."""
    if _own_handler(logging.getLogger()) is None:
        setup_logging()
    return logging.getLogger(name)

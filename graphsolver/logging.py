"""Logging utilities for graphsolver.

Provides namespaced loggers with a shared configuration so that graph
construction and solver runs can be traced without touching the root logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Defaults applied to loggers created after configuration
_DEFAULT_LEVEL = logging.WARNING
_default_stream: Optional[TextIO] = None
_default_format = _DEFAULT_FORMAT

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(_default_stream if _default_stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_default_format))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached to avoid duplicate handlers. The logger name should
    typically be `__name__` from the calling module.

    Args:
        name: Logger name (typically `__name__`). If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from graphsolver.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Relaxing %d edges", 12)
    """
    if name is None:
        name = "graphsolver"

    logger_name = name if name == "graphsolver" or name.startswith("graphsolver.") else f"graphsolver.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL))
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all graphsolver loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').

    Example:
        >>> import logging
        >>> from graphsolver.logging import set_log_level
        >>> set_log_level(logging.DEBUG)
    """
    global _DEFAULT_LEVEL
    level = _resolve_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure logging for graphsolver.

    Replaces the handlers of every existing graphsolver logger and sets the
    defaults used for loggers created afterwards. It should typically be
    called once at application startup.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).
    """
    global _DEFAULT_LEVEL, _default_stream, _default_format
    _DEFAULT_LEVEL = _resolve_level(level)
    _default_stream = stream
    _default_format = format_string if format_string is not None else _DEFAULT_FORMAT

    for logger in _loggers.values():
        logger.setLevel(_DEFAULT_LEVEL)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL))

"""Logging utilities for numlabs.

Every module asks for its logger through :func:`get_logger` so that the whole
library shares one namespace (``numlabs.*``), one format and one level knob.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# current settings; configure_logging replaces them
_level = _DEFAULT_LEVEL
_format = _DEFAULT_FORMAT
_stream: Optional[object] = None

_loggers: dict[str, logging.Logger] = {}


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached to avoid duplicate handlers. The logger name should
    typically be `__name__` from the calling module.

    Args:
        name: Logger name (typically `__name__`). If None, returns the
            package logger ``numlabs``.

    Returns:
        Configured logger instance.

    Example:
        >>> from numlabs.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Sampling Runge function on 16 nodes")
    """
    if name is None:
        name = "numlabs"

    if name == "numlabs" or name.startswith("numlabs."):
        logger_name = name
    else:
        logger_name = f"numlabs.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_level)

        handler = logging.StreamHandler(sys.stderr if _stream is None else _stream)
        handler.setLevel(_level)
        handler.setFormatter(logging.Formatter(_format))

        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return int(level)


def set_log_level(level: int | str) -> None:
    """Set the logging level for all numlabs loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').

    Example:
        >>> from numlabs.logging import set_log_level
        >>> set_log_level("DEBUG")
    """
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    global _level
    _level = level


def get_log_level() -> int:
    """Level applied to numlabs loggers, including ones not created yet."""
    return _level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for numlabs.

    Replaces the handlers of every logger created so far; loggers created
    later get the same level, format and stream. Call it once at application
    startup (the command-line front-end does this from ``--log-level``).

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).
    """
    level = _coerce_level(level)

    if format_string is None:
        format_string = _DEFAULT_FORMAT

    global _level, _format, _stream
    _level = level
    _format = format_string
    _stream = stream

    formatter = logging.Formatter(format_string)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(sys.stderr if stream is None else stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)


__all__ = ["get_logger", "set_log_level", "get_log_level", "configure_logging"]

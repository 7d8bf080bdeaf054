"""Application logger with a development-style console format."""

from __future__ import annotations

import logging

_logger = logging.getLogger("nietzsche")

if not _logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s\t%(levelname)s\t%(filename)s:%(lineno)d\t%(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    )
    _logger.addHandler(_handler)
    _logger.setLevel(logging.DEBUG)


def info(message: str) -> None:
    """Log at INFO level, attributed to the caller."""
    _logger.info(message, stacklevel=2)


def debug(message: str) -> None:
    """Log at DEBUG level, attributed to the caller."""
    _logger.debug(message, stacklevel=2)


def warn(message: str) -> None:
    """Log at WARNING level, attributed to the caller."""
    _logger.warning(message, stacklevel=2)


def error(message: object) -> None:
    """Log an exception's text or a string at ERROR level; other values are ignored."""
    if isinstance(message, BaseException):
        _logger.error(str(message), stacklevel=2)
    elif isinstance(message, str):
        _logger.error(message, stacklevel=2)
"""Logging setup for the lagindex package logger."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "lagindex"
DEFAULT_FORMAT = "%(levelname)s:%(name)s:%(message)s"


class _LagIndexHandler(logging.StreamHandler):
    """Stream handler installed by :func:`configure_logging`."""


def configure_logging(
    level: int | str = logging.WARNING,
    *,
    fmt: str = DEFAULT_FORMAT,
    name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """Attach a stderr handler to the ``name`` logger and set its level.

    Repeated calls reuse the handler installed by an earlier call and only
    update its format, so handlers added by the application are left alone.
    ``level`` may be a number or a level name such as ``"debug"``.
    """

    if isinstance(level, str):
        level = level.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {level}")

    logger = logging.getLogger(name)
    handler = next(
        (h for h in logger.handlers if isinstance(h, _LagIndexHandler)), None
    )
    if handler is None:
        handler = _LagIndexHandler()
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(fmt))
    logger.setLevel(level)
    return logger

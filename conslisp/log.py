"""Logging setup for conslisp.

Every module logs through ``logging.getLogger(__name__)``; the package logger
only carries a NullHandler until a host calls :func:`configure_logging`.
"""

from __future__ import annotations

import logging

from conslisp import config

_ROOT = "conslisp"

logging.getLogger(_ROOT).addHandler(logging.NullHandler())


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level.

    `level` defaults to CONSLISP_LOG_LEVEL. Calling this again replaces the
    handler installed by the previous call.
    """
    logger = logging.getLogger(_ROOT)
    if level is None:
        level = config.get_log_level()
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_conslisp_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.get_log_format()))
    handler._conslisp_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger

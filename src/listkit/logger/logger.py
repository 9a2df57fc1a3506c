"""Logger configuration for listkit.

Every module logs through a child of the ``listkit`` logger so a single
handler, configured from :data:`listkit.core.config.settings`, serves the
whole package.
"""

import logging
import sys
import typing as tp

from listkit.core.config import settings

__all__ = ["logger", "setup_logger", "get_logger"]

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "listkit",
    level: str | None = None,
    format_string: str | None = None,
    stream: tp.Optional[tp.TextIO] = None,
) -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        name: Logger name, ``listkit`` for the package root.
        level: Log level name. Defaults to ``settings.LOG_LEVEL``.
        format_string: Formatter string. Defaults to ``settings.LOG_FORMAT``.
        stream: Output stream for the handler. Defaults to stdout.

    Returns:
        The configured logger. A logger that already has handlers is
        returned untouched.
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or settings.LOG_FORMAT

    configured = logging.getLogger(name)

    if not configured.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt=DATE_FORMAT))
        configured.addHandler(handler)
        configured.setLevel(getattr(logging, level.upper()))
        configured.propagate = False

    return configured


def get_logger(module: str) -> logging.Logger:
    """Return a child of the package logger for ``module``.

    ``listkit.functional.search`` and ``functional.search`` both resolve to
    the ``listkit.functional.search`` logger; ``listkit`` itself is the
    package logger.
    """
    if module == "listkit":
        return logger
    suffix = module.removeprefix("listkit.")
    return logger.getChild(suffix)


logger = setup_logger()

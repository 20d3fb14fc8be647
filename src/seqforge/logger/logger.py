"""Package-wide logging for seqforge.

One handler is attached to the ``seqforge`` logger; modules log through
children of it (``seqforge.functional.invoke`` and so on) obtained with
:func:`get_logger`, so the whole package is tuned from one place. The level
defaults to ``settings.LOG_LEVEL`` (the ``LOG_LEVEL`` environment variable).
"""

import logging
import sys
import typing as tp

from seqforge.core.config import settings

__all__ = ["ROOT_NAME", "logger", "setup_logger", "get_logger"]

ROOT_NAME = "seqforge"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    level: str | None = None,
    format_string: str | None = None,
    stream: tp.Optional[tp.TextIO] = None,
) -> logging.Logger:
    """
    Configure and return the package logger.

    Calling it again only adjusts the level; the handler is attached once.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to ``settings.LOG_LEVEL``.
        format_string: Record format, used when the handler is created.
        stream: Output stream for the handler, stdout by default.

    Returns:
        The ``seqforge`` logger.
    """
    level = (level or settings.LOG_LEVEL).upper()
    package_logger = logging.getLogger(ROOT_NAME)

    if not package_logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        package_logger.addHandler(handler)
        package_logger.propagate = False

    package_logger.setLevel(getattr(logging, level))
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Child of the package logger for a module, e.g. ``get_logger(__name__)``."""
    if name == ROOT_NAME or name.startswith(ROOT_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_NAME}.{name}")


logger = setup_logger()

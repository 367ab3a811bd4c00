"""Logging helpers for streammark.

All loggers live under the "streammark" namespace. The library attaches a
NullHandler to that root and never installs real handlers; applications
opt in with logging configuration of their own:

    logging.getLogger("streammark").setLevel(logging.DEBUG)

Streamed documents grow on every chunk, so log records quote only a short
preview of the text involved rather than the whole document.

Example:
    >>> from streammark.utils.logger import get_logger, preview
    >>> logger = get_logger(__name__)
    >>> logger.debug("Healing %s", preview("This is **bold"))
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "streammark"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the streammark namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'streammark.mymodule'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def preview(text: str, limit: int = 40) -> str:
    """Quoted tail of streamed text for log messages.

    The tail is shown because that is where a stream is still changing.

    Example:
        >>> preview("x" * 50, limit=8)
        "'...xxxxxxxx' (50 chars)"
        >>> preview("short")
        "'short'"
    """
    if len(text) <= limit:
        return repr(text)
    return f"{'...' + text[-limit:]!r} ({len(text)} chars)"

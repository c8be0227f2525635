"""Logging configuration for the random generation layer.

All loggers live under the ``splitrand`` namespace so applications can tune
this library independently of their own logging.
"""

from __future__ import annotations

import logging

__all__ = [
    "LOGGER_NAMESPACE",
    "get_logger",
    "configure_logging",
]

LOGGER_NAMESPACE = "splitrand"

_FORMAT = "[%(name)s] %(levelname)s %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the library namespace.

    Args:
        name: Dotted component name, e.g. ``"bridge.shared"``.
    """
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a stream handler to the library root logger and set its level.

    Calling this more than once only updates the level.

    Args:
        level: A logging level number or name (e.g. ``"DEBUG"``).

    Returns:
        The library root logger.
    """
    root = logging.getLogger(LOGGER_NAMESPACE)
    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)
    if not any(getattr(h, "_splitrand", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._splitrand = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    return root

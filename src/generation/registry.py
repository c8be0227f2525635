"""Registry of per-type generation instances.

Each generatable type registers a RandomInstance (how to draw a bounded
value) and optionally a DefaultRange (bounds used when none are given).
Lookup is keyed by the requested type object, so ``generate(Nat)`` and
``generate(int)`` dispatch to different instances even though every Nat is
also an int.

Adding a new type:
1. Implement random_r(lo, hi) returning a Rand (and default_range() if the
   type has natural bounds)
2. Register it with register_random(tp, instance) and
   register_default_range(tp, instance)
3. It becomes available through generate / generate_bounded

Example:
    >>> from generation.registry import get_default_range
    >>> get_default_range(bool).default_range()
    (False, True)
"""

from __future__ import annotations

from typing import Any

from core.logging import get_logger
from core.protocols import DefaultRange, RandomInstance

__all__ = [
    "RANDOM_INSTANCES",
    "DEFAULT_RANGES",
    "register_random",
    "get_random",
    "register_default_range",
    "get_default_range",
]

logger = get_logger("generation.registry")

# Global registries
RANDOM_INSTANCES: dict[type, RandomInstance[Any]] = {}
DEFAULT_RANGES: dict[type, DefaultRange[Any]] = {}


def _available(registry: dict[type, Any]) -> str:
    return ", ".join(sorted(tp.__name__ for tp in registry))


def register_random(tp: type, instance: RandomInstance[Any]) -> None:
    """Register how to generate bounded values of ``tp``.

    Args:
        tp: The type being generated.
        instance: Object implementing random_r(lo, hi).

    Raises:
        ValueError: If tp is already registered.
    """
    if tp in RANDOM_INSTANCES:
        raise ValueError(f"Random instance for '{tp.__name__}' is already registered")
    RANDOM_INSTANCES[tp] = instance
    logger.debug("registered random instance for %s", tp.__name__)


def get_random(tp: type) -> RandomInstance[Any]:
    """Get the generation instance registered for ``tp``.

    Raises:
        KeyError: If tp is not registered.
    """
    if tp not in RANDOM_INSTANCES:
        raise KeyError(f"No random instance for '{tp.__name__}'. Available: {_available(RANDOM_INSTANCES)}")
    return RANDOM_INSTANCES[tp]


def register_default_range(tp: type, instance: DefaultRange[Any]) -> None:
    """Register the default bounds of ``tp``.

    Raises:
        ValueError: If tp is already registered.
    """
    if tp in DEFAULT_RANGES:
        raise ValueError(f"Default range for '{tp.__name__}' is already registered")
    DEFAULT_RANGES[tp] = instance
    logger.debug("registered default range for %s", tp.__name__)


def get_default_range(tp: type) -> DefaultRange[Any]:
    """Get the default-range instance registered for ``tp``.

    Raises:
        KeyError: If tp is not registered.
    """
    if tp not in DEFAULT_RANGES:
        raise KeyError(f"No default range for '{tp.__name__}'. Available: {_available(DEFAULT_RANGES)}")
    return DEFAULT_RANGES[tp]

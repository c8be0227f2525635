"""Random computation module.

This package contains the Rand computation type and the primitives and
combinators built on it:
- Rand: deferred (value, generator) computation with map/bind
- draw_raw, fork, raw_range: primitives over any RandomGen
- sequence, with_fork, list_of, sized_list_of: composition helpers
"""

from __future__ import annotations

from rand.computation import (
    Rand,
    draw_raw,
    fork,
    list_of,
    raw_range,
    sequence,
    sized_list_of,
    with_fork,
)

__all__ = [
    "Rand",
    "draw_raw",
    "fork",
    "raw_range",
    "sequence",
    "with_fork",
    "list_of",
    "sized_list_of",
]

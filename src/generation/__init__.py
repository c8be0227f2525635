"""Per-type generation module.

This package contains:
- The registry mapping types to generation and default-range instances
- Instances for bool, Nat, Fin and int (registered on import)
- Entry points: generate, generate_bounded, generate_index
"""

from __future__ import annotations

from generation.api import generate, generate_bounded, generate_index
from generation.instances import BoolRandom, FinRandom, IntRandom, NatRandom
from generation.registry import (
    get_default_range,
    get_random,
    register_default_range,
    register_random,
)

__all__ = [
    "generate",
    "generate_bounded",
    "generate_index",
    "BoolRandom",
    "NatRandom",
    "FinRandom",
    "IntRandom",
    "register_random",
    "get_random",
    "register_default_range",
    "get_default_range",
]

"""Entry points for generating values by type.

Example:
    >>> from bridge.shared import run_with_seed
    >>> from core.types import Nat
    >>> run_with_seed(42, generate_bounded(Nat, 0, 9))
    Nat(9)
"""

from __future__ import annotations

from typing import Any, TypeVar

from core.types import Fin
from generation.registry import get_default_range, get_random
from rand.computation import Rand, draw_raw

__all__ = [
    "generate",
    "generate_bounded",
    "generate_index",
]

_T = TypeVar("_T")


def generate(tp: type[_T]) -> Rand[Any, _T]:
    """Generate a value of ``tp`` within its default range.

    Raises:
        KeyError: If tp has no registered default range or random instance.
    """
    lo, hi = get_default_range(tp).default_range()
    return get_random(tp).random_r(lo, hi)


def generate_bounded(tp: type[_T], lo: _T, hi: _T) -> Rand[Any, _T]:
    """Generate a value of ``tp`` within the inclusive bounds [lo, hi].

    Only signed integers put the bounds in order; for other types lo <= hi is
    the caller's responsibility.

    Raises:
        KeyError: If tp has no registered random instance.
    """
    return get_random(tp).random_r(lo, hi)


def generate_index(n: int) -> Rand[Any, Fin]:
    """Generate an index in [0, n] as a ``Fin`` of size n + 1.

    One raw draw is narrowed modulo n + 1.

    Raises:
        ValueError: If n is negative.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return draw_raw().map(lambda raw: Fin.of_nat(raw, n + 1))

"""Generation instances for the built-in types.

This module provides:
- BoolRandom: booleans from the parity of one raw draw
- NatRandom: non-negative integers via the generic bounded draw
- FinRandom: bounded indices, drawn as integers then narrowed
- IntRandom: signed integers, tolerant of reversed bounds

Importing this module registers every instance (and the default ranges of
bool, Nat and int) with generation.registry.

Bounds are only put in order for signed integers. For the other types a
caller passing lo > hi gets whatever the underlying draw does with them.
"""

from __future__ import annotations

from typing import Any

from core.protocols import RandomGen
from core.rng import rand_nat
from core.types import Fin, Nat
from generation.registry import register_default_range, register_random
from rand.computation import Rand

__all__ = [
    "NAT_DEFAULT_RANGE",
    "INT_DEFAULT_RANGE",
    "BoolRandom",
    "NatRandom",
    "FinRandom",
    "IntRandom",
]

NAT_DEFAULT_RANGE = (Nat(0), Nat(2**32 - 1))
INT_DEFAULT_RANGE = (-(2**31), 2**31 - 1)


class BoolRandom:
    """Booleans.

    (False, True) in either order means "any boolean" and yields the parity
    of one raw draw. When lo == hi the draw still happens (so the generator
    advances the same way) but lo is returned unchanged.
    """

    def random_r(self, lo: bool, hi: bool) -> Rand[Any, bool]:
        def step(gen: RandomGen) -> tuple[bool, Any]:
            raw, gen = gen.next()
            if lo == hi:
                return lo, gen
            return raw % 2 == 1, gen

        return Rand(step)

    def default_range(self) -> tuple[bool, bool]:
        return False, True


class NatRandom:
    """Non-negative integers drawn directly with rand_nat."""

    def random_r(self, lo: int, hi: int) -> Rand[Any, Nat]:
        def step(gen: RandomGen) -> tuple[Nat, Any]:
            value, gen = rand_nat(gen, lo, hi)
            return Nat(value), gen

        return Rand(step)

    def default_range(self) -> tuple[Nat, Nat]:
        return NAT_DEFAULT_RANGE


class FinRandom:
    """Bounded indices.

    Draws an integer between the two index values and narrows it into the
    index type of ``lo``.
    """

    def random_r(self, lo: Fin, hi: Fin) -> Rand[Any, Fin]:
        if lo.size != hi.size:
            raise TypeError(f"Fin bounds have different sizes: {lo.size} and {hi.size}")
        size = lo.size

        def step(gen: RandomGen) -> tuple[Fin, Any]:
            value, gen = rand_nat(gen, lo.val, hi.val)
            return Fin.of_nat(value, size), gen

        return Rand(step)


class IntRandom:
    """Signed integers.

    Bounds are swapped if given in the wrong order. The draw is made over
    [0, hi - lo] and shifted back by lo, so negative bounds work the same as
    positive ones.
    """

    def random_r(self, lo: int, hi: int) -> Rand[Any, int]:
        if lo > hi:
            lo, hi = hi, lo
        span = hi - lo

        def step(gen: RandomGen) -> tuple[int, Any]:
            offset, gen = rand_nat(gen, 0, span)
            return lo + offset, gen

        return Rand(step)

    def default_range(self) -> tuple[int, int]:
        return INT_DEFAULT_RANGE


_BOOL = BoolRandom()
_NAT = NatRandom()
_INT = IntRandom()

register_random(bool, _BOOL)
register_random(Nat, _NAT)
register_random(Fin, FinRandom())
register_random(int, _INT)

register_default_range(bool, _BOOL)
register_default_range(Nat, _NAT)
register_default_range(int, _INT)

"""State-threading random computations.

This module provides:
- Rand: a deferred, replayable function from a generator to (value, generator)
- Primitives: draw_raw, fork, raw_range
- Combinators: sequence, with_fork, list_of, sized_list_of

A Rand does nothing until it is run. Running the same Rand twice on the same
generator value gives the same (value, generator) pair, provided the
generator itself is pure.

Example:
    >>> from generators import mk_std_gen
    >>> pair = draw_raw().bind(lambda a: draw_raw().map(lambda b: (a, b)))
    >>> pair.eval(mk_std_gen(42))
    (1679910, 620339110)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from core.protocols import RandomGen
from core.rng import rand_nat
from core.types import RawRange, RawValue

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

_G = TypeVar("_G", bound=RandomGen)
_A = TypeVar("_A")
_B = TypeVar("_B")


@dataclass(frozen=True, slots=True)
class Rand(Generic[_G, _A]):
    """A random computation producing ``_A`` while threading a generator ``_G``.

    Attributes:
        step: Function taking a generator and returning (value, successor).
    """

    step: Callable[[_G], tuple[_A, _G]]

    def run(self, gen: _G) -> tuple[_A, _G]:
        """Run the computation, returning the value and the final generator."""
        return self.step(gen)

    def eval(self, gen: _G) -> _A:
        """Run the computation and keep only the value."""
        return self.step(gen)[0]

    def exec(self, gen: _G) -> _G:
        """Run the computation and keep only the final generator."""
        return self.step(gen)[1]

    @staticmethod
    def pure(value: _B) -> Rand[Any, _B]:
        """Computation returning ``value`` without touching the generator."""
        return Rand(lambda gen: (value, gen))

    def map(self, fn: Callable[[_A], _B]) -> Rand[_G, _B]:
        step = self.step

        def mapped(gen: _G) -> tuple[_B, _G]:
            value, gen = step(gen)
            return fn(value), gen

        return Rand(mapped)

    def bind(self, fn: Callable[[_A], Rand[_G, _B]]) -> Rand[_G, _B]:
        """Feed this computation's value into ``fn`` and run the result."""
        step = self.step

        def bound(gen: _G) -> tuple[_B, _G]:
            value, gen = step(gen)
            return fn(value).step(gen)

        return Rand(bound)

    def then(self, other: Rand[_G, _B]) -> Rand[_G, _B]:
        """Run this computation for its effect on the generator, then ``other``."""
        return self.bind(lambda _: other)


# =============================================================================
# Primitives
# =============================================================================


def _draw_raw(gen: _G) -> tuple[RawValue, _G]:
    return gen.next()


def draw_raw() -> Rand[Any, RawValue]:
    """Draw the next raw value from the held generator."""
    return Rand(_draw_raw)


def _fork(gen: _G) -> tuple[_G, _G]:
    kept, handed_off = gen.split()
    return handed_off, kept


def fork() -> Rand[Any, Any]:
    """Split the held generator.

    The first branch becomes the computation's continuing state; the second
    is returned as an ordinary value for a sub-computation to consume.
    """
    return Rand(_fork)


def _raw_range(gen: _G) -> tuple[RawRange, _G]:
    return gen.range(), gen


def raw_range() -> Rand[Any, RawRange]:
    """Report the generator's inclusive raw bounds without advancing it."""
    return Rand(_raw_range)


# =============================================================================
# Combinators
# =============================================================================


def sequence(rands: Sequence[Rand[_G, _A]]) -> Rand[_G, list[_A]]:
    """Run computations one after another on a single stream."""
    rands = list(rands)

    def run_all(gen: _G) -> tuple[list[_A], _G]:
        values: list[_A] = []
        for rand in rands:
            value, gen = rand.step(gen)
            values.append(value)
        return values, gen

    return Rand(run_all)


def with_fork(rand: Rand[_G, _A]) -> Rand[_G, _A]:
    """Run ``rand`` on a forked sub-generator.

    The sub-generator's final state is dropped, so however many draws
    ``rand`` makes, the caller's stream advances by exactly one split.
    """
    return fork().map(rand.eval)


def list_of(rand: Rand[_G, _A], length: int) -> Rand[_G, list[_A]]:
    """Build ``length`` values, each drawn from its own forked stream.

    Raises:
        ValueError: If length is negative.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    return sequence([with_fork(rand)] * length)


def sized_list_of(rand: Rand[_G, _A], max_length: int) -> Rand[_G, list[_A]]:
    """Draw a length in [0, max_length], then that many independent values.

    The length comes from the caller's stream and every element from a fork,
    so the length draw does not correlate with the elements.

    Raises:
        ValueError: If max_length is negative.
    """
    if max_length < 0:
        raise ValueError(f"max_length must be non-negative, got {max_length}")

    def draw_length(gen: _G) -> tuple[int, _G]:
        return rand_nat(gen, 0, max_length)

    return Rand(draw_length).bind(lambda n: list_of(rand, n))

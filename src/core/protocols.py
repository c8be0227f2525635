"""Protocol definitions for the random generation layer.

This module contains Protocol classes defining interfaces for:
- RandomGen: pure pseudo-random generators that can advance and split
- RandomInstance: per-type generation of a value within inclusive bounds
- DefaultRange: per-type default bounds used when none are given

Algorithms are written against type variables bound to these protocols, so
any generator satisfying RandomGen can be plugged in without changes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

from core.types import RawRange, RawValue

if TYPE_CHECKING:
    from rand.computation import Rand

__all__ = [
    "G",
    "A",
    "A_co",
    "RandomGen",
    "RandomInstance",
    "DefaultRange",
]

G = TypeVar("G", bound="RandomGen")
A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)

_Gen = TypeVar("_Gen", bound="RandomGen")


@runtime_checkable
class RandomGen(Protocol):
    """Protocol for pure pseudo-random generators.

    A generator value is immutable. Every operation that would advance it
    returns a successor instead; the receiver must not be used again once a
    successor has been produced from it (use-after-advance would replay
    values already handed out).

    Contract:
    - next() is a pure function of the generator value
    - range() is constant per generator type and does not advance
    - split() returns two generators independent of each other and of the
      parent's own continuation
    """

    def next(self: _Gen) -> tuple[RawValue, _Gen]:
        """Advance the generator.

        Returns:
            A tuple of (raw_value, successor). raw_value lies within range().
        """
        ...

    def range(self) -> RawRange:
        """Return the inclusive (min, max) bounds of values produced by next()."""
        ...

    def split(self: _Gen) -> tuple[_Gen, _Gen]:
        """Derive two statistically independent generators.

        Returns:
            A tuple of two generators. Neither is a copy of the receiver.
        """
        ...


@runtime_checkable
class RandomInstance(Protocol[A_co]):
    """Protocol for types that can generate a bounded random instance of themselves.

    Implementations are registered per type (see generation.registry) and
    selected by the type requested, never by inspecting values.

    Type Parameters:
        A_co: The type of value produced (covariant).
    """

    def random_r(self, lo: Any, hi: Any) -> Rand[Any, A_co]:
        """Build a computation drawing a value within [lo, hi].

        Args:
            lo: Inclusive lower bound.
            hi: Inclusive upper bound.

        Returns:
            A Rand computation yielding a value of the instance's type.
        """
        ...


@runtime_checkable
class DefaultRange(Protocol[A_co]):
    """Protocol supplying the implicit bounds of a type.

    Type Parameters:
        A_co: The bounded type (covariant).
    """

    def default_range(self) -> tuple[A_co, A_co]:
        """Return the (lo, hi) bounds used when the caller gives none."""
        ...

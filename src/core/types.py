"""Core type definitions for the random generation layer.

This module contains:
- Type aliases for raw generator output and seeds
- Nat: a non-negative integer type
- Fin: a bounded index type with values in [0, size)
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "RawValue",
    "RawRange",
    "Seed",
    "Nat",
    "Fin",
]

# Raw value produced by a generator's next()
RawValue = int

# Inclusive (min, max) bounds of a generator's raw output
RawRange = tuple[int, int]

# Integer seed used to build a fresh generator
Seed = int


class Nat(int):
    """Non-negative integer.

    Behaves exactly like ``int`` but refuses negative values on construction,
    so a value typed as ``Nat`` is known to be >= 0.

    Example:
        >>> Nat(3) + 1
        4
        >>> Nat(-1)
        Traceback (most recent call last):
        ...
        ValueError: Nat must be non-negative, got -1
    """

    __slots__ = ()

    def __new__(cls, value: int = 0) -> Nat:
        value = int(value)
        if value < 0:
            raise ValueError(f"Nat must be non-negative, got {value}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Nat({int(self)})"


@dataclass(frozen=True, slots=True)
class Fin:
    """Index value in the half-open range [0, size).

    Attributes:
        val: The index value.
        size: Number of inhabitants of this index type (must be positive).
    """

    val: int
    size: int

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Fin size must be positive, got {self.size}")
        if not 0 <= self.val < self.size:
            raise ValueError(f"Fin value {self.val} out of range [0, {self.size})")

    @classmethod
    def of_nat(cls, n: int, size: int) -> Fin:
        """Narrow a non-negative integer into ``Fin(size)`` by wrapping modulo size."""
        if size <= 0:
            raise ValueError(f"Fin size must be positive, got {size}")
        return cls(n % size, size)

    @classmethod
    def last(cls, size: int) -> Fin:
        """Return the largest index of ``Fin(size)``."""
        return cls(size - 1, size)

    def __int__(self) -> int:
        return self.val

    def __index__(self) -> int:
        return self.val

"""Default generator: L'Ecuyer's combined linear congruential generator.

Two multiplicative LCGs with moduli 2147483563 and 2147483399 run side by
side; their difference is the output. Each step uses Schrage's decomposition so
intermediate products stay within 32-bit signed range.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.types import RawRange, RawValue, Seed

__all__ = [
    "STD_RANGE",
    "StdGen",
    "mk_std_gen",
]

_M1 = 2147483563
_M2 = 2147483399

STD_RANGE: RawRange = (1, 2147483562)


@dataclass(frozen=True, slots=True)
class StdGen:
    """Immutable state of the default generator.

    Attributes:
        s1: State of the first LCG, in [1, 2147483562].
        s2: State of the second LCG, in [1, 2147483398].
    """

    s1: int
    s2: int

    def next(self) -> tuple[RawValue, StdGen]:
        k = self.s1 // 53668
        s1 = 40014 * (self.s1 - k * 53668) - k * 12211
        if s1 < 0:
            s1 += _M1
        k2 = self.s2 // 52774
        s2 = 40692 * (self.s2 - k2 * 52774) - k2 * 3791
        if s2 < 0:
            s2 += _M2
        z = s1 - s2
        z = z + (_M1 - 1) if z < 1 else z % (_M1 - 1)
        return z, StdGen(s1, s2)

    def range(self) -> RawRange:
        return STD_RANGE

    def split(self) -> tuple[StdGen, StdGen]:
        """Split into two generators offset in opposite directions.

        The left branch bumps the first component and takes the second from
        one step ahead; the right branch does the mirror image.
        """
        new_s1 = 1 if self.s1 == _M1 - 1 else self.s1 + 1
        new_s2 = _M2 - 1 if self.s2 == 1 else self.s2 - 1
        _, ahead = self.next()
        return StdGen(new_s1, ahead.s2), StdGen(ahead.s1, new_s2)

    def __repr__(self) -> str:
        return f"StdGen({self.s1}, {self.s2})"


def mk_std_gen(seed: Seed = 0) -> StdGen:
    """Build the default generator from an integer seed.

    Equal seeds give equal generators, which is what makes seeded runs
    replayable.

    Example:
        >>> mk_std_gen(42)
        StdGen(43, 1)
    """
    q = seed // (_M1 - 1)
    s1 = seed % (_M1 - 1)
    s2 = q % (_M2 - 1)
    return StdGen(s1 + 1, s2 + 1)

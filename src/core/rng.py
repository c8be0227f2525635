"""Generator-agnostic bounded draws.

This module contains:
- rand_nat: uniform-ish draw of a non-negative integer in [lo, hi]
- rand_bool: a boolean from the parity of one raw draw

Both functions take any RandomGen and return the value together with the
successor generator; the input generator is never reused.
"""

from __future__ import annotations

from core.protocols import G

__all__ = [
    "OVERSAMPLE_FACTOR",
    "rand_nat",
    "rand_bool",
]

# Raw draws are accumulated until they cover (hi - lo + 1) * OVERSAMPLE_FACTOR
# values, which keeps the modulo bias below 1 / OVERSAMPLE_FACTOR.
OVERSAMPLE_FACTOR = 1000


def _accumulate(gen: G, gen_lo: int, gen_mag: int, target: int) -> tuple[int, G]:
    """Combine raw draws into one integer whose magnitude reaches ``target``."""
    value = 0
    remaining = target
    while remaining > 0:
        raw, gen = gen.next()
        value = value * gen_mag + (raw - gen_lo)
        remaining = max(remaining // gen_mag - 1, 0)
    return value, gen


def rand_nat(gen: G, lo: int, hi: int) -> tuple[int, G]:
    """Draw an integer in the inclusive range [lo, hi].

    Bounds given in the wrong order are swapped. For small ranges relative to
    the generator's raw range this costs exactly one call to ``next``.

    Args:
        gen: Generator to draw from.
        lo: Inclusive lower bound.
        hi: Inclusive upper bound.

    Returns:
        A tuple of (value, successor generator).
    """
    if lo > hi:
        lo, hi = hi, lo
    gen_lo, gen_hi = gen.range()
    gen_mag = gen_hi - gen_lo
    span = hi - lo + 1
    value, gen = _accumulate(gen, gen_lo, gen_mag, span * OVERSAMPLE_FACTOR)
    return lo + value % span, gen


def rand_bool(gen: G) -> tuple[bool, G]:
    """Draw a boolean from the parity of a single raw value."""
    raw, gen = gen.next()
    return raw % 2 == 1, gen

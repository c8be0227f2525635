"""Running random computations against a seed or the process-wide generator.

This module provides:
- run_with_seed: pure execution on a fresh generator built from a seed
- run_shared: execution against the process-wide generator slot
- SharedGenSlot / reseed_shared: the slot itself

run_with_seed is the primary interface. It touches no shared state, so any
number of callers can use it concurrently, each with its own seed.

run_shared performs one unlocked read and one unlocked write of the slot.
Two callers that interleave between those steps start from the same
generator and produce correlated (possibly identical) values. Nothing
crashes; the randomness is simply worse. Callers who need independence
under concurrency must serialize access themselves or avoid the slot.
"""

from __future__ import annotations

from typing import Any, TypeVar

from core.config import DEFAULT_SEED
from core.logging import get_logger
from core.types import Seed
from generators.std_gen import StdGen, mk_std_gen
from rand.computation import Rand

__all__ = [
    "SharedGenSlot",
    "SHARED_SLOT",
    "run_shared",
    "reseed_shared",
    "run_with_seed",
]

logger = get_logger("bridge.shared")

_A = TypeVar("_A")


class SharedGenSlot:
    """A mutable cell holding a default generator.

    Attributes:
        seed: Seed of the most recent (re)initialisation.
    """

    def __init__(self, seed: Seed = DEFAULT_SEED) -> None:
        self.seed = seed
        self._gen = mk_std_gen(seed)

    def read(self) -> StdGen:
        return self._gen

    def write(self, gen: StdGen) -> None:
        self._gen = gen

    def reseed(self, seed: Seed) -> None:
        """Replace the held generator with a fresh one built from ``seed``."""
        self.seed = seed
        self._gen = mk_std_gen(seed)

    def __repr__(self) -> str:
        return f"SharedGenSlot(seed={self.seed}, gen={self._gen!r})"


# Process-wide slot, seeded with a fixed constant so default runs repeat
SHARED_SLOT = SharedGenSlot(DEFAULT_SEED)


def run_shared(
    rand: Rand[StdGen, _A],
    *,
    unsynchronized: bool = False,
    slot: SharedGenSlot | None = None,
) -> _A:
    """Run ``rand`` against the shared generator slot and store the successor.

    Args:
        rand: The computation to run.
        unsynchronized: Must be True. Confirms the caller accepts an unlocked
            read-modify-write of the slot.
        slot: Slot to use instead of the process-wide one.

    Returns:
        The computation's value.

    Raises:
        ValueError: If unsynchronized is not True.
    """
    if not unsynchronized:
        raise ValueError(
            "run_shared reads and writes the shared generator without locking; "
            "pass unsynchronized=True to accept this, or use run_with_seed"
        )
    target = SHARED_SLOT if slot is None else slot
    value, gen = rand.run(target.read())
    target.write(gen)
    logger.debug("run_shared advanced slot to %r", gen)
    return value


def reseed_shared(seed: Seed, *, slot: SharedGenSlot | None = None) -> None:
    """Reinitialise the shared slot (or ``slot``) from ``seed``."""
    target = SHARED_SLOT if slot is None else slot
    target.reseed(seed)
    logger.debug("reseeded shared slot with %d", seed)


def run_with_seed(seed: Seed, rand: Rand[Any, _A]) -> _A:
    """Run ``rand`` on a fresh default generator built from ``seed``.

    The final generator is discarded and no shared state is read or written,
    so the same seed and computation always give the same value.
    """
    return rand.eval(mk_std_gen(seed))

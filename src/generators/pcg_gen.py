"""PCG64-backed generator built on numpy's bit generators.

numpy's BitGenerator objects are mutable, so PCGGen keeps only the plain
(state, inc) integers and rebuilds a PCG64 around them for every step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from core.types import RawRange, RawValue, Seed

__all__ = [
    "PCG_RANGE",
    "PCGGen",
]

PCG_RANGE: RawRange = (0, 2**64 - 1)


def _restore(state: int, inc: int) -> np.random.PCG64:
    bit_gen = np.random.PCG64(0)
    bit_gen.state = {
        "bit_generator": "PCG64",
        "state": {"state": state, "inc": inc},
        "has_uint32": 0,
        "uinteger": 0,
    }
    return bit_gen


@dataclass(frozen=True, slots=True)
class PCGGen:
    """Immutable PCG64 generator state.

    Attributes:
        state: 128-bit LCG state.
        inc: 128-bit stream increment (always odd).
    """

    state: int
    inc: int

    @classmethod
    def from_seed(cls, seed: Seed | np.random.SeedSequence) -> PCGGen:
        """Build a generator from a seed or a numpy SeedSequence.

        Raises:
            ValueError: If seed is a negative integer.
        """
        return cls._capture(np.random.PCG64(seed))

    @classmethod
    def _capture(cls, bit_gen: np.random.PCG64) -> PCGGen:
        inner: dict[str, Any] = bit_gen.state["state"]
        return cls(int(inner["state"]), int(inner["inc"]))

    def next(self) -> tuple[RawValue, PCGGen]:
        bit_gen = _restore(self.state, self.inc)
        raw = int(bit_gen.random_raw())
        return raw, PCGGen._capture(bit_gen)

    def range(self) -> RawRange:
        return PCG_RANGE

    def split(self) -> tuple[PCGGen, PCGGen]:
        # Children of a SeedSequence are independent streams by construction
        left, right = np.random.SeedSequence([self.state, self.inc]).spawn(2)
        return PCGGen.from_seed(left), PCGGen.from_seed(right)

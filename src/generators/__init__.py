"""Concrete generators satisfying the RandomGen protocol.

Available generators:
- StdGen: L'Ecuyer combined LCG, the default (see mk_std_gen)
- PCGGen: PCG64 from numpy, held as immutable state
"""

from __future__ import annotations

from generators.pcg_gen import PCG_RANGE, PCGGen
from generators.std_gen import STD_RANGE, StdGen, mk_std_gen

__all__ = [
    "StdGen",
    "mk_std_gen",
    "STD_RANGE",
    "PCGGen",
    "PCG_RANGE",
]

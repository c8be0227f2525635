"""Execution bridge module.

This package connects pure Rand computations to the outside world:
- run_with_seed: pure, seeded execution (preferred)
- run_shared / reseed_shared: the process-wide generator slot
- cli: command-line sampler
"""

from __future__ import annotations

from bridge.shared import (
    SHARED_SLOT,
    SharedGenSlot,
    reseed_shared,
    run_shared,
    run_with_seed,
)

__all__ = [
    "SHARED_SLOT",
    "SharedGenSlot",
    "run_shared",
    "reseed_shared",
    "run_with_seed",
]

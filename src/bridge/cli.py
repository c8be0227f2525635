"""Command-line sampler.

Draws a batch of values and prints them as a JSON list, e.g.::

    python -m bridge.cli --type int --lo -5 --hi 5 --count 8 --seed 42

Without --seed the values come from the process-wide generator slot.
"""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from bridge.shared import run_shared
from core.config import (
    GENERATORS,
    SAMPLE_TYPES,
    SampleConfig,
    apply_overrides,
    build_sample_config,
    load_json,
)
from core.logging import configure_logging, get_logger
from core.types import Nat
from generation.api import generate, generate_bounded, generate_index
from generators.pcg_gen import PCGGen
from generators.std_gen import mk_std_gen
from rand.computation import Rand, list_of

__all__ = [
    "parse_args",
    "build_config",
    "build_rand",
    "sample",
    "main",
]

logger = get_logger("bridge.cli")

_TYPES: dict[str, type] = {"bool": bool, "nat": Nat, "int": int}


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Draw random values from a seeded or shared generator",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--config", type=str, default=None, help="JSON config file")
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a config value (repeatable)",
    )
    parser.add_argument("--type", type=str, choices=SAMPLE_TYPES, default=None, help="Value type")
    parser.add_argument("--lo", type=int, default=None, help="Inclusive lower bound")
    parser.add_argument("--hi", type=int, default=None, help="Inclusive upper bound")
    parser.add_argument("--count", type=int, default=None, help="Number of values")
    parser.add_argument("--seed", type=int, default=None, help="Seed (omit to use the shared slot)")
    parser.add_argument(
        "--generator",
        type=str,
        choices=GENERATORS,
        default=None,
        help="Generator for seeded runs",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Library log level")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SampleConfig:
    """Merge config file, overrides and explicit flags (flags win)."""
    raw: dict[str, Any] = load_json(Path(args.config)) if args.config else {}
    raw = apply_overrides(raw, args.overrides)
    for key in ("type", "lo", "hi", "count", "seed", "generator", "log_level"):
        value = getattr(args, key)
        if value is not None:
            raw[key] = value
    return build_sample_config(raw)


def build_rand(config: SampleConfig) -> Rand[Any, Any]:
    """Build the per-value computation described by ``config``."""
    if config.type == "index":
        assert config.hi is not None
        return generate_index(config.hi).map(int)
    tp = _TYPES[config.type]
    if config.lo is None:
        return generate(tp)
    lo: Any = bool(config.lo) if tp is bool else config.lo
    hi: Any = bool(config.hi) if tp is bool else config.hi
    return generate_bounded(tp, lo, hi)


def sample(config: SampleConfig) -> list[Any]:
    """Draw ``config.count`` values, one forked stream per value."""
    batch = list_of(build_rand(config), config.count).map(
        lambda values: [v if isinstance(v, bool) else int(v) for v in values]
    )
    if config.seed is None:
        return run_shared(batch, unsynchronized=True)
    if config.generator == "pcg":
        gen: Any = PCGGen.from_seed(config.seed)
    else:
        gen = mk_std_gen(config.seed)
    return batch.eval(gen)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the sampler.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success).
    """
    args = parse_args(argv)
    config = build_config(args)
    configure_logging(config.log_level)
    logger.info("sampling with %s", config.to_dict())
    print(json.dumps(sample(config)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Config loading for sampling runs."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

__all__ = [
    "DEFAULT_SEED",
    "SAMPLE_TYPES",
    "GENERATORS",
    "SampleConfig",
    "load_json",
    "apply_overrides",
    "build_sample_config",
]

# Seed of the process-wide generator slot at import time
DEFAULT_SEED = 0

SAMPLE_TYPES = ("bool", "nat", "int", "index")
GENERATORS = ("std", "pcg")


@dataclass(frozen=True, slots=True)
class SampleConfig:
    """Configuration for drawing a batch of values.

    Attributes:
        type: Kind of value to draw (one of SAMPLE_TYPES).
        lo: Inclusive lower bound, or None for the type's default range.
        hi: Inclusive upper bound (for "index", the largest index).
        count: Number of values to draw.
        seed: Explicit seed; None draws from the process-wide slot.
        generator: Generator implementation for seeded runs (one of GENERATORS).
        log_level: Level name for the library logger.
    """

    type: str = "nat"
    lo: int | None = None
    hi: int | None = None
    count: int = 10
    seed: int | None = None
    generator: str = "std"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.type not in SAMPLE_TYPES:
            raise ValueError(f"Unknown sample type '{self.type}'. Available: {', '.join(SAMPLE_TYPES)}")
        if self.generator not in GENERATORS:
            raise ValueError(
                f"Unknown generator '{self.generator}'. Available: {', '.join(GENERATORS)}"
            )
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")
        if (self.lo is None) != (self.hi is None) and self.type != "index":
            raise ValueError("lo and hi must be given together")
        if self.type == "index" and self.hi is None:
            raise ValueError("index sampling requires hi")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def apply_overrides(config: dict[str, Any], overrides: list[str]) -> dict[str, Any]:
    """Apply dotted ``key=value`` overrides to a copy of ``config``.

    Values are parsed as JSON when possible, otherwise kept as strings.

    Raises:
        ValueError: If an override has no '='.
    """
    result = json.loads(json.dumps(config))
    for item in overrides:
        if "=" not in item:
            raise ValueError(f"Override must be key=value, got: {item}")
        path, raw_val = item.split("=", 1)
        keys = path.split(".")
        target = result
        for key in keys[:-1]:
            if key not in target or not isinstance(target[key], dict):
                target[key] = {}
            target = target[key]
        target[keys[-1]] = _parse_value(raw_val)
    return result


def build_sample_config(raw: dict[str, Any]) -> SampleConfig:
    """Build a SampleConfig from a plain dict.

    Raises:
        ValueError: If the dict has unknown keys or invalid values.
    """
    known = {f.name for f in fields(SampleConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    return SampleConfig(**raw)

"""Tests for core protocols and types.

This module contains:
- A dummy generator to verify the RandomGen protocol is generator-agnostic
- Protocol checks for the built-in generators and instances
- Tests for Nat and Fin
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from core.protocols import DefaultRange, RandomGen, RandomInstance
from core.types import Fin, Nat
from generation.instances import BoolRandom, FinRandom, IntRandom, NatRandom
from generators import PCGGen, StdGen, mk_std_gen
from rand.computation import draw_raw, fork, raw_range

# =============================================================================
# Dummy implementations for protocol verification
# =============================================================================


@dataclass(frozen=True)
class CounterGen:
    """A generator that counts upward; useful for exact assertions."""

    n: int = 0

    def next(self) -> tuple[int, CounterGen]:
        return self.n, CounterGen(self.n + 1)

    def range(self) -> tuple[int, int]:
        return (0, 2**31)

    def split(self) -> tuple[CounterGen, CounterGen]:
        return CounterGen(self.n * 2 + 1), CounterGen(self.n * 2 + 2)


# =============================================================================
# Protocol conformance
# =============================================================================


class TestProtocols:
    def test_generators_satisfy_random_gen(self) -> None:
        assert isinstance(mk_std_gen(0), RandomGen)
        assert isinstance(PCGGen.from_seed(0), RandomGen)
        assert isinstance(CounterGen(), RandomGen)

    def test_instances_satisfy_protocols(self) -> None:
        for instance in (BoolRandom(), NatRandom(), FinRandom(), IntRandom()):
            assert isinstance(instance, RandomInstance)
        for instance in (BoolRandom(), NatRandom(), IntRandom()):
            assert isinstance(instance, DefaultRange)

    def test_fin_has_no_default_range(self) -> None:
        assert not isinstance(FinRandom(), DefaultRange)

    def test_primitives_work_with_any_generator(self) -> None:
        """Primitives only rely on the protocol, not on StdGen."""
        assert draw_raw().run(CounterGen(7)) == (7, CounterGen(8))
        assert raw_range().run(CounterGen(7)) == ((0, 2**31), CounterGen(7))
        assert fork().run(CounterGen(1)) == (CounterGen(4), CounterGen(3))

    def test_std_gen_is_value_type(self) -> None:
        assert mk_std_gen(5) == StdGen(6, 1)
        assert hash(mk_std_gen(5)) == hash(StdGen(6, 1))


# =============================================================================
# Value types
# =============================================================================


class TestNat:
    def test_accepts_non_negative(self) -> None:
        assert Nat(0) == 0
        assert Nat(12) + 1 == 13
        assert isinstance(Nat(3), int)

    def test_rejects_negative(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Nat(-1)

    def test_repr(self) -> None:
        assert repr(Nat(4)) == "Nat(4)"


class TestFin:
    def test_valid_values(self) -> None:
        fin = Fin(2, 5)
        assert int(fin) == 2
        assert [10, 20, 30][Fin(1, 3)] == 20

    def test_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Fin(5, 5)
        with pytest.raises(ValueError, match="out of range"):
            Fin(-1, 5)

    def test_rejects_empty_size(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            Fin(0, 0)
        with pytest.raises(ValueError, match="positive"):
            Fin.of_nat(3, 0)

    def test_of_nat_wraps(self) -> None:
        assert Fin.of_nat(7, 5) == Fin(2, 5)
        assert Fin.of_nat(4, 5) == Fin(4, 5)

    def test_last(self) -> None:
        assert Fin.last(6) == Fin(5, 6)

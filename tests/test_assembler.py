"""
Tests for ECF assembly.

Every (strategy, engine) combination must reproduce the brute-force ECF.
"""

import pytest

from collatz_ecf import (
    PIP,
    RIP,
    STRATEGIES,
    assemble,
    assemble_path_extension,
    assemble_prefix,
    prefix_code,
)
from collatz_ecf.core.prefix import iterate, to_num
from collatz_ecf.engine import Engine, riptree

from conftest import brute_ecf, ecf_to_n

ITERATIVE_CASES = [1, 5, 8, 27, 38, 186438726873]


class TestAssemblePrefix:
    """Tests for the prefix-consumption strategy."""

    @pytest.mark.parametrize("n", ITERATIVE_CASES)
    def test_rip(self, n):
        assert assemble_prefix(n, RIP) == brute_ecf(n), f"ECF mismatch using Prefix + RIPTree for {n}"

    @pytest.mark.parametrize("n", ITERATIVE_CASES)
    def test_pip(self, n):
        assert assemble_prefix(n, PIP) == brute_ecf(n), f"ECF mismatch using Prefix + PIPTree for {n}"

    def test_documented_ecfs(self):
        assert assemble_prefix(1, "rip") == [0]
        assert assemble_prefix(16, "rip") == [4]
        assert assemble_prefix(3, "pip") == [0, 1, 5]
        assert assemble_prefix(12, "pip") == [2, 3, 7]

    @pytest.mark.parametrize("n", range(1, 128))
    def test_grid(self, n):
        ecf = brute_ecf(n)
        assert assemble_prefix(n, "rip") == ecf
        assert assemble_prefix(n, "pip") == ecf


class TestAssemblePathExtension:
    """Tests for the path-extension strategy."""

    @pytest.mark.parametrize("n", ITERATIVE_CASES[:-1])
    def test_rip(self, n):
        assert assemble_path_extension(n, RIP) == brute_ecf(n), f"ECF mismatch using Path + RIPTree for {n}"

    @pytest.mark.parametrize("n", ITERATIVE_CASES[:-1])
    def test_pip(self, n):
        assert assemble_path_extension(n, PIP) == brute_ecf(n), f"ECF mismatch using Path + PIPTree for {n}"

    def test_rip_large(self):
        n = 186438726873
        assert assemble_path_extension(n, RIP) == brute_ecf(n)

    @pytest.mark.parametrize("n", range(1, 64))
    def test_grid(self, n):
        ecf = brute_ecf(n)
        assert assemble_path_extension(n, "rip") == ecf
        assert assemble_path_extension(n, "pip") == ecf


class TestAgreement:
    """All four combinations agree with each other and with the oracle."""

    @pytest.mark.parametrize("n", [3, 6, 7, 9, 12, 27, 31, 41, 97, 121])
    def test_four_way(self, n):
        ecf = brute_ecf(n)
        results = {
            (strategy, engine): assemble(n, engine, strategy)
            for strategy in STRATEGIES
            for engine in ("rip", "pip")
        }
        for combo, got in results.items():
            assert got == ecf, combo
        assert ecf_to_n(ecf) == n
        assert iterate(n, ecf) == 1


class TestAssembleDispatch:

    def test_defaults(self):
        assert assemble(27) == brute_ecf(27)

    def test_unknown_strategy(self):
        with pytest.raises(KeyError, match="bogus"):
            assemble(27, "rip", "bogus")

    def test_unknown_engine(self):
        with pytest.raises(KeyError):
            assemble_prefix(27, "bogus")

    def test_custom_engine(self):
        """Any Engine works, not only registered ones."""
        custom = Engine("custom", riptree.prefix_find)
        assert assemble_prefix(27, custom) == brute_ecf(27)

    @pytest.mark.parametrize("fn", [assemble_prefix, assemble_path_extension])
    def test_zero_rejected(self, fn):
        with pytest.raises(ValueError, match=">= 1"):
            fn(0, "rip")

    @pytest.mark.parametrize("fn", [assemble_prefix, assemble_path_extension])
    def test_non_int_rejected(self, fn):
        with pytest.raises(TypeError):
            fn("27", "rip")


class TestPrefixCode:
    """Tests for prefix_code(), the int encoding of a local prefix."""

    def test_27(self):
        """27 has local prefix [0, 1, 3, 4] -> 1 + 2 + 8 + 16."""
        assert prefix_code(27) == 27
        assert prefix_code(27, "pip") == 27

    def test_power_of_two(self):
        assert prefix_code(16) == to_num([4]) == 16

    @pytest.mark.parametrize("n", range(1, 100))
    def test_engines_agree(self, n):
        assert prefix_code(n, "rip") == prefix_code(n, "pip")

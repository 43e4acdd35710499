# collatz_ecf/core/prefix.py
"""
Prefix algebra for Exponential Canonical Forms.

A prefix is an ascending list of non-negative ints: the cumulative number
of halvings seen before each odd (3x + 1) step. The full ECF of n is the
longest prefix that takes n all the way to 1.

    ECF(3) = [0, 1, 5]      3 -> 10 -> 5 -> 16 -> 8 -> 4 -> 2 -> 1
    ECF(7) = [0, 1, 2, 4, 7, 11]

Operations:

    - find(n, m)     : common prefix of ECF(n) and ECF(m), no full simulation
    - iterate(n, pf) : run n through a prefix (exact divisions only)
    - add(pf1, pf2)  : glue two consecutive trajectory segments
    - to_num / from_num : bijection between strictly ascending prefixes and ints
"""

from __future__ import annotations

from typing import List, Sequence

from .bijection import assert_natural, three_x_plus_one

Prefix = List[int]


class InexactIterationError(ArithmeticError):
    """A prefix asked iterate() to divide by a power of two that does not divide."""
    pass


# =============================================================================
# Guardrails
# =============================================================================


def assert_prefix(pf: Sequence[int], context: str = "prefix", strict: bool = False) -> None:
    """
    Assert that pf is a well-formed prefix.

    Args:
        pf: The sequence to check.
        context: Description for error message.
        strict: Require strictly ascending entries instead of non-decreasing.

    Raises:
        TypeError: If an entry is not an int.
        ValueError: If an entry is negative or the order is broken.
    """
    prev = None
    for idx, p in enumerate(pf):
        assert_natural(p, f"{context}[{idx}]")
        if prev is not None and (p < prev or (strict and p == prev)):
            order = "strictly ascending" if strict else "ascending"
            raise ValueError(f"{context} must be {order}, got {list(pf)!r}")
        prev = p


# =============================================================================
# Algebra
# =============================================================================


def find(n: int, m: int) -> Prefix:
    """
    Return the common prefix of two numbers.

    The prefix can be thought of as the common prefix of the ECFs. As an
    example, ``ECF(3) = [0, 1, 5]`` and ``ECF(7) = [0, 1, 2, 4, 7, 11]``,
    so ``find(3, 7) == find(7, 3) == [0, 1]``.

    Both numbers are driven down together and the descent stops at the
    first step where their parities differ.

    Raises:
        ValueError: If either number is < 1, or n == m (the descent would
            never diverge).
    """
    assert_natural(n, "find n")
    assert_natural(m, "find m")
    if n < 1 or m < 1:
        raise ValueError(f"find expects numbers >= 1, got {n} and {m}")
    if n == m:
        raise ValueError(f"find expects two different numbers, got {n} twice")

    ans: Prefix = []
    twos = 0

    while True:
        n_odd = n & 1
        m_odd = m & 1
        if not n_odd and not m_odd:
            twos += 1
            n >>= 1
            m >>= 1
        elif n_odd and m_odd:
            ans.append(twos)
            n = three_x_plus_one(n)
            m = three_x_plus_one(m)
        else:
            break

    return ans


def iterate(n: int, pf: Sequence[int]) -> int:
    """
    Iterate a number through a prefix.

    If the prefix is the ECF of the number, the result is 1. If it is a
    proper prefix found by one of the tree engines, the result is odd.

    Raises:
        ValueError: If pf is not ascending.
        InexactIterationError: If a division leaves a remainder, which
            means pf is not a prefix of ECF(n).
    """
    assert_natural(n, "iterate n")
    assert_prefix(pf, "iterate prefix")
    if not pf:
        return n

    n = _exact_halve(n, pf[0], 0)
    for i in range(1, len(pf)):
        n = three_x_plus_one(n)
        n = _exact_halve(n, pf[i] - pf[i - 1], i)

    return n


def _exact_halve(n: int, k: int, idx: int) -> int:
    if n & ((1 << k) - 1):
        raise InexactIterationError(
            f"prefix entry {idx} divides {n} by 2**{k} with a remainder"
        )
    return n >> k


def add(pf1: Sequence[int], pf2: Sequence[int]) -> Prefix:
    """
    Add two prefixes by attaching pf2 to the end of pf1.

    Does not mutate the inputs::

        pf1: [a, b, c]
        pf2:       [x,   y,   z]
        +-------------------------
        sum: [a, b, x+c, y+c, z+c]
    """
    if not pf1:
        return list(pf2)
    if not pf2:
        return list(pf1)

    last = pf1[-1]
    ans = list(pf1)
    ans[-1] += pf2[0]
    ans.extend(p + last for p in pf2[1:])
    return ans


def to_num(pf: Sequence[int]) -> int:
    """
    Map a strictly ascending prefix to an int, one bit per entry.

    Raises:
        ValueError: If pf has repeated or descending entries.
    """
    assert_prefix(pf, "to_num prefix", strict=True)
    return sum(1 << p for p in pf)


def from_num(k: int) -> Prefix:
    """Map an int to the ascending list of its set bit positions."""
    assert_natural(k, "from_num input")
    ans: Prefix = []
    bit_pos = 0
    while k:
        if k & 1:
            ans.append(bit_pos)
        k >>= 1
        bit_pos += 1
    return ans

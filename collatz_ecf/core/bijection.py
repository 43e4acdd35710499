# collatz_ecf/core/bijection.py
"""
Bijections between integers, binary digits and tree paths.

Three encodings of the same natural number are used throughout the package:

    - int            : the number itself (arbitrary precision)
    - binary digits  : list[bool], most-significant first, minimal length
    - path           : list[bool], the node position of n >= 1 in the
                       infinite binary tree

A path is built from n by: decrement, binary digits, reverse, complement.
Appending True to a path gives another path for the same number (the
complemented bit lands as a leading zero), which is what path extension
relies on.

Everything here is pure; all functions return fresh lists.
"""

from __future__ import annotations

from typing import List, Sequence


# =============================================================================
# Guardrails
# =============================================================================


def assert_natural(n: int, context: str = "n") -> None:
    """
    Assert that n is a non-negative Python int.

    Args:
        n: The value to check.
        context: Description for error message.

    Raises:
        TypeError: If n is not an int (bools are rejected too).
        ValueError: If n is negative.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{context} must be an int, got {type(n).__name__}: {n!r}")
    if n < 0:
        raise ValueError(f"{context} must be >= 0, got {n}")


def assert_bits(bits: Sequence[bool], context: str = "bits") -> None:
    """
    Assert that every element of a digit sequence is a bool.

    Raises:
        TypeError: On the first non-bool element.
    """
    for idx, b in enumerate(bits):
        if not isinstance(b, bool):
            raise TypeError(
                f"{context}[{idx}] must be a bool, got {type(b).__name__}: {b!r}"
            )


# =============================================================================
# Binary digits
# =============================================================================


def to_binary(n: int) -> List[bool]:
    """
    Convert n to big-endian binary digits of minimal length.

    ``to_binary(0)`` is the empty list.

    Raises:
        TypeError / ValueError: If n is not a natural number.
    """
    assert_natural(n, "to_binary input")
    return [(n >> shift) & 1 == 1 for shift in range(n.bit_length() - 1, -1, -1)]


def from_binary(bits: Sequence[bool]) -> int:
    """
    Interpret big-endian binary digits as a number.

    Leading False digits are allowed and ignored.
    """
    assert_bits(bits, "from_binary input")
    n = 0
    for b in bits:
        n = (n << 1) | int(b)
    return n


# =============================================================================
# Paths
# =============================================================================


def to_path(n: int) -> List[bool]:
    """
    Find the path of n in the tree.

    1. Decrement
    2. Convert to binary digits
    3. Reverse
    4. Flip bits

    The path length is the bit length of n - 1; ``to_path(1)`` is ``[]``.

    Raises:
        ValueError: If n is 0 (paths are only defined for n >= 1).
    """
    assert_natural(n, "to_path input")
    if n == 0:
        raise ValueError("to_path is only defined for n >= 1, got 0")
    return [not b for b in reversed(to_binary(n - 1))]


def from_path(path: Sequence[bool]) -> int:
    """
    Find the number at a path.

    1. Flip bits
    2. Reverse
    3. Convert to a number
    4. Increment

    The result is always >= 1, so every bool sequence is a valid path.
    """
    assert_bits(path, "from_path input")
    return from_binary([not b for b in reversed(path)]) + 1


# =============================================================================
# Powers of two and the odd step
# =============================================================================


def is_pow2(n: int) -> bool:
    """
    Return True if n has exactly one bit set.

    Note:
        ``is_pow2(0)`` is also True, inherited from ``n & (n - 1) == 0``.
        Paths never denote 0, so the engines cannot reach this case.
    """
    assert_natural(n, "is_pow2 input")
    return n & (n - 1) == 0


def pow2_exponent(n: int) -> int:
    """
    Return k such that n == 2**k, i.e. how many halvings take n to 1.

    Raises:
        ValueError: If n is not a positive power of two.
    """
    if n == 0 or not is_pow2(n):
        raise ValueError(f"pow2_exponent expects a positive power of two, got {n}")
    return n.bit_length() - 1


def three_x_plus_one(n: int) -> int:
    """Shorthand for the odd Collatz step, 3n + 1."""
    return 3 * n + 1

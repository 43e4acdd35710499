"""
Precondition errors shared by the tree engines.
"""

from __future__ import annotations

from typing import Sequence

from collatz_ecf.core.bijection import assert_natural, from_path


class PathMismatchError(ValueError):
    """An engine was handed a path that does not lead to the given number."""
    pass


def assert_number_at_path(n: int, path: Sequence[bool], context: str = "prefix_find") -> None:
    """
    Assert that ``from_path(path) == n``.

    Raises:
        TypeError: If n is not an int or path holds non-bools.
        PathMismatchError: If the path denotes a different number.
    """
    assert_natural(n, f"{context} n")
    at_path = from_path(path)
    if at_path != n:
        raise PathMismatchError(
            f"{context}: number must be at this path, path leads to {at_path}, got {n}"
        )

# collatz_ecf/engine/riptree.py
"""
RIPTree engine.

Every number sharing a path with n in the tree also shares the ECF of n up
to the next branching. The next such number is n + 2**len(path), so the
local prefix of n is the common prefix of n and that sibling.
"""

from __future__ import annotations

from typing import Sequence

from collatz_ecf.core.bijection import is_pow2, pow2_exponent
from collatz_ecf.core.prefix import Prefix, find
from collatz_ecf.engine.errors import assert_number_at_path


def next_in_path(n: int, path: Sequence[bool]) -> int:
    """
    Find the next number that resides at the path of n.

    The path is given explicitly because n lies on many paths (see path
    extension in the assembler).
    """
    return n + (1 << len(path))


def prefix_find(n: int, path: Sequence[bool]) -> Prefix:
    """
    Find the prefix of n at the given path.

    If you only care about the number, pass ``to_path(n)`` as the path.

    Raises:
        PathMismatchError: If path does not denote n.
    """
    assert_number_at_path(n, path, "riptree.prefix_find")

    if is_pow2(n):
        return [pow2_exponent(n)]
    return find(n, next_in_path(n, path))

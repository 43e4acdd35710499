# collatz_ecf/engine/piptree.py
"""
PIPTree engine.

All paths of length L form a heap-indexed tree: reading a path as a
big-endian number i, the node's children are 2i (LEFT) and 2i + 1 (RIGHT)
and the root is i = 1, i.e. the path ``[False] * (L - 1) + [True]`` which
leads to 2**(L - 1) with prefix ``[L - 1]``.

Walking from the root to the target, every step shifts the prefix down by
one and the node's nature decides whether the child inherits the root's
own prefix entry:

    nature   direction   root entry appended
    ------   ---------   -------------------
    GOOD     LEFT        yes
    GOOD     RIGHT       no
    BAD      LEFT        no
    BAD      RIGHT       yes

Directions and natures are plain bools:

    - direction: True is RIGHT, False is LEFT
    - nature:    True is GOOD (even), False is BAD (odd)
"""

from __future__ import annotations

from typing import List, Sequence

from collatz_ecf.core import prefix
from collatz_ecf.core.bijection import from_binary, from_path, is_pow2, pow2_exponent
from collatz_ecf.core.prefix import Prefix
from collatz_ecf.engine.errors import assert_number_at_path

RIGHT = True
LEFT = False

GOOD = True
BAD = False


def find_nature(path: Sequence[bool], pf: Sequence[int], root_pf: int) -> bool:
    """
    Find the nature of the node at a path.

    Returns:
        True (GOOD) if iterating the node's number through ``pf`` followed
        by ``root_pf + 1`` gives an even result, False (BAD) if odd.
    """
    return not prefix.iterate(from_path(path), list(pf) + [root_pf + 1]) & 1


def get_root_directions(path: Sequence[bool]) -> List[bool]:
    """
    Find the directions from the root to the node indexed by path.

    It starts from the target and either does ``i / 2`` or ``(i - 1) / 2``
    until it reaches 1, which gives the road from the target to the root,
    so that is reversed.

    In the resulting list True is RIGHT and False is LEFT.
    """
    ans: List[bool] = []

    i = from_binary(path)
    while i > 1:
        if i & 1:
            i -= 1
            ans.append(RIGHT)
        else:
            ans.append(LEFT)
        i >>= 1

    ans.reverse()
    return ans


def prefix_find(n: int, path: Sequence[bool]) -> Prefix:
    """
    Find the prefix of n using PIPTree properties.

    Raises:
        PathMismatchError: If path does not denote n.
    """
    assert_number_at_path(n, path, "piptree.prefix_find")

    if is_pow2(n):
        return [pow2_exponent(n)]

    dirs = get_root_directions(path)

    root_pf = len(path) - 1
    cur_pf: Prefix = [root_pf]
    cur_p = [False] * root_pf + [True]

    # start from the root and work down to the target
    for direction in dirs:
        nature = find_nature(cur_p, cur_pf, root_pf)

        cur_pf = [p - 1 for p in cur_pf]
        if (direction == RIGHT and nature == BAD) or (direction == LEFT and nature == GOOD):
            cur_pf.append(root_pf)

        # go to the child
        cur_p = cur_p[1:] + [direction]

    return cur_pf

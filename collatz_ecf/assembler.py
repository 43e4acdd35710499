# collatz_ecf/assembler.py
"""
ECF assembly from tree engine prefixes.

The engines only see a number's local prefix: the ECF up to the next
branching of its path. Two strategies turn local prefixes into a complete
ECF, and both accept either engine:

    - assemble_prefix          : consume a prefix, take the forced odd step,
                                 repeat on the smaller number
    - assemble_path_extension  : keep extending the path of n until its
                                 prefix takes n all the way to 1

All four (strategy, engine) combinations produce the same ECF.
"""

from __future__ import annotations

from typing import Callable, Dict, Union

from collatz_ecf import trace
from collatz_ecf.core.bijection import assert_natural, three_x_plus_one, to_path
from collatz_ecf.core.prefix import Prefix, add, iterate, to_num
from collatz_ecf.engine import Engine, resolve_engine

EngineLike = Union[Engine, str]


def _assert_positive(n: int, context: str) -> None:
    assert_natural(n, context)
    if n < 1:
        raise ValueError(f"{context} must be >= 1, got {n}")


def assemble_prefix(n: int, engine: EngineLike) -> Prefix:
    """
    Find the ECF by repeatedly consuming prefixes until iteration reaches 1.

    After each prefix the number is odd (or 1). The odd step is applied and
    the last entry of the answer is repeated, so that the next prefix is
    attached at the position of that odd step.

    Raises:
        ValueError: If n < 1.
        KeyError: If engine is an unknown name.
    """
    _assert_positive(n, "assemble_prefix input")
    eng = resolve_engine(engine)

    ans: Prefix = []
    cur_n = n
    step = 0
    while True:
        pf = eng.prefix_find(cur_n, to_path(cur_n))
        trace.record_event("assemble.step", step, "prefix", eng.name, cur_n, pf)
        step += 1

        ans = add(ans, pf)
        cur_n = iterate(cur_n, pf)
        if cur_n == 1:
            trace.record_event("assemble.done", step, "prefix", eng.name, n, ans)
            return ans

        cur_n = three_x_plus_one(cur_n)
        if ans:
            ans = ans + [ans[-1]]


def assemble_path_extension(n: int, engine: EngineLike) -> Prefix:
    """
    Find the ECF by extending the path of n until its prefix iterates to 1.

    Appending True to a path keeps it a path of n, one level deeper, so
    each extension can only lengthen the prefix.

    Raises:
        ValueError: If n < 1.
        KeyError: If engine is an unknown name.
    """
    _assert_positive(n, "assemble_path_extension input")
    eng = resolve_engine(engine)

    path = to_path(n)
    step = 0
    pf = eng.prefix_find(n, path)
    while iterate(n, pf) != 1:
        trace.record_event("assemble.step", step, "path", eng.name, n, pf)
        step += 1
        path.append(True)
        pf = eng.prefix_find(n, path)

    trace.record_event("assemble.done", step, "path", eng.name, n, pf)
    return pf


def prefix_code(n: int, engine: EngineLike = "rip") -> int:
    """
    Encode the local prefix of n as an int (one set bit per entry).

    Raises:
        ValueError: If n < 1.
    """
    _assert_positive(n, "prefix_code input")
    eng = resolve_engine(engine)
    return to_num(eng.prefix_find(n, to_path(n)))


# ---------------------------------------------------------------------------
# Strategy dispatch
# ---------------------------------------------------------------------------

Strategy = Callable[[int, EngineLike], Prefix]

STRATEGIES: Dict[str, Strategy] = {
    "prefix": assemble_prefix,
    "path": assemble_path_extension,
}


def assemble(n: int, engine: EngineLike = "rip", strategy: str = "prefix") -> Prefix:
    """
    Find the ECF of n with a named strategy and engine.

    Raises:
        KeyError: If strategy or engine is unknown.
    """
    if strategy not in STRATEGIES:
        raise KeyError(f"No strategy named {strategy!r}; expected one of {sorted(STRATEGIES)}")
    return STRATEGIES[strategy](n, engine)

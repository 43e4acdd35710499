# collatz_ecf/__init__.py
"""
collatz_ecf public API surface.

This module exposes a small, coherent core for Exponential Canonical Forms
(ECF): the ascending list of how many halvings happen before each odd step
of a number's Collatz reduction to 1.

    - Bijections: to_binary, from_binary, to_path, from_path,
                  is_pow2, pow2_exponent, three_x_plus_one
    - Prefix algebra: find, iterate, add, to_num, from_num
    - Engines: Engine, RIP, PIP, rip_prefix_find, pip_prefix_find,
               get_engine, list_engines, register_engine
    - Assembly: assemble_prefix, assemble_path_extension, assemble,
                prefix_code
    - Errors: PathMismatchError, InexactIterationError
    - Observability: trace
"""

from __future__ import annotations

from .core.bijection import (
    to_binary,
    from_binary,
    to_path,
    from_path,
    is_pow2,
    pow2_exponent,
    three_x_plus_one,
)
from .core.prefix import (
    Prefix,
    InexactIterationError,
    find,
    iterate,
    add,
    to_num,
    from_num,
)
from .engine import (
    Engine,
    RIP,
    PIP,
    PathMismatchError,
    get_engine,
    has_engine,
    list_engines,
    register_engine,
    resolve_engine,
)
from .engine.riptree import prefix_find as rip_prefix_find
from .engine.piptree import prefix_find as pip_prefix_find
from .assembler import (
    STRATEGIES,
    assemble,
    assemble_prefix,
    assemble_path_extension,
    prefix_code,
)
from . import trace


__all__ = [
    # bijections
    "to_binary",
    "from_binary",
    "to_path",
    "from_path",
    "is_pow2",
    "pow2_exponent",
    "three_x_plus_one",

    # prefix algebra
    "Prefix",
    "find",
    "iterate",
    "add",
    "to_num",
    "from_num",

    # engines
    "Engine",
    "RIP",
    "PIP",
    "rip_prefix_find",
    "pip_prefix_find",
    "get_engine",
    "has_engine",
    "list_engines",
    "register_engine",
    "resolve_engine",

    # assembly
    "STRATEGIES",
    "assemble",
    "assemble_prefix",
    "assemble_path_extension",
    "prefix_code",

    # errors
    "PathMismatchError",
    "InexactIterationError",

    # observability
    "trace",
]

"""
Tree engines for finding ECF prefixes.

An engine maps a number and one of its paths to the number's local prefix:

    prefix_find(n, path) -> Prefix

Two independent engines ship with the package and must always agree:

- riptree: sibling comparison along the path (RIP)
- piptree: root-to-node walk with GOOD/BAD natures (PIP)

Engines are kept in a small named registry so callers can talk in terms
of "rip" / "pip" instead of passing functions around:

    * register_engine(engine)
    * get_engine(name)
    * has_engine(name)
    * list_engines()
    * resolve_engine(engine_or_name)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Sequence, Union

from collatz_ecf.core.prefix import Prefix
from collatz_ecf.engine import piptree, riptree
from collatz_ecf.engine.errors import PathMismatchError

PrefixFinder = Callable[[int, Sequence[bool]], Prefix]


@dataclass(frozen=True)
class Engine:
    """A named prefix finder."""
    name: str
    prefix_find: PrefixFinder

    def __repr__(self) -> str:
        return f"Engine({self.name!r})"


RIP = Engine("rip", riptree.prefix_find)
PIP = Engine("pip", piptree.prefix_find)

# Internal registry mapping string names -> engines.
_REGISTRY: Dict[str, Engine] = {}


# ---------------------------------------------------------------------------
# Registry operations
# ---------------------------------------------------------------------------

def register_engine(engine: Engine) -> None:
    """
    Register (or overwrite) an engine under its own name.

    Raises:
        TypeError: If engine is not an Engine.
    """
    if not isinstance(engine, Engine):
        raise TypeError(f"register_engine expects an Engine, got {type(engine).__name__}")
    _REGISTRY[engine.name] = engine


def get_engine(name: str) -> Engine:
    """
    Look up an engine by name.

    Raises:
        KeyError: If no engine with this name is registered.
    """
    _ensure_defaults()
    if name not in _REGISTRY:
        raise KeyError(f"No engine named {name!r} is registered")
    return _REGISTRY[name]


def has_engine(name: str) -> bool:
    """Return True if an engine with this name is registered."""
    _ensure_defaults()
    return name in _REGISTRY


def list_engines() -> list[str]:
    """Return all registered engine names, sorted for stability."""
    _ensure_defaults()
    return sorted(_REGISTRY.keys())


def clear_registry() -> None:
    """
    Remove all registered engines.

    The built-in engines come back on the next lookup.
    """
    _REGISTRY.clear()


def resolve_engine(engine: Union[Engine, str]) -> Engine:
    """
    Accept either an Engine or a registered engine name.

    Raises:
        KeyError: For an unknown name.
        TypeError: For anything else.
    """
    if isinstance(engine, Engine):
        return engine
    if isinstance(engine, str):
        return get_engine(engine)
    raise TypeError(f"engine must be an Engine or a name, got {type(engine).__name__}")


def _ensure_defaults() -> None:
    """Seed the built-in engines into the registry."""
    for engine in (RIP, PIP):
        _REGISTRY.setdefault(engine.name, engine)


__all__ = [
    "Engine",
    "PrefixFinder",
    "RIP",
    "PIP",
    "PathMismatchError",
    "register_engine",
    "get_engine",
    "has_engine",
    "list_engines",
    "clear_registry",
    "resolve_engine",
    "riptree",
    "piptree",
]

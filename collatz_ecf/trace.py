"""
Assembler step trace for collatz_ecf.

Records every prefix the ECF assembler consumes, so a run can be replayed
or diffed between engines.

Usage:
    from collatz_ecf import trace

    trace.enable()
    trace.reset()

    assemble_prefix(27, "pip")

    for event in trace.get_events():
        print(event)
    print(trace.dumps_events())

Feature flag: ECF_TRACE=1 enables tracing at import time.

Event shape (see docs/schemas/ecf_trace_event.v1.schema.json):

    {"v": 1, "type": "assemble.step", "i": 0, "strategy": "prefix",
     "engine": "rip", "n": 27, "prefix": [0, 1, 3, 4]}
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Sequence

TRACE_EVENT_V1 = 1
TRACE_EVENT_KEY_ORDER = ("v", "type", "i", "strategy", "engine", "n", "prefix")
TRACE_EVENT_TYPES = frozenset(["assemble.step", "assemble.done"])

# Feature flag: set ECF_TRACE=1 to record assembler steps
ECF_TRACE_ENABLED = os.environ.get("ECF_TRACE", "0") == "1"

# Global trace state
_trace_enabled = ECF_TRACE_ENABLED
_events: List[Dict[str, Any]] = []


def enable():
    """Enable trace recording."""
    global _trace_enabled
    _trace_enabled = True


def disable():
    """Disable trace recording."""
    global _trace_enabled
    _trace_enabled = False


def reset():
    """Drop all recorded events."""
    global _events
    _events = []


def is_enabled() -> bool:
    """Check if trace recording is enabled."""
    return _trace_enabled


def canon_event(
    event_type: str,
    i: int,
    strategy: str,
    engine: str,
    n: int,
    prefix: Sequence[int],
) -> Dict[str, Any]:
    """
    Build a trace event with keys in canonical order.

    Raises:
        ValueError: If event_type is unknown or i is negative.
    """
    if event_type not in TRACE_EVENT_TYPES:
        raise ValueError(f"unknown trace event type: {event_type!r}")
    if i < 0:
        raise ValueError(f"trace event index must be >= 0, got {i}")
    values = (TRACE_EVENT_V1, event_type, i, strategy, engine, n, list(prefix))
    return dict(zip(TRACE_EVENT_KEY_ORDER, values))


def record_event(
    event_type: str,
    i: int,
    strategy: str,
    engine: str,
    n: int,
    prefix: Sequence[int],
) -> None:
    """Record one event if tracing is enabled."""
    if _trace_enabled:
        _events.append(canon_event(event_type, i, strategy, engine, n, prefix))


def get_events() -> List[Dict[str, Any]]:
    """Return a copy of the recorded events, oldest first."""
    return [dict(e, prefix=list(e["prefix"])) for e in _events]


def dumps_events() -> str:
    """
    Serialize the recorded events as JSON Lines.

    Each line is compact canonical JSON (sorted keys, no extra whitespace).
    """
    return "".join(
        json.dumps(e, sort_keys=True, ensure_ascii=True, separators=(",", ":")) + "\n"
        for e in _events
    )

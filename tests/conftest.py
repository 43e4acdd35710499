"""
Pytest configuration for collatz_ecf tests.

Provides:
- Hypothesis configuration for deterministic fuzzing
- Shared test utilities: a brute-force ECF oracle and its inverse
- Trace state isolation between tests
"""

import os

import pytest
from hypothesis import settings

from collatz_ecf import trace

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# - Database caches found examples for faster reruns (uses .hypothesis/ by default)
# - print_blob=True makes failures easy to reproduce
# - The ci profile derandomizes so CI runs are reproducible

settings.register_profile(
    "default",
    print_blob=True,
    derandomize=False,
)

settings.register_profile(
    "ci",
    print_blob=True,
    derandomize=True,
)

# Load profile from HYPOTHESIS_PROFILE env var, default to "default"
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


# =============================================================================
# Shared Test Utilities
# =============================================================================
# The oracle simulates the whole trajectory. It lives here, not in the
# package, because the package only computes ECFs structurally.


def brute_ecf(n: int) -> list:
    """
    Find the ECF of n by plain halve-or-triple simulation.

    Args:
        n: Number >= 1.

    Returns:
        Cumulative halving counts at every odd step, plus the final count.
    """
    if n < 1:
        raise ValueError(f"brute_ecf expects n >= 1, got {n}")
    ans = []
    twos = 0
    while n != 1:
        if n & 1:
            ans.append(twos)
            n = 3 * n + 1
        else:
            twos += 1
            n >>= 1
    ans.append(twos)
    return ans


def ecf_to_n(ecf: list) -> int:
    """Rebuild a number from its ECF by running the trajectory backwards."""
    ans = 1
    for i in range(len(ecf) - 1, 0, -1):
        ans <<= ecf[i] - ecf[i - 1]
        ans = (ans - 1) // 3
    return ans << ecf[0]


def common_prefix(a: list, b: list) -> list:
    """Find the literal common prefix of two lists."""
    ans = []
    for x, y in zip(a, b):
        if x != y:
            break
        ans.append(x)
    return ans


@pytest.fixture(autouse=True)
def _isolated_trace():
    """Leave the global trace switched off and empty around every test."""
    was_enabled = trace.is_enabled()
    trace.disable()
    trace.reset()
    yield
    trace.reset()
    if was_enabled:
        trace.enable()
    else:
        trace.disable()

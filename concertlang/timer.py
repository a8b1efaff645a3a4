"""High-resolution timing and reporting of elapsed time."""

from __future__ import annotations

import time


def get_time() -> int:
    """Return the current value of a monotonic clock, in nanoseconds."""
    return time.perf_counter_ns()


def _truncate(nanoseconds: int, unit: int) -> int:
    """Convert a duration to a coarser unit, truncating toward zero."""
    whole = abs(nanoseconds) // unit
    return whole if nanoseconds >= 0 else -whole


def format_difference_millis(t1: int, t2: int) -> str:
    """Describe the time from ``t1`` to ``t2`` in whole milliseconds."""
    millis = _truncate(t2 - t1, 1_000_000)
    return f"Delta: {millis} ms"


def format_difference_all(t1: int, t2: int) -> str:
    """Describe the time from ``t1`` to ``t2`` in seconds, milliseconds and nanoseconds."""
    delta = t2 - t1
    seconds = _truncate(delta, 1_000_000_000)
    millis = _truncate(delta, 1_000_000)
    return f"Delta: {seconds}s {millis}ms {delta}ns"


def print_difference_millis(t1: int, t2: int) -> None:
    """Print the time from ``t1`` to ``t2`` in whole milliseconds."""
    print(format_difference_millis(t1, t2))


def print_difference_all(t1: int, t2: int) -> None:
    """Print the time from ``t1`` to ``t2`` in several units."""
    print(format_difference_all(t1, t2))
"""Timing of a single call."""

from __future__ import annotations

import time as _clock
from typing import Callable, TypeVar

R = TypeVar("R")

_UNITS = (("s", 1_000_000_000), ("ms", 1_000_000), ("µs", 1_000))


def _format_duration(seconds: float) -> str:
    nanos = max(0, round(seconds * 1e9))
    for unit, scale in _UNITS:
        if nanos >= scale:
            text = f"{nanos / scale:.3f}".rstrip("0").rstrip(".")
            return f"{text}{unit}"
    return f"{nanos}ns"


def time(name: str, f: Callable[[], R]) -> R:
    """Call f, print how long it took under the given name, and return its result."""
    start = _clock.perf_counter()
    result = f()
    print(f"{name}: {_format_duration(_clock.perf_counter() - start)}")
    return result
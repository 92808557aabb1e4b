"""Wall-clock timing for zero-argument callables."""
from __future__ import annotations

import time
from typing import Callable, Tuple, TypeVar

from utils import console_ui

T = TypeVar("T")


def measure(func: Callable[[], T]) -> Tuple[T, float]:
    """Run *func* once and return ``(result, elapsed_ms)``."""

    start = time.perf_counter()
    result = func()
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return result, elapsed_ms


def report(label: str, func: Callable[[], T]) -> T:
    """Run *func*, print how long it took, and return its result."""

    result, elapsed_ms = measure(func)
    console_ui.elapsed(label, elapsed_ms)
    return result


__all__ = ["measure", "report"]

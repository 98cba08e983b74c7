"""Minimum-of-N timing harness."""

import time
from typing import Any, Callable, NamedTuple

DEFAULT_REPEATS = 3


class Measurement(NamedTuple):
    """Result of a repeated, timed operation."""
    duration_ms: float
    result: Any
    samples_ms: list[float]


def elapsed_ms(start_ns: int, end_ns: int) -> float:
    """Convert a nanosecond interval to milliseconds at microsecond resolution."""
    elapsed_us = (end_ns - start_ns) // 1000
    return elapsed_us / 1000.0


def measure_and_repeat(
    operation: Callable[..., Any],
    *args: Any,
    repeats: int = DEFAULT_REPEATS,
    timer: Callable[[], int] = time.perf_counter_ns,
) -> Measurement:
    """Run an operation several times and report its fastest run.

    There is no warm-up run and no timeout. Exceptions raised by the
    operation propagate immediately.

    Args:
        operation: Callable to time.
        *args: Positional arguments, passed unchanged to every run.
        repeats: Number of runs.
        timer: Monotonic clock returning nanoseconds.

    Returns:
        Measurement with the minimum duration, the return value of the last
        run and every run's duration in execution order.
    """
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")

    samples: list[float] = []
    result = None
    for _ in range(repeats):
        start = timer()
        result = operation(*args)
        end = timer()
        samples.append(elapsed_ms(start, end))

    return Measurement(duration_ms=min(samples), result=result, samples_ms=samples)

"""Benchmark harness and driver for format evaluation."""

from .runner import BenchmarkRunner, BenchmarkConfig, FormatResult
from .timing import Measurement, measure_and_repeat

__all__ = [
    "BenchmarkRunner",
    "BenchmarkConfig",
    "FormatResult",
    "Measurement",
    "measure_and_repeat",
]

"""
Benchmark Runner Module

Benchmark execution split into run configuration, result types and the
sweep/measurement logic.
"""

from .config import RunConfig
from .types import Measurement, BenchmarkSuiteResult
from .core import BenchmarkRunner, verify_totals, expected_total

__all__ = [
    "RunConfig",
    "Measurement",
    "BenchmarkSuiteResult",
    "BenchmarkRunner",
    "verify_totals",
    "expected_total",
]

"""
Benchmark Package

Classification strategies, iteration state, the benchmark runner and
report generation.
"""

from .state import AtomicCounter, IterationState, Blackhole
from .strategies import (
    ClassificationStrategy,
    ParseResult,
    StrategyKind,
    get_strategy,
    list_operations,
    try_parse_int,
)
from .runner import BenchmarkRunner, RunConfig, Measurement, BenchmarkSuiteResult
from .reporting import ReportGenerator, ReportFormat, ReportConfig

__all__ = [
    "AtomicCounter",
    "IterationState",
    "Blackhole",
    "ClassificationStrategy",
    "ParseResult",
    "StrategyKind",
    "get_strategy",
    "list_operations",
    "try_parse_int",
    "BenchmarkRunner",
    "RunConfig",
    "Measurement",
    "BenchmarkSuiteResult",
    "ReportGenerator",
    "ReportFormat",
    "ReportConfig",
]

"""
Utils Module

Logging configuration and timing helpers.
"""

from .logging import setup_logging, get_logger, get_benchmark_logger, PerformanceTimer

__all__ = [
    "setup_logging",
    "get_logger",
    "get_benchmark_logger",
    "PerformanceTimer",
]

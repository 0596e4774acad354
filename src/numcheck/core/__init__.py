"""
Core Module

Foundational components used across the application including configuration
management and custom exceptions.
"""

from .config import get_config, AppConfig
from .exceptions import (
    NumCheckBenchException,
    ConfigurationError,
    UnknownOperationError,
    InvalidPrefixError,
    BenchmarkExecutionError,
    BenchmarkVerificationError,
)

__all__ = [
    "get_config",
    "AppConfig",
    "NumCheckBenchException",
    "ConfigurationError",
    "UnknownOperationError",
    "InvalidPrefixError",
    "BenchmarkExecutionError",
    "BenchmarkVerificationError",
]

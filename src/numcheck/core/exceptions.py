"""
Custom Exception Classes

Application-specific exception classes for better error handling
and debugging throughout the benchmark harness.
"""

from typing import Optional, Any, Dict


class NumCheckBenchException(Exception):
    """Base exception class for all numcheck-bench errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(NumCheckBenchException):
    """Raised when there's an issue with configuration setup or validation."""

    def __init__(self, message: str, field_name: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.field_name = field_name


class UnknownOperationError(NumCheckBenchException):
    """Raised when a measured operation name is not registered."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.operation = operation


class InvalidPrefixError(NumCheckBenchException):
    """Raised when a trial prefix is outside the recognized set."""

    def __init__(self, message: str, prefix: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.prefix = prefix


class BenchmarkExecutionError(NumCheckBenchException):
    """Raised when a benchmark invocation fails to complete."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 prefix: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.operation = operation
        self.prefix = prefix


class BenchmarkVerificationError(BenchmarkExecutionError):
    """Raised when accumulated totals break the partition invariant."""

    def __init__(self, message: str, expected: Optional[int] = None,
                 positive: Optional[int] = None, negative: Optional[int] = None,
                 **kwargs):
        super().__init__(message, **kwargs)
        self.expected = expected
        self.positive = positive
        self.negative = negative

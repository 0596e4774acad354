"""
Benchmark Commands Package

This package contains the benchmark CLI commands:
- run.py - Benchmark execution command
- list.py - Operation listing command
"""

from .run import run
from .list import list_operations

__all__ = [
    'run',
    'list_operations',
]

"""
Config Commands Package

This package contains all configuration-related CLI commands:
- settings.py - Configuration management commands
"""

from .settings import show, validate, export

__all__ = [
    'show',
    'validate',
    'export'
]

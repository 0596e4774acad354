"""
CLI Module

Rich output formatting utilities shared by the Click commands.
"""

from .formatting import format_table, format_progress, display_banner, display_error

__all__ = [
    "format_table",
    "format_progress",
    "display_banner",
    "display_error",
]

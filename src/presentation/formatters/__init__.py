"""
Output Formatters - Presentation layer for displaying results.

This module provides classes for formatting output to the console,
keeping display logic separate from session logic.
"""

from .output_formatters import (
    ConsoleFormatter,
    ResponseFormatter,
    SessionFormatter,
    console_formatter,
    response_formatter,
    session_formatter,
)

__all__ = [
    "ConsoleFormatter",
    "ResponseFormatter",
    "SessionFormatter",
    "console_formatter",
    "response_formatter",
    "session_formatter",
]

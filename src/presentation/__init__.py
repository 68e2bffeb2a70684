"""
Presentation Layer - CLI and output formatting.

This layer handles all user interaction and output formatting,
keeping it separate from session logic.
"""

from .cli.input_collectors import (
    InputCollector,
    StudyGroupPrompt,
    input_collector,
    study_group_prompt,
)
from .formatters.output_formatters import (
    ConsoleFormatter,
    ResponseFormatter,
    SessionFormatter,
    console_formatter,
    response_formatter,
    session_formatter,
)

__all__ = [
    # Input collection
    "InputCollector",
    "StudyGroupPrompt",
    "input_collector",
    "study_group_prompt",
    # Output formatting
    "ConsoleFormatter",
    "ResponseFormatter",
    "SessionFormatter",
    "console_formatter",
    "response_formatter",
    "session_formatter",
]

"""
CLI Input Collection - User interaction layer.

This module provides classes for collecting user input from the command line,
keeping user interaction separate from session logic.
"""

from .input_collectors import (
    InputCollector,
    StudyGroupPrompt,
    input_collector,
    study_group_prompt,
)

__all__ = [
    "InputCollector",
    "StudyGroupPrompt",
    "input_collector",
    "study_group_prompt",
]

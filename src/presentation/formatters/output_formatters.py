"""
Output Formatters - Presentation layer for displaying results.

This module handles all output formatting, keeping display logic
separate from the session controller and the local commands.
"""

from pathlib import Path
import sys

# Add src to path for imports
_src_path = Path(__file__).parent.parent.parent
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from domain.entities import Response
from domain.enums import ResponseType


class ConsoleFormatter:
    """
    Formats output for console display.

    Subclasses add formatting for specific kinds of output.
    """

    def __init__(self, width: int = 70):
        """
        Initialize formatter.

        Args:
            width: Width of output lines
        """
        self._width = width

    def header(self, text: str, char: str = "=") -> str:
        """
        Format a header line.

        Args:
            text: Header text
            char: Character to use for border

        Returns:
            Formatted header string
        """
        lines = [
            char * self._width,
            text,
            char * self._width
        ]
        return "\n".join(lines)

    def error(self, message: str) -> str:
        """Format an error message."""
        return f"[ERROR] {message}"

    def info(self, message: str) -> str:
        """Format an info message."""
        return f"[INFO] {message}"


class ResponseFormatter(ConsoleFormatter):
    """Formatter for server responses."""

    def format_response(self, response: Response) -> str:
        """
        Format a server response for display.

        NORMAL messages are shown verbatim; ERROR messages are tagged so
        they stand out in script output.
        """
        if response.response_type == ResponseType.ERROR:
            return self.error(response.message)
        return response.message


class SessionFormatter(ConsoleFormatter):
    """Formatter for local session output (help, current user, scripts)."""

    def format_help(self, commands: dict[str, str]) -> str:
        """
        Format the list of local commands.

        Args:
            commands: Mapping of command name to description

        Returns:
            Formatted help text
        """
        lines = [self.header("CLIENT COMMANDS")]
        name_width = max((len(name) for name in commands), default=0)
        for name, description in commands.items():
            lines.append(f"  {name:<{name_width}}  {description}")
        lines.append("\nAny other command is sent to the server.")
        return "\n".join(lines)

    def format_current_user(self, username: str | None) -> str:
        """Format who the session is authorized as."""
        if username is None:
            return self.info("You are not authorized")
        return self.info(f"Current user: {username}")

    def format_script_line(self, script_name: str, line: str) -> str:
        """Echo a line read from a script."""
        return f"[{script_name}] > {line}"


# Convenience instances for easy import
console_formatter = ConsoleFormatter()
response_formatter = ResponseFormatter()
session_formatter = SessionFormatter()

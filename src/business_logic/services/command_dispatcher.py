"""
Command Dispatcher - Routes operator lines to local commands.

Lookup is an exact, case-sensitive match on the first whitespace-delimited
token. A miss raises CommandNotFoundError, which callers treat as the
signal to forward the line to the server.
"""

import sys
from pathlib import Path
from typing import Protocol

# Add src to path for imports
_src_path = Path(__file__).parent.parent.parent
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from domain.exceptions import CommandNotFoundError
from domain.value_objects import CommandLine, SessionState


class LocalCommand(Protocol):
    """A command handled entirely by the client."""

    description: str

    def execute(self, argument: str | None, state: SessionState) -> None:
        """Run the command with the text after its name (None if absent)."""
        ...


class CommandDispatcher:
    """Registry mapping command names to local commands."""

    def __init__(self):
        self._commands: dict[str, LocalCommand] = {}

    def register(self, name: str, command: LocalCommand) -> None:
        """
        Register a local command.

        Args:
            name: Exact name the operator types
            command: Command to run for that name

        Raises:
            ValueError: If the name is empty or contains whitespace
        """
        if not name or name != name.strip() or len(name.split()) != 1:
            raise ValueError(f"Invalid command name: {name!r}")
        self._commands[name] = command

    def execute(self, line: str, state: SessionState) -> None:
        """
        Run the local command named by the line's first token.

        Args:
            line: Raw operator line
            state: Session state handed to the command

        Raises:
            CommandNotFoundError: If no local command has that name
        """
        command_line = CommandLine.parse(line)
        command = self._commands.get(command_line.command_name)
        if command is None:
            raise CommandNotFoundError(command_line.command_name)
        command.execute(command_line.argument, state)

    def has_command(self, name: str) -> bool:
        """Check if a local command is registered under this exact name."""
        return name in self._commands

    def describe(self) -> dict[str, str]:
        """Get name -> description for every registered command, in order."""
        return {
            name: getattr(command, "description", "")
            for name, command in self._commands.items()
        }

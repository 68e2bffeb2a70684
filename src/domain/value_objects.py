"""
Value Objects - Immutable domain data structures.

Value objects represent domain concepts that are identified by their
values rather than a unique identity.
"""

import re
from dataclasses import dataclass

from .entities import Response, User
from .enums import ReadFault

_FIRST_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class CommandLine:
    """
    An operator line split into a command token and its argument.

    Only the first whitespace run separates the two; everything after it
    is kept verbatim, including internal whitespace.
    """
    command_name: str
    argument: str | None = None

    @classmethod
    def parse(cls, line: str) -> "CommandLine":
        """
        Split a raw line at the first whitespace run.

        Examples:
            >>> CommandLine.parse("add Group X Y")
            CommandLine(command_name='add', argument='Group X Y')

            >>> CommandLine.parse("show")
            CommandLine(command_name='show', argument=None)
        """
        parts = _FIRST_WHITESPACE_RUN.split(line.strip(), maxsplit=1)
        if len(parts) > 1:
            return cls(command_name=parts[0], argument=parts[1])
        return cls(command_name=parts[0])

    def has_argument(self) -> bool:
        """Check if the line carried anything after the command token."""
        return self.argument is not None


@dataclass(frozen=True)
class ReadResult:
    """
    Outcome of reading one response: either a response or a fault.

    Exactly one of the two fields is set.
    """
    response: Response | None = None
    fault: ReadFault | None = None

    def __post_init__(self) -> None:
        """Validate that exactly one outcome is present."""
        if (self.response is None) == (self.fault is None):
            raise ValueError("ReadResult needs exactly one of response or fault")

    @classmethod
    def success(cls, response: Response) -> "ReadResult":
        return cls(response=response)

    @classmethod
    def failure(cls, fault: ReadFault) -> "ReadResult":
        return cls(fault=fault)

    def is_success(self) -> bool:
        """Check if a response was read."""
        return self.response is not None


@dataclass
class SessionState:
    """
    Mutable state of one client session.

    Owned by the SessionController and handed to local commands by
    reference. is_running only ever goes from True to False.

    stop_reason stays None when the operator asked to stop; otherwise it
    holds the first fault that stopped the session.
    """
    current_user: User | None = None
    is_running: bool = True
    stop_reason: str | None = None

    def stop(self, reason: str | None = None) -> None:
        """Move the session to STOPPED. Repeated calls have no effect."""
        if not self.is_running:
            return
        self.is_running = False
        self.stop_reason = reason

    def authorize(self, user: User) -> None:
        """Record the user every later request will carry."""
        self.current_user = user

    def get_username(self) -> str | None:
        """Get the current username, or None for an anonymous session."""
        if self.current_user is None:
            return None
        return self.current_user.username

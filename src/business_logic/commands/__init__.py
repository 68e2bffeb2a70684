"""
Local Commands - Commands handled by the client itself.
"""

from .local_commands import (
    ClientAuthCommand,
    ClientExitCommand,
    ClientHelpCommand,
    ClientRegisterCommand,
    CurrentUserCommand,
    ExecuteScriptCommand,
)

__all__ = [
    "ClientAuthCommand",
    "ClientExitCommand",
    "ClientHelpCommand",
    "ClientRegisterCommand",
    "CurrentUserCommand",
    "ExecuteScriptCommand",
]

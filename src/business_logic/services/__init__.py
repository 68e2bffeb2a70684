"""
Services - Command dispatch and authorization.
"""

from .authorizer import ClientAuthorizer
from .command_dispatcher import CommandDispatcher, LocalCommand

__all__ = [
    "ClientAuthorizer",
    "CommandDispatcher",
    "LocalCommand",
]

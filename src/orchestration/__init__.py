"""
Orchestration Layer - Session coordination and configuration.

This layer ties the transport, the local commands and the console
together into the client's operator loop.
"""

from .config import ClientConfig
from .session_controller import SessionController, create_session_controller

__all__ = [
    "ClientConfig",
    "SessionController",
    "create_session_controller",
]

"""
Domain Exceptions - Error types raised across the client layers.

Read faults are not exceptions; they travel inside a ReadResult so the
session controller can match every fault kind explicitly.
"""


class ClientError(Exception):
    """Base class for all errors raised by the collection client."""


class CommandNotFoundError(ClientError):
    """
    Raised when a line does not name a registered local command.

    This is the normal trigger for forwarding a line to the server,
    not an error the operator ever sees on its own.
    """

    def __init__(self, command_name: str):
        super().__init__(f"Local command not found: {command_name!r}")
        self.command_name = command_name


class ServerUnavailableError(ClientError):
    """Raised when a connection to the server cannot be opened."""

    def __init__(self, host: str, port: int, reason: str = ""):
        message = f"Server {host}:{port} is unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.host = host
        self.port = port


class TransportSendError(ClientError):
    """Raised when a request could not be written to the channel."""


class ScriptRecursionError(ClientError):
    """Raised when a script tries to execute a script already running."""

    def __init__(self, script_path: str):
        super().__init__(f"Recursion detected: {script_path} is already running")
        self.script_path = script_path

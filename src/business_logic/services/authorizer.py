"""
Client Authorizer - Logs in or registers a user with the server.

Uses the same one-request-per-connection phase as every other command.
Authorization failures never stop the session.
"""

import sys
from pathlib import Path

# Add src to path for imports
_src_path = Path(__file__).parent.parent.parent
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from data_access.transport.connection_manager import ConnectionManager
from data_access.transport.request_sender import RequestSender
from data_access.transport.response_reader import ResponseReader
from domain.entities import User
from domain.enums import ResponseType
from domain.exceptions import ServerUnavailableError, TransportSendError

LOGIN_COMMAND = "login"
REGISTER_COMMAND = "register"


class ClientAuthorizer:
    """Sends login/register requests and reports whether they succeeded."""

    def __init__(
        self,
        connection_manager: ConnectionManager,
        request_sender: RequestSender,
        response_reader: ResponseReader,
        port: int
    ):
        self._connection_manager = connection_manager
        self._request_sender = request_sender
        self._response_reader = response_reader
        self._port = port

    def authorize(self, user: User) -> bool:
        """Log in an existing user."""
        return self._send_credentials(LOGIN_COMMAND, user)

    def register(self, user: User) -> bool:
        """Register a new user."""
        return self._send_credentials(REGISTER_COMMAND, user)

    def _send_credentials(self, command_name: str, user: User) -> bool:
        """
        Send one credentials request and read the verdict.

        Returns:
            True if the server answered with a NORMAL response
        """
        try:
            channel = self._connection_manager.open_connection(self._port)
        except ServerUnavailableError:
            print("Server is unavailable")
            return False

        request = self._request_sender.create_basic_request(command_name).with_user(user)
        try:
            self._request_sender.send_request(channel, request)
            result = self._response_reader.read_response(channel)
        except TransportSendError as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            return False
        finally:
            self._connection_manager.close_connection()

        if not result.is_success():
            print(f"[ERROR] {result.fault.get_advisory()}", file=sys.stderr)
            return False

        print(result.response.message)
        return result.response.response_type == ResponseType.NORMAL

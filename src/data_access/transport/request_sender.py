"""
Request Sender - Builds requests and writes them to a channel.
"""

import socket
import sys
from pathlib import Path

# Add src to path for imports
_src_path = Path(__file__).parent.parent.parent
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from data_access.transport.codec import encode_request
from domain.entities import Request, StudyGroup
from domain.exceptions import TransportSendError


class RequestSender:
    """Creates request objects and sends them as framed JSON."""

    def create_basic_request(self, command_name: str) -> Request:
        """Create a request carrying only the command name."""
        return Request(command_name=command_name)

    def create_execute_request(self, command_name: str, study_group: StudyGroup) -> Request:
        """Create a request that delivers a study group for the command."""
        return Request(command_name=command_name, study_group=study_group)

    def send_request(self, channel: socket.socket, request: Request) -> None:
        """
        Write one request to the channel.

        Args:
            channel: Connected socket
            request: Request to send

        Raises:
            TransportSendError: If the channel fails mid-write
        """
        frame = encode_request(request)
        try:
            channel.sendall(frame)
        except OSError as e:
            raise TransportSendError(f"Could not send '{request.command_name}': {e}") from e

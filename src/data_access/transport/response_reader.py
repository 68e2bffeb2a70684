"""
Response Reader - Reads one framed response and classifies transport faults.

Faults are returned inside a ReadResult rather than raised:

    OVERSIZE_PAYLOAD  declared length exceeds the buffer (body is not read)
    CORRUPTED_STREAM  payload is not a valid response
    ABRUPT_CLOSE      EOF before a full frame, or the socket was reset
"""

import socket
import sys
from pathlib import Path

# Add src to path for imports
_src_path = Path(__file__).parent.parent.parent
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from data_access.transport.codec import HEADER_SIZE, CodecError, decode_response, unpack_header
from domain.enums import ReadFault
from domain.value_objects import ReadResult

DEFAULT_MAX_PAYLOAD_SIZE = 64 * 1024


class ResponseReader:
    """Reads responses from a channel with a bounded receive buffer."""

    def __init__(self, max_payload_size: int = DEFAULT_MAX_PAYLOAD_SIZE):
        """
        Initialize the reader.

        Args:
            max_payload_size: Largest response payload accepted, in bytes
        """
        self._max_payload_size = max_payload_size

    def read_response(self, channel: socket.socket) -> ReadResult:
        """
        Read exactly one response frame.

        Args:
            channel: Connected socket the request was sent on

        Returns:
            ReadResult with the response, or with the fault that occurred
        """
        try:
            header = self._recv_exact(channel, HEADER_SIZE)
            if header is None:
                return ReadResult.failure(ReadFault.ABRUPT_CLOSE)

            length = unpack_header(header)
            if length > self._max_payload_size:
                return ReadResult.failure(ReadFault.OVERSIZE_PAYLOAD)

            payload = self._recv_exact(channel, length)
            if payload is None:
                return ReadResult.failure(ReadFault.ABRUPT_CLOSE)

        except OSError:
            # ConnectionResetError, BrokenPipeError and friends
            return ReadResult.failure(ReadFault.ABRUPT_CLOSE)

        try:
            return ReadResult.success(decode_response(payload))
        except CodecError:
            return ReadResult.failure(ReadFault.CORRUPTED_STREAM)

    @staticmethod
    def _recv_exact(channel: socket.socket, size: int) -> bytes | None:
        """Receive exactly size bytes, or None if the peer closed first."""
        buffer = bytearray()
        while len(buffer) < size:
            chunk = channel.recv(size - len(buffer))
            if not chunk:
                return None
            buffer.extend(chunk)
        return bytes(buffer)

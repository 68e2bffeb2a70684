"""
Connection Manager - Opens and closes the TCP channel to the server.

One channel is opened per phase and closed right after the paired read;
channels are never pooled or reused.
"""

import socket
import sys
from pathlib import Path

# Add src to path for imports
_src_path = Path(__file__).parent.parent.parent
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from domain.exceptions import ServerUnavailableError


class ConnectionManager:
    """
    Manages the client's single transport channel.

    Holds at most one open channel at a time; close_connection() closes
    the channel opened last.
    """

    def __init__(self, host: str, connect_timeout: float | None = None):
        """
        Initialize the connection manager.

        Args:
            host: Server host name or IP address
            connect_timeout: Seconds to wait for the TCP connect (None blocks)
        """
        self._host = host
        self._connect_timeout = connect_timeout
        self._channel: socket.socket | None = None

    def open_connection(self, port: int) -> socket.socket:
        """
        Connect to the server.

        Args:
            port: Server port

        Returns:
            Connected socket in blocking mode

        Raises:
            ServerUnavailableError: If the server refuses or cannot be reached
        """
        try:
            channel = socket.create_connection(
                (self._host, port),
                timeout=self._connect_timeout
            )
        except OSError as e:
            raise ServerUnavailableError(self._host, port, str(e)) from e

        # Reads and writes block until the transport itself fails
        channel.settimeout(None)
        self._channel = channel
        return channel

    def close_connection(self) -> None:
        """Close the current channel. Safe to call when nothing is open."""
        channel, self._channel = self._channel, None
        if channel is None:
            return
        try:
            channel.close()
        except OSError:
            pass  # Already torn down by the peer

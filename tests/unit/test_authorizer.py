"""
Tests for ClientAuthorizer.
"""

import sys
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

# Add src to path
_src_path = Path(__file__).parent.parent.parent / "src"
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from business_logic.services.authorizer import ClientAuthorizer
from data_access.transport.request_sender import RequestSender
from domain.entities import Response
from domain.enums import ReadFault, ResponseType
from domain.exceptions import ServerUnavailableError, TransportSendError
from domain.value_objects import ReadResult


@pytest.fixture
def transport():
    """Create mock connection manager, real-building sender and mock reader."""
    connection_manager = Mock()
    real_sender = RequestSender()
    request_sender = Mock(spec=RequestSender)
    request_sender.create_basic_request.side_effect = real_sender.create_basic_request
    response_reader = Mock()
    return connection_manager, request_sender, response_reader


@pytest.fixture
def authorizer(transport):
    connection_manager, request_sender, response_reader = transport
    return ClientAuthorizer(connection_manager, request_sender, response_reader, port=5454)


class TestClientAuthorizer:

    @patch('builtins.print')
    def test_login_success(self, mock_print, authorizer, transport, sample_user):
        connection_manager, request_sender, response_reader = transport
        response_reader.read_response.return_value = ReadResult.success(Response("Welcome"))

        assert authorizer.authorize(sample_user) is True

        sent = request_sender.send_request.call_args.args[1]
        assert sent.command_name == "login"
        assert sent.user == sample_user
        connection_manager.open_connection.assert_called_once_with(5454)
        connection_manager.close_connection.assert_called_once()
        assert "Welcome" in str(mock_print.call_args_list)

    @patch('builtins.print')
    def test_register_uses_register_command(self, mock_print, authorizer, transport, sample_user):
        _, request_sender, response_reader = transport
        response_reader.read_response.return_value = ReadResult.success(Response("Registered"))

        assert authorizer.register(sample_user) is True
        assert request_sender.send_request.call_args.args[1].command_name == "register"

    @patch('builtins.print')
    def test_rejected_credentials(self, mock_print, authorizer, transport, sample_user):
        _, _, response_reader = transport
        response_reader.read_response.return_value = ReadResult.success(
            Response("Wrong password", ResponseType.ERROR)
        )

        assert authorizer.authorize(sample_user) is False

    @patch('builtins.print')
    def test_server_unavailable(self, mock_print, authorizer, transport, sample_user):
        connection_manager, request_sender, _ = transport
        connection_manager.open_connection.side_effect = ServerUnavailableError("localhost", 5454)

        assert authorizer.authorize(sample_user) is False
        request_sender.send_request.assert_not_called()
        assert "Server is unavailable" in str(mock_print.call_args_list)

    @patch('builtins.print')
    def test_read_fault_closes_connection(self, mock_print, authorizer, transport, sample_user):
        connection_manager, _, response_reader = transport
        response_reader.read_response.return_value = ReadResult.failure(ReadFault.CORRUPTED_STREAM)

        assert authorizer.authorize(sample_user) is False
        connection_manager.close_connection.assert_called_once()

    @patch('builtins.print')
    def test_send_failure_closes_connection(self, mock_print, authorizer, transport, sample_user):
        connection_manager, request_sender, response_reader = transport
        request_sender.send_request.side_effect = TransportSendError("broken pipe")

        assert authorizer.authorize(sample_user) is False
        response_reader.read_response.assert_not_called()
        connection_manager.close_connection.assert_called_once()

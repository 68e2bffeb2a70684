"""
Session Controller - Main coordinator for the collection client.

Owns the operator loop, the session state and the two-phase remote
communication cycle:

    line -> local command?  yes -> run it locally
                            no  -> phase one: open, send, read, close
                                   NEEDS_ENTITY -> phase two (at most once):
                                   open, ask study group, send, read, close

Every transport fault is turned into a printed message or a session stop
here; none escape the loop.
"""

import sys
from pathlib import Path

# Add src to path
_src_path = Path(__file__).parent.parent
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from business_logic.commands import (
    ClientAuthCommand,
    ClientExitCommand,
    ClientHelpCommand,
    ClientRegisterCommand,
    CurrentUserCommand,
    ExecuteScriptCommand,
)
from business_logic.services.authorizer import ClientAuthorizer
from business_logic.services.command_dispatcher import CommandDispatcher
from data_access.transport.connection_manager import ConnectionManager
from data_access.transport.request_sender import RequestSender
from data_access.transport.response_reader import ResponseReader
from domain.entities import Request, Response
from domain.enums import ReadFault
from domain.exceptions import (
    ClientError,
    CommandNotFoundError,
    ServerUnavailableError,
    TransportSendError,
)
from domain.value_objects import CommandLine, ReadResult, SessionState
from orchestration.config import ClientConfig
from presentation.cli import InputCollector, StudyGroupPrompt
from presentation.formatters import ResponseFormatter, SessionFormatter

UNREADABLE_INPUT_MESSAGE = "You can't input this\nThe work of Client will be stopped"
UNREADABLE_INPUT_REASON = "Input could not be read"
SERVER_UNAVAILABLE_MESSAGE = "Server is unavailable"
CONNECTION_REFUSED_MESSAGE = "Connection refused"


class SessionController:
    """
    Main client session.

    Runs strictly sequentially: one operator line, at most one outstanding
    request, one connection per phase.
    """

    def __init__(
        self,
        config: ClientConfig,
        connection_manager: ConnectionManager,
        request_sender: RequestSender,
        response_reader: ResponseReader,
        authorizer: ClientAuthorizer,
        input_collector: InputCollector | None = None,
        study_group_prompt: StudyGroupPrompt | None = None,
        dispatcher: CommandDispatcher | None = None,
        response_formatter: ResponseFormatter | None = None,
        session_formatter: SessionFormatter | None = None,
        state: SessionState | None = None
    ):
        """
        Initialize the controller and register the local commands.

        Args:
            config: Client configuration
            connection_manager: Opens/closes the channel for each phase
            request_sender: Builds and sends requests
            response_reader: Reads responses into ReadResults
            authorizer: Used by the auth/register commands
            input_collector: Operator line source (creates default if None)
            study_group_prompt: Builds study groups (creates default if None)
            dispatcher: Local command registry (creates default if None)
            response_formatter: Response formatter (creates default if None)
            session_formatter: Local output formatter (creates default if None)
            state: Session state (fresh anonymous RUNNING state if None)
        """
        self._config = config
        self._connection_manager = connection_manager
        self._request_sender = request_sender
        self._response_reader = response_reader
        self._authorizer = authorizer

        self._input_collector = input_collector or InputCollector()
        self._study_group_prompt = study_group_prompt or StudyGroupPrompt(self._input_collector)
        self._dispatcher = dispatcher or CommandDispatcher()
        self._response_formatter = response_formatter or ResponseFormatter()
        self._session_formatter = session_formatter or SessionFormatter()
        self._state = state or SessionState()

        self._add_commands()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def dispatcher(self) -> CommandDispatcher:
        return self._dispatcher

    def run(self, script: Path | None = None) -> None:
        """
        Run the operator loop until the session stops.

        End of input (or input that cannot be read) stops the session.

        Args:
            script: Optional script executed before the first operator line
        """
        if script is not None:
            self._handle_or_stop(f"execute_script {script}")

        while self._state.is_running:
            line = self._input_collector.read_line(self._config.prompt)
            if line is None:
                self._stop_on_unreadable_input()
                return
            self._handle_or_stop(line)

    def exit(self) -> None:
        """Stop any further iterations of the loop."""
        self._state.stop()

    def handle_line(self, line: str) -> None:
        """
        Handle one operator line: run it locally or forward it to the server.

        Args:
            line: Raw operator line
        """
        if not line.strip():
            return

        try:
            self._dispatcher.execute(line, self._state)
            return
        except CommandNotFoundError:
            pass
        except ClientError as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            return

        response = self.communicate_with_server(line)
        if response is not None:
            print(self._response_formatter.format_response(response))

    def communicate_with_server(self, line: str) -> Response | None:
        """
        Send a line to the server and return what should be displayed.

        Args:
            line: Raw operator line; its first token is the command name and
                  everything after the first whitespace run is the argument

        Returns:
            Response to display, or None when there is nothing to display.
            After None the caller must check whether the session stopped.
        """
        command_line = CommandLine.parse(line)

        try:
            channel = self._connection_manager.open_connection(self._config.port)
        except ServerUnavailableError:
            print(SERVER_UNAVAILABLE_MESSAGE)
            return None

        request = self._request_sender.create_basic_request(command_line.command_name)
        if command_line.has_argument():
            request = request.with_argument(command_line.argument)
        request = request.with_user(self._state.current_user)

        try:
            result = self._send_and_read(channel, request)
        finally:
            self._connection_manager.close_connection()

        response = self._handle_first_phase_result(result)

        if response is not None and response.requires_entity():
            request = request.with_user(self._state.current_user)
            try:
                response = self._recommunicate_with_server(request)
            except ServerUnavailableError:
                print(SERVER_UNAVAILABLE_MESSAGE)
                return None

        if response is None:
            self._state.stop(CONNECTION_REFUSED_MESSAGE)
            print(CONNECTION_REFUSED_MESSAGE)
            return None

        return response

    def _recommunicate_with_server(self, request: Request) -> Response | None:
        """
        Run the element round trip: send the command again with a study group.

        Never starts a third phase, whatever the server answers.

        Raises:
            ServerUnavailableError: If the second connection cannot be opened
        """
        argument = request.argument
        channel = self._connection_manager.open_connection(self._config.port)
        try:
            study_group = self._study_group_prompt.ask_study_group()
            study_group = study_group.with_username(self._state.get_username())

            request = self._request_sender.create_execute_request(
                request.command_name,
                study_group
            )
            request = request.with_argument(argument).with_user(self._state.current_user)

            result = self._send_and_read(channel, request)
        finally:
            self._connection_manager.close_connection()

        return self._handle_second_phase_result(result)

    def _send_and_read(self, channel, request: Request) -> ReadResult:
        """Send one request and read its response on an open channel."""
        try:
            self._request_sender.send_request(channel, request)
        except TransportSendError:
            return ReadResult.failure(ReadFault.ABRUPT_CLOSE)
        return self._response_reader.read_response(channel)

    def _handle_first_phase_result(self, result: ReadResult) -> Response | None:
        if result.is_success():
            return result.response

        fault = result.fault
        print(fault.get_advisory(), file=sys.stderr)
        if fault.is_session_fatal():
            self._state.stop(fault.get_advisory())
        return None

    def _handle_second_phase_result(self, result: ReadResult) -> Response | None:
        if result.is_success():
            return result.response

        # Oversize is reported without stopping here, unlike phase one
        fault = result.fault
        if fault.is_session_fatal():
            return None
        return Response(message=fault.get_advisory())

    def _handle_or_stop(self, line: str) -> None:
        try:
            self.handle_line(line)
        except (EOFError, UnicodeDecodeError):
            # Input ended or could not be decoded in the middle of a prompt
            self._stop_on_unreadable_input()

    def _stop_on_unreadable_input(self) -> None:
        print(UNREADABLE_INPUT_MESSAGE, file=sys.stderr)
        self._state.stop(UNREADABLE_INPUT_REASON)

    def _add_commands(self) -> None:
        """Register every local command."""
        self._dispatcher.register(
            "client_help",
            ClientHelpCommand(self._dispatcher, self._session_formatter)
        )
        self._dispatcher.register("exit", ClientExitCommand())
        self._dispatcher.register(
            "execute_script",
            ExecuteScriptCommand(self.handle_line, self._session_formatter)
        )
        self._dispatcher.register(
            "auth",
            ClientAuthCommand(self._authorizer, self._input_collector)
        )
        self._dispatcher.register(
            "register",
            ClientRegisterCommand(self._authorizer, self._input_collector)
        )
        self._dispatcher.register(
            "current_user",
            CurrentUserCommand(self._session_formatter)
        )


def create_session_controller(config: ClientConfig | None = None) -> SessionController:
    """
    Factory function to create a fully configured session controller.

    Args:
        config: Client configuration (uses defaults if None)

    Returns:
        Configured SessionController instance
    """
    # Use default config if not provided
    if config is None:
        config = ClientConfig.from_defaults()

    connection_manager = ConnectionManager(config.host, config.connect_timeout)
    request_sender = RequestSender()
    response_reader = ResponseReader(config.max_payload_size)
    authorizer = ClientAuthorizer(
        connection_manager,
        request_sender,
        response_reader,
        config.port
    )

    return SessionController(
        config=config,
        connection_manager=connection_manager,
        request_sender=request_sender,
        response_reader=response_reader,
        authorizer=authorizer
    )

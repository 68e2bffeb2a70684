"""
Local Commands - Commands the client handles without contacting the server
(except auth/register, which go through the ClientAuthorizer).

Each command exposes a description for client_help and a single
execute(argument, state) method.
"""

import sys
from pathlib import Path
from typing import Callable

# Add src to path for imports
_src_path = Path(__file__).parent.parent.parent
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from business_logic.services.authorizer import ClientAuthorizer
from business_logic.services.command_dispatcher import CommandDispatcher
from domain.entities import User
from domain.exceptions import ScriptRecursionError
from domain.value_objects import SessionState
from presentation.cli.input_collectors import InputCollector
from presentation.formatters.output_formatters import SessionFormatter


class ClientHelpCommand:
    """Lists the local commands."""

    description = "show the commands handled by the client"

    def __init__(self, dispatcher: CommandDispatcher, formatter: SessionFormatter):
        self._dispatcher = dispatcher
        self._formatter = formatter

    def execute(self, argument: str | None, state: SessionState) -> None:
        print(self._formatter.format_help(self._dispatcher.describe()))


class ClientExitCommand:
    """Stops the session."""

    description = "stop the client"

    def execute(self, argument: str | None, state: SessionState) -> None:
        state.stop()


class ExecuteScriptCommand:
    """
    Runs every line of a script file through the session's line handler.

    Scripts may call execute_script themselves, but a script that is
    already running further up the chain is refused.
    """

    description = "execute_script <file> : run commands from a file"

    def __init__(
        self,
        line_handler: Callable[[str], None],
        formatter: SessionFormatter
    ):
        """
        Initialize the command.

        Args:
            line_handler: Handles one operator line exactly like the main loop
            formatter: Formatter used to echo script lines
        """
        self._line_handler = line_handler
        self._formatter = formatter
        self._running_scripts: list[Path] = []

    def execute(self, argument: str | None, state: SessionState) -> None:
        """
        Run the script named by argument.

        Raises:
            ScriptRecursionError: If the script is already running
        """
        if not argument:
            print("[ERROR] Usage: execute_script <file>", file=sys.stderr)
            return

        script_path = Path(argument.strip()).expanduser().resolve()
        if script_path in self._running_scripts:
            raise ScriptRecursionError(str(script_path))

        try:
            lines = script_path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            print(f"[ERROR] Cannot read script {script_path}: {e.strerror}", file=sys.stderr)
            return

        self._running_scripts.append(script_path)
        try:
            for line in lines:
                if not state.is_running:
                    break
                if not line.strip():
                    continue
                print(self._formatter.format_script_line(script_path.name, line))
                self._line_handler(line)
        finally:
            self._running_scripts.pop()


class ClientAuthCommand:
    """Logs in and makes the user current for every later request."""

    description = "log in with an existing account"

    def __init__(self, authorizer: ClientAuthorizer, input_collector: InputCollector):
        self._authorizer = authorizer
        self._input = input_collector

    def execute(self, argument: str | None, state: SessionState) -> None:
        user = _ask_credentials(self._input, argument)
        if self._authorizer.authorize(user):
            state.authorize(user)


class ClientRegisterCommand:
    """Registers a new account and makes it current."""

    description = "create a new account"

    def __init__(self, authorizer: ClientAuthorizer, input_collector: InputCollector):
        self._authorizer = authorizer
        self._input = input_collector

    def execute(self, argument: str | None, state: SessionState) -> None:
        user = _ask_credentials(self._input, argument)
        if self._authorizer.register(user):
            state.authorize(user)


class CurrentUserCommand:
    """Shows who requests are sent as."""

    description = "show the current user"

    def __init__(self, formatter: SessionFormatter):
        self._formatter = formatter

    def execute(self, argument: str | None, state: SessionState) -> None:
        print(self._formatter.format_current_user(state.get_username()))


def _ask_credentials(input_collector: InputCollector, argument: str | None) -> User:
    # "auth alice" skips the username prompt
    username = argument.strip() if argument and argument.strip() else None
    if username is None:
        username = input_collector.get_string("Username")
    password = input_collector.get_password()
    return User(username=username, password=password)

"""
CLI Input Collectors - User interaction layer for gathering inputs.

This module handles all console-based user interactions: reading operator
lines for the session loop and the field-by-field prompts that build a
study group when the server asks for one.
"""

from getpass import getpass
from pathlib import Path
from enum import Enum
import sys

# Add src to path for imports
_src_path = Path(__file__).parent.parent.parent
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from domain.entities import Coordinates, Person, StudyGroup
from domain.enums import FormOfEducation, Semester


class InputCollector:
    """
    Collects user input from the command line.

    This class separates all user interaction from session logic,
    making it easy to test and to swap the input source.
    """

    def read_line(self, prompt: str = "") -> str | None:
        """
        Read one raw operator line.

        Args:
            prompt: Prompt to display

        Returns:
            The line without its newline, or None when input has ended
            or cannot be decoded
        """
        try:
            return input(prompt)
        except (EOFError, UnicodeDecodeError):
            return None

    def get_yes_no(self, prompt: str) -> bool:
        """
        Get yes/no response from user.

        Args:
            prompt: Question to ask user

        Returns:
            True for yes, False for no
        """
        while True:
            response = input(prompt).strip().lower()
            if response in ['y', 'yes']:
                return True
            elif response in ['n', 'no']:
                return False
            else:
                print("Please enter 'y' or 'n'")

    def get_string(
        self,
        prompt: str,
        default: str | None = None,
        required: bool = True
    ) -> str:
        """
        Get string input from user.

        Args:
            prompt: Prompt to display
            default: Default value if user presses Enter
            required: If True, keeps prompting until non-empty input

        Returns:
            User's input or default value
        """
        while True:
            if default:
                user_input = input(f"{prompt} (default: {default}): ").strip()
            else:
                user_input = input(f"{prompt}: ").strip()

            if user_input:
                return user_input
            elif default is not None:
                return default
            elif not required:
                return ""
            else:
                print("Input is required. Please enter a value.")

    def get_password(self, prompt: str = "Password") -> str:
        """Get a non-empty password without echoing it."""
        while True:
            password = getpass(f"{prompt}: ")
            if password:
                return password
            print("Password cannot be empty.")

    def get_integer(
        self,
        prompt: str,
        default: int | None = None,
        min_value: int | None = None,
        max_value: int | None = None
    ) -> int:
        """
        Get integer input from user.

        Args:
            prompt: Prompt to display
            default: Default value if user presses Enter
            min_value: Minimum acceptable value
            max_value: Maximum acceptable value

        Returns:
            User's input as integer
        """
        while True:
            if default is not None:
                user_input = input(f"{prompt} (default: {default}): ").strip()
            else:
                user_input = input(f"{prompt}: ").strip()

            if not user_input and default is not None:
                return default

            try:
                value = int(user_input)

                if min_value is not None and value < min_value:
                    print(f"Value must be at least {min_value}")
                    continue

                if max_value is not None and value > max_value:
                    print(f"Value must be at most {max_value}")
                    continue

                return value

            except ValueError:
                print("Please enter a valid integer")

    def get_float(
        self,
        prompt: str,
        greater_than: float | None = None
    ) -> float:
        """
        Get a decimal number from user.

        Args:
            prompt: Prompt to display
            greater_than: Exclusive lower bound, if any

        Returns:
            User's input as float
        """
        while True:
            user_input = input(f"{prompt}: ").strip().replace(",", ".")
            try:
                value = float(user_input)
            except ValueError:
                print("Please enter a valid number")
                continue

            if greater_than is not None and value <= greater_than:
                print(f"Value must be greater than {greater_than}")
                continue

            return value

    def get_choice(
        self,
        prompt: str,
        choices: list[str],
        display_list: bool = True,
        required: bool = True
    ) -> str | None:
        """
        Get choice from list of options.

        Args:
            prompt: Prompt to display
            choices: List of valid choices
            display_list: If True, display numbered list of choices
            required: If False, an empty answer returns None

        Returns:
            User's choice from the list
        """
        if display_list:
            print()
            for i, choice in enumerate(choices, 1):
                print(f"  {i}. {choice}")
            print()

        while True:
            response = input(f"{prompt}: ").strip()

            if not response and not required:
                return None

            # Try as number first
            try:
                index = int(response) - 1
                if 0 <= index < len(choices):
                    return choices[index]
            except ValueError:
                pass

            # Try as direct choice
            if response in choices:
                return response

            # Try case-insensitive match
            response_lower = response.lower()
            for choice in choices:
                if choice.lower() == response_lower:
                    return choice

            print(f"Invalid choice. Please select from: {', '.join(choices)}")


class StudyGroupPrompt:
    """
    Builds one study group interactively.

    Every field is validated as it is entered, so ask_study_group() only
    returns once the operator has produced a valid element.
    """

    def __init__(self, input_collector: InputCollector | None = None):
        """
        Initialize the prompt.

        Args:
            input_collector: Collector used for each field (creates default if None)
        """
        self._input = input_collector or InputCollector()

    def ask_study_group(self) -> StudyGroup:
        """
        Ask the operator for every study group field.

        Returns:
            StudyGroup without an owner; the caller stamps the username
        """
        print("\nThe server needs a study group to complete this command.")

        name = self._input.get_string("Group name")
        coordinates = self._ask_coordinates()
        students_count = self._input.get_integer("Students count", min_value=1)
        expelled_students = self._input.get_integer("Expelled students", min_value=1)
        form_of_education = self._ask_enum(
            "Form of education (Enter to skip)",
            FormOfEducation,
            required=False
        )
        semester = self._ask_enum("Semester", Semester)
        group_admin = self._ask_group_admin()

        return StudyGroup(
            name=name,
            coordinates=coordinates,
            students_count=students_count,
            expelled_students=expelled_students,
            form_of_education=form_of_education,
            semester=semester,
            group_admin=group_admin,
        )

    def _ask_coordinates(self) -> Coordinates:
        x = self._input.get_integer("Coordinate x")
        y = self._input.get_float("Coordinate y")
        return Coordinates(x=x, y=y)

    def _ask_enum(self, prompt: str, enum_type: type[Enum], required: bool = True):
        """Ask for one member of enum_type by name or number."""
        names = [member.name for member in enum_type]
        choice = self._input.get_choice(prompt, names, required=required)
        if choice is None:
            return None
        return enum_type[choice]

    def _ask_group_admin(self) -> Person | None:
        if not self._input.get_yes_no("Does the group have an admin? (y/n): "):
            return None

        return Person(
            name=self._input.get_string("Admin name"),
            weight=self._input.get_float("Admin weight", greater_than=0),
            passport_id=self._input.get_string("Admin passport ID"),
        )


# Convenience instances for easy import
input_collector = InputCollector()
study_group_prompt = StudyGroupPrompt(input_collector)

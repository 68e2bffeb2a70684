"""
Tests for CLI Input Collectors.

Tests the user input collection layer, using mocking to avoid
requiring actual user input during tests.
"""

import pytest
from unittest.mock import Mock, patch
from pathlib import Path
import sys

# Add src to path
_src_path = Path(__file__).parent.parent.parent / "src"
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from presentation.cli.input_collectors import InputCollector, StudyGroupPrompt
from domain.enums import FormOfEducation, Semester


# Fixtures

@pytest.fixture
def input_collector():
    """Create an input collector for testing."""
    return InputCollector()


@pytest.fixture
def study_group_prompt(input_collector):
    """Create a study group prompt for testing."""
    return StudyGroupPrompt(input_collector)


# Tests for InputCollector

class TestReadLine:
    """Tests for read_line method."""

    def test_returns_raw_line(self, input_collector):
        """Should return the line untouched."""
        with patch('builtins.input', return_value='add  Group X '):
            assert input_collector.read_line("> ") == 'add  Group X '

    def test_end_of_input_returns_none(self, input_collector):
        """Should signal end of input with None."""
        with patch('builtins.input', side_effect=EOFError):
            assert input_collector.read_line("> ") is None

    def test_undecodable_input_returns_none(self, input_collector):
        """Should treat undecodable input like end of input."""
        error = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        with patch('builtins.input', side_effect=error):
            assert input_collector.read_line() is None


class TestGetYesNo:
    """Tests for get_yes_no method."""

    def test_accepts_yes(self, input_collector):
        """Should accept 'y' and 'yes' as True."""
        with patch('builtins.input', side_effect=['y']):
            assert input_collector.get_yes_no("Confirm?") is True

        with patch('builtins.input', side_effect=['YES']):
            assert input_collector.get_yes_no("Confirm?") is True

    def test_accepts_no(self, input_collector):
        """Should accept 'n' and 'no' as False."""
        with patch('builtins.input', side_effect=['no']):
            assert input_collector.get_yes_no("Confirm?") is False

    @patch('builtins.print')
    def test_rejects_invalid_input(self, mock_print, input_collector):
        """Should keep asking until valid input received."""
        with patch('builtins.input', side_effect=['maybe', 'sure', 'y']):
            assert input_collector.get_yes_no("Confirm?") is True


class TestGetString:
    """Tests for get_string method."""

    def test_returns_user_input(self, input_collector):
        """Should return user's input."""
        with patch('builtins.input', return_value='test value'):
            assert input_collector.get_string("Enter value") == "test value"

    def test_uses_default_when_empty(self, input_collector):
        """Should return default value when input is empty."""
        with patch('builtins.input', return_value=''):
            assert input_collector.get_string("Enter value", default="default") == "default"

    @patch('builtins.print')
    def test_requires_input_when_required(self, mock_print, input_collector):
        """Should keep prompting when required=True and no default."""
        with patch('builtins.input', side_effect=['', '', 'value']):
            assert input_collector.get_string("Enter value", required=True) == "value"

    def test_allows_empty_when_not_required(self, input_collector):
        """Should accept empty string when required=False."""
        with patch('builtins.input', return_value=''):
            assert input_collector.get_string("Enter value", required=False) == ""


class TestGetPassword:
    """Tests for get_password method."""

    @patch('builtins.print')
    def test_reprompts_on_empty(self, mock_print, input_collector):
        with patch('presentation.cli.input_collectors.getpass', side_effect=['', 'pw']):
            assert input_collector.get_password() == 'pw'


class TestGetInteger:
    """Tests for get_integer method."""

    def test_returns_integer(self, input_collector):
        """Should return integer value."""
        with patch('builtins.input', return_value='42'):
            assert input_collector.get_integer("Enter number") == 42

    @patch('builtins.print')
    def test_rejects_non_integer(self, mock_print, input_collector):
        """Should keep prompting for invalid integers."""
        with patch('builtins.input', side_effect=['abc', '3.14', '42']):
            assert input_collector.get_integer("Enter number") == 42

    @patch('builtins.print')
    def test_enforces_min_value(self, mock_print, input_collector):
        """Should reject values below minimum."""
        with patch('builtins.input', side_effect=['0', '15']):
            assert input_collector.get_integer("Enter number", min_value=1) == 15


class TestGetFloat:
    """Tests for get_float method."""

    def test_accepts_comma_decimal(self, input_collector):
        """Should accept a comma as decimal separator."""
        with patch('builtins.input', return_value='2,5'):
            assert input_collector.get_float("Enter number") == 2.5

    @patch('builtins.print')
    def test_enforces_exclusive_bound(self, mock_print, input_collector):
        """Should reject values not greater than the bound."""
        with patch('builtins.input', side_effect=['0', '-1', 'x', '0.1']):
            assert input_collector.get_float("Weight", greater_than=0) == 0.1


class TestGetChoice:
    """Tests for get_choice method."""

    @patch('builtins.print')
    def test_accepts_number(self, mock_print, input_collector):
        """Should accept choice by number."""
        with patch('builtins.input', return_value='2'):
            assert input_collector.get_choice("Select", ['A', 'B', 'C']) == 'B'

    @patch('builtins.print')
    def test_case_insensitive(self, mock_print, input_collector):
        """Should match choices case-insensitively."""
        with patch('builtins.input', return_value='first'):
            assert input_collector.get_choice("Select", ['FIRST', 'SECOND']) == 'FIRST'

    @patch('builtins.print')
    def test_optional_choice_can_be_skipped(self, mock_print, input_collector):
        """Should return None on empty input when not required."""
        with patch('builtins.input', return_value=''):
            assert input_collector.get_choice("Select", ['A'], required=False) is None

    @patch('builtins.print')
    def test_required_choice_reprompts_on_empty(self, mock_print, input_collector):
        with patch('builtins.input', side_effect=['', '5', 'A']):
            assert input_collector.get_choice("Select", ['A']) == 'A'


# Tests for StudyGroupPrompt

class TestStudyGroupPrompt:
    """Tests for ask_study_group."""

    @patch('builtins.print')
    def test_builds_minimal_group(self, mock_print, study_group_prompt):
        """Should build a group with optional fields skipped."""
        answers = [
            'P3112',     # name
            '5',         # x
            '2.5',       # y
            '20',        # students count
            '2',         # expelled students
            '',          # form of education (skipped)
            '2',         # semester -> SECOND
            'n',         # no admin
        ]
        with patch('builtins.input', side_effect=answers):
            group = study_group_prompt.ask_study_group()

        assert group.name == 'P3112'
        assert group.coordinates.x == 5
        assert group.coordinates.y == 2.5
        assert group.students_count == 20
        assert group.expelled_students == 2
        assert group.form_of_education is None
        assert group.semester == Semester.SECOND
        assert group.group_admin is None
        assert group.username is None

    @patch('builtins.print')
    def test_builds_full_group_with_retries(self, mock_print, study_group_prompt):
        """Should re-prompt invalid fields and collect the admin."""
        answers = [
            'P3112',
            'ten', '10',             # x retried
            '1.5',
            '0', '25',               # students count retried
            '3',
            'evening_classes',       # form of education by name
            'SEVENTH',
            'y',
            'Ivan',
            '-5', '70',              # weight retried
            'AB123',
        ]
        with patch('builtins.input', side_effect=answers):
            group = study_group_prompt.ask_study_group()

        assert group.coordinates.x == 10
        assert group.students_count == 25
        assert group.form_of_education == FormOfEducation.EVENING_CLASSES
        assert group.semester == Semester.SEVENTH
        assert group.group_admin.name == 'Ivan'
        assert group.group_admin.weight == 70.0
        assert group.group_admin.passport_id == 'AB123'

    def test_end_of_input_propagates(self, study_group_prompt):
        """Should let EOFError reach the session loop."""
        with patch('builtins.input', side_effect=EOFError), patch('builtins.print'):
            with pytest.raises(EOFError):
                study_group_prompt.ask_study_group()

    def test_uses_injected_collector(self):
        collector = Mock()
        collector.get_string.return_value = "G"
        collector.get_integer.return_value = 1
        collector.get_float.return_value = 1.0
        collector.get_choice.side_effect = [None, 'FIRST']
        collector.get_yes_no.return_value = False

        with patch('builtins.print'):
            group = StudyGroupPrompt(collector).ask_study_group()

        assert group.semester == Semester.FIRST
        assert collector.get_choice.call_count == 2

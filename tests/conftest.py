"""
Global test configuration.

Puts src/ on the path so every layer imports the same way main.py does,
and provides the domain objects most test modules share.
"""
import sys
from pathlib import Path

import pytest

_src_path = Path(__file__).parent.parent / "src"
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from domain.entities import Coordinates, Person, StudyGroup, User
from domain.enums import FormOfEducation, Semester


@pytest.fixture
def sample_user():
    """Create an authorized user."""
    return User(username="alice", password="secret")


@pytest.fixture
def sample_study_group():
    """Create a valid study group without an owner."""
    return StudyGroup(
        name="P3112",
        coordinates=Coordinates(x=10, y=2.5),
        students_count=25,
        expelled_students=3,
        semester=Semester.SECOND,
        form_of_education=FormOfEducation.FULL_TIME_EDUCATION,
        group_admin=Person(name="Ivan", weight=70.5, passport_id="AB123"),
    )

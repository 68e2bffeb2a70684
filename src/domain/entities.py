"""
Domain Entities - Core objects exchanged between client and server.

Requests and responses are immutable; a request is rebuilt (never mutated)
when the current user or the argument changes.
"""

from dataclasses import dataclass, replace

from .enums import FormOfEducation, ResponseType, Semester


@dataclass(frozen=True)
class User:
    """
    Identity attached to every outgoing request after auth/register.
    """
    username: str
    password: str

    def __repr__(self) -> str:
        return f"User(username={self.username!r})"


@dataclass(frozen=True)
class Coordinates:
    """Position of a study group."""
    x: int
    y: float


@dataclass(frozen=True)
class Person:
    """Administrator of a study group."""
    name: str
    weight: float
    passport_id: str

    def __post_init__(self) -> None:
        """Validate person fields."""
        if not self.name.strip():
            raise ValueError("Person name cannot be empty")
        if self.weight <= 0:
            raise ValueError(f"Weight must be positive, got {self.weight}")
        if not self.passport_id.strip():
            raise ValueError("Passport ID cannot be empty")


@dataclass(frozen=True)
class StudyGroup:
    """
    The collection element sent to the server in the element round trip.

    The server assigns id and creation date; the client only fills in the
    operator-provided fields and stamps the owner's username.
    """
    name: str
    coordinates: Coordinates
    students_count: int
    expelled_students: int
    semester: Semester
    form_of_education: FormOfEducation | None = None
    group_admin: Person | None = None
    username: str | None = None

    def __post_init__(self) -> None:
        """Validate the invariants the server enforces."""
        if not self.name.strip():
            raise ValueError("Study group name cannot be empty")
        if self.students_count <= 0:
            raise ValueError(f"Students count must be positive, got {self.students_count}")
        if self.expelled_students <= 0:
            raise ValueError(f"Expelled students must be positive, got {self.expelled_students}")

    def with_username(self, username: str | None) -> "StudyGroup":
        """Create new StudyGroup owned by the given user."""
        return replace(self, username=username)


@dataclass(frozen=True)
class Request:
    """
    A single command sent to the server.

    argument keeps any internal whitespace exactly as the operator typed it.
    """
    command_name: str
    argument: str | None = None
    study_group: StudyGroup | None = None
    user: User | None = None

    def with_argument(self, argument: str | None) -> "Request":
        """Create new Request with the given argument."""
        return replace(self, argument=argument)

    def with_user(self, user: User | None) -> "Request":
        """Create new Request carrying the given user."""
        return replace(self, user=user)


@dataclass(frozen=True)
class Response:
    """Server reply: a message for display and a response kind."""
    message: str
    response_type: ResponseType = ResponseType.NORMAL

    def requires_entity(self) -> bool:
        """Check if the server demands a study group to finish the command."""
        return self.response_type.requires_entity()

"""
Domain Layer - Requests, responses, session state and the collection element.

Pure data and rules; no I/O.
"""

from .entities import Coordinates, Person, Request, Response, StudyGroup, User
from .enums import FormOfEducation, ReadFault, ResponseType, Semester
from .exceptions import (
    ClientError,
    CommandNotFoundError,
    ScriptRecursionError,
    ServerUnavailableError,
    TransportSendError,
)
from .value_objects import CommandLine, ReadResult, SessionState

__all__ = [
    # Entities
    "Coordinates",
    "Person",
    "Request",
    "Response",
    "StudyGroup",
    "User",
    # Enums
    "FormOfEducation",
    "ReadFault",
    "ResponseType",
    "Semester",
    # Exceptions
    "ClientError",
    "CommandNotFoundError",
    "ScriptRecursionError",
    "ServerUnavailableError",
    "TransportSendError",
    # Value objects
    "CommandLine",
    "ReadResult",
    "SessionState",
]

"""
Domain Enums - Type-safe constants for the collection client.

These enums replace magic strings throughout the codebase: response kinds
sent by the server, transport read faults, and the enumerated fields of a
study group.
"""

from enum import Enum


class ResponseType(Enum):
    """
    Kinds of responses the server can send back.

    NEEDS_ENTITY means the command cannot complete until the client sends
    a study group built by the operator in a second round trip.
    """
    NORMAL = "normal"
    NEEDS_ENTITY = "needs_entity"
    ERROR = "error"

    def requires_entity(self) -> bool:
        """Check if the server is asking for a collection element."""
        return self == ResponseType.NEEDS_ENTITY


class ReadFault(Enum):
    """
    Transport faults that can occur while reading a response.

    Each fault has its own console advisory and its own effect on the
    session (see SessionController).
    """
    OVERSIZE_PAYLOAD = "oversize_payload"    # Declared frame is larger than the buffer
    CORRUPTED_STREAM = "corrupted_stream"    # Frame could not be decoded
    ABRUPT_CLOSE = "abrupt_close"            # Peer closed/reset mid-frame

    def get_advisory(self) -> str:
        """Get the message printed when this fault is observed."""
        return _FAULT_ADVISORIES[self]

    def is_session_fatal(self) -> bool:
        """Check if this fault stops the session on its own."""
        return self in {ReadFault.CORRUPTED_STREAM, ReadFault.ABRUPT_CLOSE}


_FAULT_ADVISORIES: dict[ReadFault, str] = {
    ReadFault.OVERSIZE_PAYLOAD: "Server data is too big for buffer",
    ReadFault.CORRUPTED_STREAM: "Server is unavailable now",
    ReadFault.ABRUPT_CLOSE: "Connection is refused, the work will stop",
}


class FormOfEducation(Enum):
    """How a study group attends classes."""
    DISTANCE_EDUCATION = "distance_education"
    FULL_TIME_EDUCATION = "full_time_education"
    EVENING_CLASSES = "evening_classes"


class Semester(Enum):
    """Semester a study group is currently in."""
    FIRST = "first"
    SECOND = "second"
    FOURTH = "fourth"
    SIXTH = "sixth"
    SEVENTH = "seventh"

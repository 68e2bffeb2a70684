"""
Wire Codec - Framing and JSON encoding of requests and responses.

Every message on the wire is a 4-byte big-endian length header followed by
a UTF-8 JSON object of exactly that many bytes.

    Request:  {"command_name", "argument", "study_group", "user"}
    Response: {"message", "response_type"}
"""

import json
import struct
import sys
from pathlib import Path
from typing import Any

# Add src to path for imports
_src_path = Path(__file__).parent.parent.parent
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from domain.entities import Request, Response, StudyGroup, User
from domain.enums import ResponseType

HEADER_FORMAT = "!I"                            #: Payload length, network byte order
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)


class CodecError(ValueError):
    """Raised when a payload cannot be decoded into a domain object."""


def pack_frame(payload: bytes) -> bytes:
    """Prefix a payload with its length header."""
    return struct.pack(HEADER_FORMAT, len(payload)) + payload


def unpack_header(header: bytes) -> int:
    """
    Read the payload length out of a frame header.

    Args:
        header: Exactly HEADER_SIZE bytes

    Returns:
        Declared payload length in bytes
    """
    (length,) = struct.unpack(HEADER_FORMAT, header)
    return length


def _study_group_to_dict(study_group: StudyGroup) -> dict[str, Any]:
    admin = study_group.group_admin
    return {
        "name": study_group.name,
        "coordinates": {
            "x": study_group.coordinates.x,
            "y": study_group.coordinates.y,
        },
        "students_count": study_group.students_count,
        "expelled_students": study_group.expelled_students,
        "form_of_education": (
            study_group.form_of_education.value
            if study_group.form_of_education else None
        ),
        "semester": study_group.semester.value,
        "group_admin": {
            "name": admin.name,
            "weight": admin.weight,
            "passport_id": admin.passport_id,
        } if admin else None,
        "username": study_group.username,
    }


def _user_to_dict(user: User | None) -> dict[str, str] | None:
    if user is None:
        return None
    return {"username": user.username, "password": user.password}


def request_to_dict(request: Request) -> dict[str, Any]:
    """Convert a request to its JSON-ready form."""
    return {
        "command_name": request.command_name,
        "argument": request.argument,
        "study_group": (
            _study_group_to_dict(request.study_group)
            if request.study_group else None
        ),
        "user": _user_to_dict(request.user),
    }


def encode_request(request: Request) -> bytes:
    """Serialize a request into a complete frame ready for sendall()."""
    payload = json.dumps(request_to_dict(request), separators=(",", ":"))
    return pack_frame(payload.encode("utf-8"))


def encode_response(response: Response) -> bytes:
    """Serialize a response into a frame (used by test servers)."""
    payload = json.dumps({
        "message": response.message,
        "response_type": response.response_type.value,
    })
    return pack_frame(payload.encode("utf-8"))


def decode_response(payload: bytes) -> Response:
    """
    Decode a response payload (without its header).

    Raises:
        CodecError: If the payload is not valid UTF-8 JSON, misses a field
                    or names an unknown response type
    """
    try:
        data = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CodecError(f"Undecodable response payload: {e}") from e

    if not isinstance(data, dict):
        raise CodecError(f"Response must be a JSON object, got {type(data).__name__}")

    message = data.get("message")
    if not isinstance(message, str):
        raise CodecError("Response is missing a string 'message'")

    try:
        response_type = ResponseType(data.get("response_type"))
    except ValueError as e:
        raise CodecError(f"Unknown response type: {data.get('response_type')!r}") from e

    return Response(message=message, response_type=response_type)

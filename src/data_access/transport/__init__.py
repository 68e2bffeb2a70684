"""
Transport - Connection handling and the framed JSON wire format.
"""

from .codec import CodecError, decode_response, encode_request, encode_response
from .connection_manager import ConnectionManager
from .request_sender import RequestSender
from .response_reader import ResponseReader

__all__ = [
    "CodecError",
    "ConnectionManager",
    "RequestSender",
    "ResponseReader",
    "decode_response",
    "encode_request",
    "encode_response",
]

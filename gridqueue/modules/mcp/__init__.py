"""
MCP Module - Black Box Interface

Purpose: Talk to the MCP control plane and classify its answers
Interface: ControlPlaneClient.call(), validate_*(), error taxonomy
Hidden: HTTP routes, request encoding, response field checks

Can be replaced with any transport that yields the same documents.
"""

from .client import ControlPlaneClient, Operation
from .errors import ProtocolError, QueueError, RemoteFailure, TransportError
from .validator import (
    build_error,
    is_success,
    parse_response,
    validate_available,
    validate_receive,
    validate_send,
    validate_status,
)

__all__ = [
    "ControlPlaneClient",
    "Operation",
    "QueueError",
    "TransportError",
    "ProtocolError",
    "RemoteFailure",
    "parse_response",
    "is_success",
    "build_error",
    "validate_status",
    "validate_send",
    "validate_receive",
    "validate_available",
]

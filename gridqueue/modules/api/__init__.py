"""
API Module - Black Box Interface

Purpose: Data shapes exchanged with the MCP control plane
Interface: ResponseDocument and the typed per-operation results
Hidden: Field names of the wire format
"""

from .models import (
    AvailableResult,
    OperationResult,
    ReceiveResult,
    ResponseDocument,
    SendResult,
    StatusResult,
)

__all__ = [
    "ResponseDocument",
    "OperationResult",
    "StatusResult",
    "SendResult",
    "ReceiveResult",
    "AvailableResult",
]

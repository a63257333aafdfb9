"""
Response validation for MCP documents.

Each operation's response is checked once, here, and turned into either a
typed result or a classified error. Success and comment are looked at
first; after that only the field the operation needs is type-checked.
"""

from typing import Any, Dict

from pydantic import TypeAdapter, ValidationError

from ..api.models import (
    AvailableResult,
    ReceiveResult,
    ResponseDocument,
    SendResult,
    StatusResult,
)
from .errors import ProtocolError, RemoteFailure

_count = TypeAdapter(int)


def parse_response(raw: Dict[str, Any]) -> ResponseDocument:
    """Wrap a decoded response; field types are checked per operation."""
    return ResponseDocument.model_validate(raw)


def is_success(response: ResponseDocument) -> bool:
    return response.is_success


def build_error(response: ResponseDocument) -> RemoteFailure:
    """Error for a failed response, carrying its comment if there is one."""
    return RemoteFailure(response.comment_text)


def validate_status(response: ResponseDocument) -> StatusResult:
    """A status response is healthy if it carries the system marker."""
    if not response.has_system:
        raise ProtocolError("MCP does not respond properly")
    return StatusResult(system=response.system, service=response.broker_address)


def validate_send(response: ResponseDocument) -> SendResult:
    if not is_success(response):
        raise build_error(response)
    return SendResult(service=response.broker_address)


def validate_receive(response: ResponseDocument) -> ReceiveResult:
    if not is_success(response):
        raise build_error(response)
    if response.message is None:
        raise ProtocolError("bad response from MCP: success but no message key")
    if not isinstance(response.message, str):
        raise ProtocolError("bad response from MCP: message is not text")
    return ReceiveResult(message=response.message, service=response.broker_address)


def validate_available(response: ResponseDocument) -> AvailableResult:
    if not is_success(response):
        raise build_error(response)
    if response.available is None:
        raise ProtocolError("bad response from MCP: success but no available key")
    return AvailableResult(available=_parse_count(response.available), service=response.broker_address)


def _parse_count(value: Any) -> int:
    """Integer or integer-like string; booleans are rejected."""
    if isinstance(value, bool):
        raise ProtocolError("bad response from MCP: available is not a number")
    try:
        return _count.validate_python(value)
    except ValidationError as e:
        raise ProtocolError("bad response from MCP: available is not a number") from e

"""
Queue handle: the per-queue facade over the MCP message services.

Every operation is one blocking round trip to the MCP. Each call builds
its own request document from the queue's base fields, so a handle can be
shared between threads.
"""

from ..api.models import ResponseDocument
from ..broker.discovery import BrokerDiscovery
from ..mcp.client import ControlPlaneClient, Operation
from ..mcp.errors import QueueError
from ..mcp.validator import (
    is_success,
    parse_response,
    validate_available,
    validate_receive,
    validate_send,
    validate_status,
)
from .endpoint import ConnectionDescriptor
from .identifier import QueueIdentifier, build_request


class QueueHandle:
    def __init__(
        self,
        identifier: QueueIdentifier,
        endpoint: ConnectionDescriptor,
        client: ControlPlaneClient,
        discovery: BrokerDiscovery,
    ):
        """
        Initialize queue handle.

        Args:
            identifier: Service and queue this handle addresses
            endpoint: MCP endpoint shared with the creating factory
            client: Control-plane client
            discovery: Broker discovery shared with the creating factory
        """
        self.identifier = identifier
        self.endpoint = endpoint
        self.client = client
        self.discovery = discovery
        self._closed = False

    def check_connection(self) -> None:
        """
        Check that the MCP is up and the queue is reachable.

        Raises:
            ProtocolError: If the status response lacks the system marker
            QueueError: If the availability check fails
        """
        response = self._call(Operation.STATUS)
        validate_status(response)
        # check on service level again
        self.available()

    def send(self, message: bytes) -> "QueueHandle":
        """
        Send a message to the queue.

        Args:
            message: UTF-8 encoded message

        Returns:
            This handle, for chaining
        """
        response = self._exchange(Operation.SEND, message=message.decode("utf-8", errors="replace"))
        validate_send(response)
        return self

    def receive(self, timeout: int) -> bytes:
        """
        Receive one message, letting the MCP wait up to timeout milliseconds.

        Args:
            timeout: Maximum wait in milliseconds

        Returns:
            UTF-8 encoded message
        """
        response = self._exchange(
            Operation.RECEIVE, wait=timeout / 1000.0, timeout=str(timeout)
        )
        return validate_receive(response).payload

    def available(self) -> int:
        """Number of messages waiting in the queue."""
        response = self._exchange(Operation.AVAILABLE)
        return validate_available(response).available

    def close(self) -> None:
        """Release the handle. No network resources are held."""
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def _call(self, operation: Operation, wait: float = 0.0, **fields: str) -> ResponseDocument:
        if self._closed:
            raise QueueError(f"queue {self.identifier.key} is closed")
        params = build_request(self.identifier, **fields)
        raw = self.client.call(operation, self.endpoint.url, params, wait=wait)
        return parse_response(raw)

    def _exchange(self, operation: Operation, wait: float = 0.0, **fields: str) -> ResponseDocument:
        """Call the MCP and hand off any broker address of a successful response."""
        response = self._call(operation, wait=wait, **fields)
        if is_success(response):
            self.discovery.handoff(response.broker_address)
        return response

    def __repr__(self) -> str:
        return f"QueueHandle({self.identifier.key!r} via {self.endpoint.url})"

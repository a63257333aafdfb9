"""
Control-plane client for the YaCy Grid MCP.

Maps one queue operation to one HTTP request against the MCP and returns
the decoded response document. Success or failure reported inside the
document is not interpreted here; only failures to complete the call are.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional

import httpx

from .errors import TransportError

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    """Operations offered by the MCP message services."""

    STATUS = "status"
    SEND = "send"
    RECEIVE = "receive"
    AVAILABLE = "available"


ROUTES: Dict[Operation, str] = {
    Operation.STATUS: "/yacy/grid/mcp/info/status.json",
    Operation.SEND: "/yacy/grid/mcp/messages/send.json",
    Operation.RECEIVE: "/yacy/grid/mcp/messages/receive.json",
    Operation.AVAILABLE: "/yacy/grid/mcp/messages/available.json",
}


class ControlPlaneClient:
    """Issues single-shot requests against an MCP endpoint."""

    def __init__(
        self,
        request_timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize control-plane client.

        Args:
            request_timeout: Client-side timeout in seconds, None for no timeout
            transport: Optional httpx transport (used to stub the MCP in tests)
        """
        self.request_timeout = request_timeout
        self.transport = transport

    def call(
        self,
        operation: Operation,
        base_url: str,
        params: Dict[str, str],
        wait: float = 0.0,
    ) -> Dict[str, Any]:
        """
        Perform one request against the MCP.

        Args:
            operation: Which MCP service to call
            base_url: Connection URL of the MCP, e.g. http://localhost:8100
            params: Request document, sent as form fields
            wait: Seconds the MCP may hold the request open (long poll)

        Returns:
            Decoded JSON response document

        Raises:
            TransportError: If the request fails or the body is not a JSON object
        """
        url = f"{base_url}{ROUTES[operation]}"
        logger.debug(f"MCP {operation.value} request to {url}")

        try:
            with httpx.Client(timeout=self._timeout(wait), transport=self.transport) as client:
                response = client.post(url, data=params)
        except httpx.HTTPError as e:
            raise TransportError(f"cannot reach MCP at {url}: {e}") from e

        try:
            document = response.json()
        except ValueError as e:
            raise TransportError(
                f"unparseable response from MCP at {url} (HTTP {response.status_code})"
            ) from e

        if not isinstance(document, dict):
            raise TransportError(f"response from MCP at {url} is not a JSON object")

        return document

    def _timeout(self, wait: float) -> Optional[float]:
        """Client timeout for a call; never shorter than the requested wait."""
        if self.request_timeout is None:
            return None
        return self.request_timeout + wait

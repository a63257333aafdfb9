"""
Shared pytest fixtures for GridQueue tests.

This module provides common fixtures including:
- McpStub: Stub MCP control plane with canned response documents
- Broker connector mocks for handoff tests
- Queue factory wired to the stub
"""

import os
import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union
from unittest.mock import MagicMock
from urllib.parse import parse_qsl

import httpx
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gridqueue.modules.mcp.client import ROUTES, Operation
from gridqueue.modules.queue import MCPQueueFactory
from gridqueue.modules.mcp import ControlPlaneClient


# =============================================================================
# MCP Stub Infrastructure
# =============================================================================

@dataclass
class McpCall:
    """Record of a request made against the stub MCP."""
    operation: Optional[Operation]
    url: str
    params: Dict[str, str]


class McpStub:
    """
    Stub MCP control plane answering with registered documents.

    Usage:
        def test_available(mcp_stub, factory):
            mcp_stub.register("available", {"success": True, "available": 3})

            assert factory.get_queue("crawler_webcrawler").available() == 3
            assert mcp_stub.calls[0].params["queueName"] == "webcrawler"

    A registered document may also be a str/bytes body (sent verbatim) or an
    exception class taking (message, request=...), which is raised instead of
    answering.
    """

    def __init__(self):
        self._responses: Dict[str, tuple] = {}
        self._call_history: List[McpCall] = []

    def register(
        self,
        operation: str,
        document: Union[Dict[str, Any], str, bytes, type],
        status_code: int = 200,
    ) -> "McpStub":
        """Register the answer for an operation; returns self for chaining."""
        self._responses[ROUTES[Operation(operation)]] = (document, status_code)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        params = dict(parse_qsl(request.content.decode("utf-8"), keep_blank_values=True))
        operation = next(
            (op for op, route in ROUTES.items() if route == request.url.path), None
        )
        self._call_history.append(McpCall(operation=operation, url=str(request.url), params=params))

        if request.url.path not in self._responses:
            return httpx.Response(404, json={"success": False, "comment": "mock not configured"})

        document, status_code = self._responses[request.url.path]
        if isinstance(document, type):
            raise document("stubbed transport failure", request=request)
        if isinstance(document, (str, bytes)):
            return httpx.Response(status_code, content=document)
        return httpx.Response(status_code, json=document)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def calls(self) -> List[McpCall]:
        return self._call_history

    @property
    def call_count(self) -> int:
        return len(self._call_history)

    def calls_to(self, operation: str) -> List[McpCall]:
        return [c for c in self._call_history if c.operation == Operation(operation)]


@pytest.fixture
def mcp_stub():
    """Stub MCP with no registered responses."""
    return McpStub()


@pytest.fixture
def mcp_client(mcp_stub):
    """Control-plane client talking to the stub MCP."""
    return ControlPlaneClient(transport=mcp_stub.transport)


# =============================================================================
# Broker and Factory Fixtures
# =============================================================================

@pytest.fixture
def broker():
    """Broker connector mock that accepts every address."""
    connector = MagicMock()
    connector.connect = MagicMock(return_value=True)
    return connector


@pytest.fixture
def factory(broker, mcp_client):
    """Queue factory for localhost with the default MCP port."""
    return MCPQueueFactory(broker, "localhost", client=mcp_client)


@pytest.fixture
def queue(factory):
    """Handle for the crawler_webcrawler queue."""
    return factory.get_queue("crawler_webcrawler")

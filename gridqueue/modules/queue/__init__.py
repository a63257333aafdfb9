"""
Queue Module - Black Box Interface

Purpose: Send to, receive from and probe queues reached through the MCP
Interface: MCPQueueFactory.get_queue(), QueueHandle.send()/receive()/available()/check_connection()
Hidden: Key parsing, endpoint resolution, request building, broker handoff

Can be replaced with a direct broker-backed factory offering the same handle interface.
"""

from .endpoint import MCP_DEFAULT_PORT, ConnectionDescriptor, resolve_port
from .factory import MCPQueueFactory
from .handle import QueueHandle
from .identifier import QueueIdentifier, build_request, parse_queue_key

__all__ = [
    "MCPQueueFactory",
    "QueueHandle",
    "QueueIdentifier",
    "ConnectionDescriptor",
    "MCP_DEFAULT_PORT",
    "resolve_port",
    "parse_queue_key",
    "build_request",
]

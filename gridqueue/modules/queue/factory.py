"""
Queue Factory for MCP-backed queues.

This factory:
- Resolves the MCP endpoint once, at construction
- Wires the control-plane client and broker discovery into each handle
- Returns queue handles for compound queue keys
"""

import logging
from typing import Optional

import httpx

from ...config.provider import ConfigProvider, MCPConfig
from ..broker.discovery import BrokerDiscovery
from ..broker.interfaces import BrokerConnector
from ..mcp.client import ControlPlaneClient
from .endpoint import UNSET_PORT, ConnectionDescriptor
from .handle import QueueHandle
from .identifier import parse_queue_key

logger = logging.getLogger(__name__)


class MCPQueueFactory:
    """Produces queue handles that reach their queues through the MCP."""

    def __init__(
        self,
        broker: BrokerConnector,
        host: str,
        port: int = UNSET_PORT,
        client: Optional[ControlPlaneClient] = None,
    ):
        """
        Initialize queue factory.

        Args:
            broker: Shared broker connector that receives discovered addresses
            host: MCP host name
            port: MCP port, -1 for the well-known default
            client: Control-plane client, a default one if omitted
        """
        self.endpoint = ConnectionDescriptor(host=host, port=port)
        self.client = client or ControlPlaneClient()
        self.discovery = BrokerDiscovery(broker)

    @classmethod
    def from_config(
        cls,
        config_provider: ConfigProvider,
        broker: BrokerConnector,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "MCPQueueFactory":
        """
        Build a factory from configuration.

        Args:
            config_provider: Configuration provider
            broker: Shared broker connector
            transport: Optional httpx transport for the control-plane client

        Returns:
            Configured MCPQueueFactory
        """
        return cls.from_mcp_config(config_provider.get_mcp_config(), broker, transport)

    @classmethod
    def from_mcp_config(
        cls,
        mcp_config: MCPConfig,
        broker: BrokerConnector,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "MCPQueueFactory":
        """Build a factory from an MCP configuration object."""
        client = ControlPlaneClient(
            request_timeout=mcp_config.request_timeout, transport=transport
        )
        factory = cls(broker, mcp_config.host, mcp_config.port, client=client)
        logger.info(f"Using MCP at {factory.get_connection_url()}")
        return factory

    def get_connection_url(self) -> str:
        return self.endpoint.url

    def get_host(self) -> str:
        return self.endpoint.host

    def has_default_port(self) -> bool:
        return self.endpoint.has_default_port

    def get_port(self) -> int:
        return self.endpoint.resolved_port

    def get_queue(self, service_queue_name: str) -> Optional[QueueHandle]:
        """
        Get a handle for a compound queue key.

        Args:
            service_queue_name: Key of the form <service>_<queue>

        Returns:
            QueueHandle, or None if the key names no service
        """
        identifier = parse_queue_key(service_queue_name)
        if identifier is None:
            return None
        return QueueHandle(identifier, self.endpoint, self.client, self.discovery)

    def close(self) -> None:
        """Close the factory. Handles hold no network resources, so nothing is released."""

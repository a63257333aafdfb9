"""
Broker Module - Black Box Interface

Purpose: Hand broker addresses discovered through the MCP to a broker connector
Interface: BrokerDiscovery.handoff(), BrokerConnector protocol
Hidden: Logging of handoff outcomes, connector error absorption

Any broker client offering connect(address) -> bool can be plugged in.
"""

from .discovery import BrokerDiscovery, KnownBrokers
from .interfaces import BrokerConnector

__all__ = ["BrokerConnector", "BrokerDiscovery", "KnownBrokers"]

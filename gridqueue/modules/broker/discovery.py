"""
Broker discovery and handoff.

The MCP may name the broker behind a queue in the "service" field of a
successful response. Handing that address to the broker connector lets
later calls reach the broker directly. A failed handoff never affects the
queue operation that triggered it.
"""

import logging
import threading
from typing import Optional, Set
from urllib.parse import urlparse

from .interfaces import BrokerConnector

logger = logging.getLogger(__name__)


class BrokerDiscovery:
    """Relays broker addresses found in MCP responses to a connector."""

    def __init__(self, connector: BrokerConnector):
        """
        Initialize broker discovery.

        Args:
            connector: Shared broker connector (injected)
        """
        self.connector = connector

    def handoff(self, address: Optional[str]) -> bool:
        """
        Connect to the broker at address, if one was reported.

        Args:
            address: Broker address from a successful response, or None

        Returns:
            True if a broker connection was established
        """
        if address is None:
            return False

        try:
            connected = self.connector.connect(address)
        except Exception as e:
            logger.error(f"failed to connect MCP broker at {address}: {e}")
            return False

        if connected:
            logger.info(f"connected MCP broker at {address}")
            return True

        logger.error(f"failed to connect MCP broker at {address}")
        return False


class KnownBrokers:
    """In-memory broker connector that remembers discovered broker addresses.

    Stands in for a real broker client where only the discovered addresses
    are of interest, e.g. on the command line.
    """

    def __init__(self):
        self._addresses: Set[str] = set()
        self._lock = threading.Lock()

    def connect(self, address: str) -> bool:
        parsed = urlparse(address)
        if not parsed.scheme or not parsed.hostname:
            return False
        with self._lock:
            self._addresses.add(address)
        return True

    @property
    def addresses(self) -> Set[str]:
        with self._lock:
            return set(self._addresses)

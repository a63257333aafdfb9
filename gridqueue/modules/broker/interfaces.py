"""Broker interfaces following Black Box Design principles."""
from typing import Protocol


class BrokerConnector(Protocol):
    """Protocol for the process-wide broker connection holder."""

    def connect(self, address: str) -> bool:
        """
        Connect to a message broker.

        Args:
            address: Broker connection string as reported by the MCP

        Returns:
            True if a connection to the broker is available afterwards
        """
        ...

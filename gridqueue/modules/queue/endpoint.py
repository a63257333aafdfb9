"""MCP endpoint resolution."""

from dataclasses import dataclass

MCP_DEFAULT_PORT = 8100
UNSET_PORT = -1
SCHEME = "http"


def resolve_port(port: int) -> int:
    """Use the well-known MCP port when port is unset or already the default."""
    if port == UNSET_PORT or port == MCP_DEFAULT_PORT:
        return MCP_DEFAULT_PORT
    return port


@dataclass(frozen=True)
class ConnectionDescriptor:
    """Host and port of an MCP control plane."""
    host: str
    port: int = UNSET_PORT

    @property
    def has_default_port(self) -> bool:
        return self.port == UNSET_PORT or self.port == MCP_DEFAULT_PORT

    @property
    def resolved_port(self) -> int:
        return resolve_port(self.port)

    @property
    def url(self) -> str:
        return f"{SCHEME}://{self.host}:{self.resolved_port}"

"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class MCPConfig:
    """MCP control-plane endpoint configuration."""
    host: str
    port: int = -1
    request_timeout: Optional[float] = None


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_mcp_config(self) -> MCPConfig:
        """Get MCP endpoint configuration."""
        ...

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        ...


def _parse_port(value: str) -> int:
    # MCP_PORT might be in tcp://host:port format when injected by K8s
    if value.startswith("tcp://"):
        return int(value.split(":")[-1])
    return int(value)


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_mcp_config(self) -> MCPConfig:
        """Get MCP configuration from environment variables."""
        timeout = os.getenv("MCP_REQUEST_TIMEOUT")
        return MCPConfig(
            host=os.getenv("MCP_HOST", "localhost"),
            port=_parse_port(os.getenv("MCP_PORT", "-1")),
            request_timeout=float(timeout) if timeout else None,
        )

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

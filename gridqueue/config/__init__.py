"""Configuration providers."""

from .provider import ConfigProvider, EnvConfigProvider, LoggingConfig, MCPConfig

__all__ = ["ConfigProvider", "EnvConfigProvider", "LoggingConfig", "MCPConfig"]

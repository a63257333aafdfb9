"""
Custom logging configuration to suppress MCP status probe logs
"""

import logging
import logging.config
from typing import Dict, Any

STATUS_ROUTE = "/yacy/grid/mcp/info/status.json"


class StatusProbeFilter(logging.Filter):
    """Filter to suppress request logs for MCP status probes."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter out status route requests from httpx logs."""
        if record.name.startswith("httpx"):
            if STATUS_ROUTE in record.getMessage():
                return False
        return True


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with status probe suppression."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "status_probe_filter": {
                "()": StatusProbeFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout"
            },
            "transport": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["status_probe_filter"]
            }
        },
        "loggers": {
            "gridqueue": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            },
            "httpx": {
                "handlers": ["transport"],
                "level": level,
                "propagate": False
            }
        },
        "root": {
            "level": level,
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config(level))

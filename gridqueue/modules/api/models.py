"""
GridQueue shared data models.

These models define the structure of the documents returned by the
MCP control plane and the typed results each queue operation produces
from them.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

# Wire field names

SUCCESS_KEY = "success"
MESSAGE_KEY = "message"
AVAILABLE_KEY = "available"
SERVICE_KEY = "service"
COMMENT_KEY = "comment"
SYSTEM_KEY = "system"


class ResponseDocument(BaseModel):
    """A response document returned by the MCP control plane.

    Every field is optional; which ones matter depends on the operation.
    Field types are not checked here: each operation checks only the fields
    it reads. Unknown fields are kept.
    """

    model_config = ConfigDict(extra="allow")

    success: Any = Field(None, description="True if the MCP performed the operation")
    message: Any = Field(None, description="Received message payload")
    available: Any = Field(None, description="Number of messages in the queue")
    service: Any = Field(None, description="Address of the backing broker")
    comment: Any = Field(None, description="Failure detail")
    system: Any = Field(None, description="Liveness marker of a status response")

    @property
    def is_success(self) -> bool:
        """True only if the success field is literally true."""
        return self.success is True

    @property
    def comment_text(self) -> Optional[str]:
        """Failure comment, if the MCP sent one as text."""
        return self.comment if isinstance(self.comment, str) else None

    @property
    def broker_address(self) -> Optional[str]:
        """Broker address, if the MCP sent one as text."""
        return self.service if isinstance(self.service, str) else None

    @property
    def has_system(self) -> bool:
        return SYSTEM_KEY in self.model_fields_set


# Typed results


class OperationResult(BaseModel):
    """Base for all typed operation results."""

    service: Optional[str] = Field(None, description="Broker address reported by the MCP")


class StatusResult(OperationResult):
    """Result of a status request against a healthy MCP."""

    system: Any = Field(..., description="System information reported by the MCP")


class SendResult(OperationResult):
    """Result of a successful send."""


class ReceiveResult(OperationResult):
    """Result of a successful receive."""

    message: str = Field(..., description="Received message text")

    @property
    def payload(self) -> bytes:
        return self.message.encode("utf-8")


class AvailableResult(OperationResult):
    """Result of a successful availability request."""

    available: int = Field(..., description="Number of messages in the queue")


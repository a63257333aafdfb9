"""
Error taxonomy for MCP queue operations.

All queue operations report failures through a single channel, QueueError,
so callers can catch one type. The subclasses tell apart where the failure
was detected:

- TransportError: the call to the MCP could not be completed at all
- ProtocolError: the MCP answered, but without a field the operation needs
- RemoteFailure: the MCP answered and explicitly reported failure

A failed broker handoff is not an error; it is only logged.
"""

from typing import Optional

NO_COMMENT_MESSAGE = "bad response from MCP: no success and no comment key"


class QueueError(IOError):
    """Base class for all queue proxy errors."""


class TransportError(QueueError):
    """The control-plane request could not be completed."""


class ProtocolError(QueueError):
    """The control plane answered with a document the operation cannot use."""


class RemoteFailure(QueueError):
    """The control plane reported failure, optionally with a comment."""

    def __init__(self, comment: Optional[str] = None):
        self.comment = comment
        if comment is None:
            super().__init__(NO_COMMENT_MESSAGE)
        else:
            super().__init__(f"cannot connect to MCP: {comment}")

"""
GridQueue - Remote Queue Proxy for the YaCy Grid MCP

Lets a caller send to, receive from and probe a named message queue
through the MCP control plane, and learns the address of the real
broker whenever the MCP reports one.

Architecture:
- Each module is self-contained with clear interfaces
- Collaborators (HTTP transport, broker connector) are injected
- No module knows the internals of another

Modules:
- api: Response documents and typed results
- queue: Queue keys, queue handles and the queue factory
- mcp: Control-plane client, response validation, error taxonomy
- broker: Broker discovery and handoff
"""

__version__ = "1.0.0"

"""
Queue keys and request documents.

A compound queue key such as "crawler_webcrawler" names both the service
("crawler") and the queue ("webcrawler"). Only the first separator splits
the key, so queue names may contain further separators.
"""

from dataclasses import dataclass
from typing import Dict, Optional

SEPARATOR = "_"


@dataclass(frozen=True)
class QueueIdentifier:
    """Service and queue addressed by a compound queue key."""
    service_name: str
    queue_name: str

    @property
    def key(self) -> str:
        return f"{self.service_name}{SEPARATOR}{self.queue_name}"

    def to_params(self) -> Dict[str, str]:
        """Base request fields identifying the queue."""
        return {"serviceName": self.service_name, "queueName": self.queue_name}


def parse_queue_key(key: str) -> Optional[QueueIdentifier]:
    """
    Split a compound queue key into service and queue name.

    Returns:
        QueueIdentifier, or None if the key has no separator after its first character
    """
    p = key.find(SEPARATOR)
    if p <= 0:
        return None
    return QueueIdentifier(service_name=key[:p], queue_name=key[p + 1:])


def build_request(identifier: QueueIdentifier, **fields: str) -> Dict[str, str]:
    """Fresh request document: the queue's base fields plus operation fields."""
    params = identifier.to_params()
    params.update(fields)
    return params

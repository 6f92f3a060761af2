"""Delivery record: one (topic, message) pair handed to a subscriber."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Tuple


@dataclass(frozen=True)
class Delivery:
    """A message as received by a subscriber for a concrete published topic."""

    topic: str
    message: Any
    received_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def as_tuple(self) -> Tuple[str, Any]:
        return (self.topic, self.message)

    def to_dict(self) -> dict:
        """Serialize delivery for logging."""
        return {
            "topic": self.topic,
            "message": self.message,
            "received_at": self.received_at.isoformat(),
        }

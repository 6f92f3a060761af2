"""Abstract Subscriber: a named callback with observability hooks."""

from abc import ABC, abstractmethod
from typing import Any

from topictree.observability import get_logger


class Subscriber(ABC):
    """Abstract base class for subscribers; instances can be passed to TopicTree.subscribe as callbacks."""

    def __init__(self, subscriber_id: str) -> None:
        self._subscriber_id = subscriber_id
        self._logger = get_logger(f"topictree.subscriber.{subscriber_id}")

    @property
    def subscriber_id(self) -> str:
        return self._subscriber_id

    def __call__(self, topic: str, message: Any) -> None:
        self.deliver_message(topic, message)

    @abstractmethod
    def on_message(self, topic: str, message: Any) -> None:
        """Handle a message delivered for a topic. Must be implemented by subclasses."""
        pass

    def deliver_message(self, topic: str, message: Any) -> None:
        """Called by the tree on each match; default implementation calls on_message."""
        self.on_message(topic, message)

    def on_subscribe(self, pattern: str) -> None:
        """Called after this subscriber is registered for a pattern (for observability)."""
        self._logger.info(
            "subscribed",
            extra={"pattern": pattern, "subscriber_id": self._subscriber_id},
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._subscriber_id!r})"

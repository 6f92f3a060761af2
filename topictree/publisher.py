"""Abstract Publisher and base implementation for observability."""

from abc import ABC, abstractmethod
from typing import Any

from topictree.observability import get_logger


class Publisher(ABC):
    """Abstract base class for publishers that send messages to topics."""

    def __init__(self, publisher_id: str) -> None:
        self._publisher_id = publisher_id
        self._logger = get_logger(f"topictree.publisher.{publisher_id}")

    @property
    def publisher_id(self) -> str:
        return self._publisher_id

    @abstractmethod
    def publish(self, topic: str, message: Any) -> int:
        """
        Publish a message to a concrete topic. Must be implemented by subclasses.
        Returns the number of subscribers the message was delivered to.
        """
        pass

    def on_publish(self, topic: str, deliveries: int) -> None:
        """Called after a message is published (for observability)."""
        self._logger.info(
            "published",
            extra={
                "topic": topic,
                "deliveries": deliveries,
                "publisher_id": self._publisher_id,
            },
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._publisher_id!r})"

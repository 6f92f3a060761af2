"""Concrete Subscriber implementation with observability hooks."""

from typing import Any

from topictree.subscriber import Subscriber


class DefaultSubscriber(Subscriber):
    """Subscriber that logs each message (override on_message for custom handling)."""

    def on_message(self, topic: str, message: Any) -> None:
        self._logger.info(
            "message_received",
            extra={
                "topic": topic,
                "subscriber_id": self.subscriber_id,
                "payload_type": type(message).__name__,
            },
        )

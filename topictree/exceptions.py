"""Errors raised by the topic tree."""

from typing import Any


class InvalidTopic(ValueError):
    """Raised when a subscription pattern or published topic is malformed."""

    def __init__(self, topic: Any) -> None:
        self.topic = topic
        super().__init__(f"Topic {topic!r} is invalid.")


# Subscription patterns and published topics share one error type.
InvalidPattern = InvalidTopic

"""Concrete Publisher bound to an in-memory TopicTree."""

from typing import Any

from topictree.publisher import Publisher
from topictree.tree import TopicTree


class DefaultPublisher(Publisher):
    """Publisher that routes messages through a TopicTree."""

    def __init__(self, publisher_id: str, tree: TopicTree) -> None:
        super().__init__(publisher_id)
        self._tree = tree

    @property
    def tree(self) -> TopicTree:
        return self._tree

    def publish(self, topic: str, message: Any) -> int:
        """Deliver via the tree, then notify observability. InvalidTopic propagates."""
        deliveries = self._tree.publish(topic, message)
        self.on_publish(topic, deliveries)
        return deliveries

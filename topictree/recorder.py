"""Subscriber that keeps every delivery it receives, in arrival order."""

import threading
from typing import Any, List, Tuple

from topictree.delivery import Delivery
from topictree.subscriber import Subscriber


class RecordingSubscriber(Subscriber):
    """Records deliveries; useful for tests and for inspecting routing."""

    def __init__(self, subscriber_id: str = "recorder") -> None:
        super().__init__(subscriber_id)
        self._deliveries: List[Delivery] = []
        self._lock = threading.Lock()

    def on_message(self, topic: str, message: Any) -> None:
        with self._lock:
            self._deliveries.append(Delivery(topic=topic, message=message))

    @property
    def deliveries(self) -> List[Delivery]:
        with self._lock:
            return list(self._deliveries)

    @property
    def messages(self) -> List[Tuple[str, Any]]:
        """(topic, message) pairs in arrival order."""
        return [d.as_tuple() for d in self.deliveries]

    def clear(self) -> None:
        with self._lock:
            self._deliveries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._deliveries)

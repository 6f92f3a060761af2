"""TopicTree: in-memory subscription tree matching published topics against wildcard filters."""

import threading
from typing import Any, Iterator, List, Optional, Tuple

from topictree.config import Settings, get_settings
from topictree.exceptions import InvalidTopic
from topictree.node import Callback, TopicNode
from topictree.observability import Metrics, get_logger
from topictree.validation import (
    DELIMITER,
    MULTI_LEVEL,
    SINGLE_LEVEL,
    split_topic,
    validate,
    validate_topic,
)


def _callback_name(callback: Callback) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


class TopicTree:
    """
    Routes published messages to callbacks subscribed with "/"-delimited topic filters.

    "+" matches exactly one level; "#" (last segment only) matches zero or more
    trailing levels, so "/home/#" receives "/home" as well as "/home/a/b".
    Callbacks are invoked synchronously as callback(topic, message), once per
    matching subscription, on the publishing thread.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._logger = get_logger("topictree.tree")
        self._root = TopicNode("")
        self._lock = threading.Lock()
        self._metrics = Metrics()
        self._metrics.set_gauge("nodes", 0)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def roots(self) -> List[TopicNode]:
        """Top-level nodes, one per distinct first segment."""
        with self._lock:
            return self._root.children

    def subscribe(self, pattern: str, callback: Callback) -> None:
        """
        Register callback for every topic matching pattern.

        Raises InvalidTopic if the pattern is malformed; the tree is left untouched.
        Subscribing the same callback twice delivers twice.
        """
        if not validate(pattern, self._settings.max_levels):
            self._reject(pattern, "subscribe")
        if not callable(callback):
            raise TypeError(f"callback must be callable, got {type(callback).__name__}")
        with self._lock:
            node = self._root
            created = 0
            for segment in split_topic(pattern):
                if node.child(segment) is None:
                    created += 1
                node = node.get_or_create_child(segment)
            node.add_callback(callback)
            if created:
                self._metrics.set_gauge("nodes", self._metrics.get_gauge("nodes") + created)
        self._metrics.increment("subscriptions")
        self._logger.debug(
            "subscribed",
            extra={"pattern": pattern, "callback": _callback_name(callback)},
        )

    def publish(self, topic: str, message: Any) -> int:
        """
        Deliver message to every callback whose pattern matches topic.

        Returns the number of deliveries. Raises InvalidTopic for malformed topics
        or topics containing wildcard segments. A callback that raises stops the
        delivery loop and the exception propagates to the caller.
        """
        callbacks = self.match(topic)
        self._metrics.increment("published")
        self._logger.debug(
            "delivering",
            extra={"topic": topic, "subscriber_count": len(callbacks)},
        )
        for callback in callbacks:
            try:
                callback(topic, message)
            except Exception as e:
                self._logger.exception(
                    "delivery_failed",
                    extra={"topic": topic, "callback": _callback_name(callback), "error": str(e)},
                )
                raise
            self._metrics.increment("deliveries")
        return len(callbacks)

    def match(self, topic: str) -> List[Callback]:
        """Return matching callbacks in delivery order without invoking them."""
        if not validate_topic(topic, self._settings.max_levels):
            self._reject(topic, "publish")
        segments = split_topic(topic)
        with self._lock:
            return self._collect(segments)

    def has_subscribers(self, topic: str) -> bool:
        return bool(self.match(topic))

    def _collect(self, segments: List[str]) -> List[Callback]:
        """Depth-first descent with an explicit stack; exact branch is explored before "+"."""
        matched: List[Callback] = []
        stack: List[Tuple[TopicNode, int]] = [(self._root, 0)]
        while stack:
            node, index = stack.pop()
            # "#" below this node absorbs whatever is left of the topic, including nothing.
            multi = node.child(MULTI_LEVEL)
            if multi is not None:
                matched.extend(multi.callbacks)
            if index == len(segments):
                matched.extend(node.callbacks)
                continue
            for candidate in (node.child(SINGLE_LEVEL), node.child(segments[index])):
                if candidate is not None:
                    stack.append((candidate, index + 1))
        return matched

    def _reject(self, topic: Any, operation: str) -> None:
        self._metrics.increment("invalid_topics")
        self._logger.warning("invalid_topic", extra={"topic": topic, "operation": operation})
        raise InvalidTopic(topic)

    def _subscribed_nodes(self) -> Iterator[Tuple[str, TopicNode]]:
        """Yield (pattern, node) for every node holding at least one callback."""
        stack: List[Tuple[str, TopicNode]] = [
            (DELIMITER + root.name, root) for root in reversed(self._root.children)
        ]
        while stack:
            path, node = stack.pop()
            if node.callbacks:
                yield path, node
            for child in reversed(node.children):
                stack.append((path + DELIMITER + child.name, child))

    def patterns(self) -> List[str]:
        """Sorted distinct patterns that currently have subscribers."""
        with self._lock:
            return sorted(path for path, _ in self._subscribed_nodes())

    def subscription_count(self) -> int:
        """Total registered callbacks, duplicates included."""
        with self._lock:
            return sum(len(node.callbacks) for node in self._root.walk())

    def stats(self) -> dict:
        """Snapshot of counters (subscriptions, published, deliveries, invalid_topics) and gauges (nodes)."""
        return self._metrics.snapshot()

    def __len__(self) -> int:
        return self.subscription_count()

    def __repr__(self) -> str:
        return f"TopicTree(roots={len(self._root.children)}, subscriptions={len(self)})"

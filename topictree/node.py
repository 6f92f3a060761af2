"""Topic tree node: one segment level holding children and the callbacks subscribed at its path."""

from typing import Callable, Any, Dict, Iterator, List, Optional

Callback = Callable[[str, Any], None]


class TopicNode:
    """A single segment ("bedroom", "+" or "#") in the subscription tree."""

    __slots__ = ("_name", "_children", "_callbacks")

    def __init__(self, name: str) -> None:
        self._name = name
        self._children: Dict[str, "TopicNode"] = {}
        self._callbacks: List[Callback] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def children(self) -> List["TopicNode"]:
        """Direct children in insertion order."""
        return list(self._children.values())

    @property
    def callbacks(self) -> List[Callback]:
        """Copy of the callbacks registered exactly at this node."""
        return list(self._callbacks)

    def child(self, name: str) -> Optional["TopicNode"]:
        return self._children.get(name)

    def get_or_create_child(self, name: str) -> "TopicNode":
        node = self._children.get(name)
        if node is None:
            node = TopicNode(name)
            self._children[name] = node
        return node

    def add_callback(self, callback: Callback) -> None:
        """Append a callback; duplicates are kept and each is invoked."""
        self._callbacks.append(callback)

    def walk(self) -> Iterator["TopicNode"]:
        """Yield this node and every descendant, depth first in insertion order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __repr__(self) -> str:
        return (
            f"TopicNode(name={self._name!r}, children={len(self._children)}, "
            f"callbacks={len(self._callbacks)})"
        )

"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Node | None = None


def delete_node(node: Node | None, delete: Deleter = None) -> None:
    """Release ``node``: pass its content to ``delete`` and unlink it.

    The node's successor is not touched; a ``None`` node is ignored.
    """
    if node is None:
        return
    if delete is not None:
        delete(node.content)
    node.next = None


class LinkedList:
    """A singly linked list whose iteration yields the stored contents."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for content in contents:
            node = Node(content)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end of the list and return its node."""
        node = Node(content)
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node
        return node

    def last(self) -> Node | None:
        """Return the last node, or None when the list is empty."""
        last = None
        for last in self._nodes():
            pass
        return last

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, passing every content to ``delete`` in order."""
        for node in self._nodes():
            delete_node(node, delete)
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, from first to last."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> LinkedList:
        """Return a new list holding ``func(content)`` for every content.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        tail: Node | None = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(delete)
            raise
        return result
"""Singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Node | None = None


def _as_node(item: Any) -> Node:
    return item if isinstance(item, Node) else Node(item)


class LinkedList:
    """A singly linked list addressed through its head node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in reversed(list(values)):
            self.add_front(Node(value))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, node: Node | Any) -> Node:
        """Make ``node`` the new head; a plain value is wrapped in a node."""
        node = _as_node(node)
        node.next = self.head
        self.head = node
        return node

    def add_back(self, node: Node | Any) -> Node:
        """Attach ``node`` after the last node; a plain value is wrapped."""
        node = _as_node(node)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the content of every node, head first."""
        for content in self:
            func(content)

    def map(
        self, func: Callable[[Any], Any], delete: Callable[[Any], Any]
    ) -> LinkedList:
        """New list holding ``func(content)`` for every node.

        If ``func`` raises, ``delete`` is called on every content already
        produced and the exception propagates.
        """
        if not callable(func) or not callable(delete):
            raise TypeError("func and delete must be callable")
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

    def clear(self, delete: Callable[[Any], Any]) -> None:
        """Call ``delete`` on every content, head first, and empty the list."""
        for node in list(self._nodes()):
            delete(node.content)
            node.next = None
        self.head = None

    def delete_one(self, node: Node, delete: Callable[[Any], Any]) -> None:
        """Unlink ``node`` from the list and call ``delete`` on its content."""
        previous: Node | None = None
        for current in self._nodes():
            if current is node:
                break
            previous = current
        else:
            raise ValueError("node is not part of this list")
        if previous is None:
            self.head = node.next
        else:
            previous.next = node.next
        node.next = None
        delete(node.content)
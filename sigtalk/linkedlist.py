"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that yields its contents when iterated."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the start of the list and return its node."""
        self.head = Node(content, self.head)
        return self.head

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def last(self) -> Optional[Node]:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, passing each content to ``delete`` in order."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content in order."""
        for content in self:
            func(content)

    def map(
        self, func: Callable[[Any], Any], delete: Deleter = None
    ) -> "LinkedList":
        """Return a new list of ``func(content)`` for each content.

        When ``func`` returns None, everything mapped so far is cleared with
        ``delete``; the None and the results after it are still kept.
        """
        result = LinkedList()
        for content in self:
            mapped = func(content)
            if mapped is None:
                result.clear(delete)
            result.push_back(mapped)
        return result
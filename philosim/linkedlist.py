"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Release = Optional[Callable[[Any], None]]


@dataclass
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list that keeps its head and tail."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert content at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the end and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call f on every content, front to back."""
        for content in self:
            f(content)

    def clear(self, release: Release = None) -> None:
        """Empty the list, handing every content to release first if given."""
        if release is not None:
            for content in self:
                release(content)
        self.head = None
        self._tail = None
        self._size = 0

    def map(self, f: Callable[[Any], Any], release: Release = None) -> "LinkedList":
        """Return a new list of f applied to every content.

        If f returns None for any content, the contents mapped so far are
        handed to release and ValueError is raised.
        """
        result = LinkedList()
        for content in self:
            value = f(content)
            if value is None:
                result.clear(release)
                raise ValueError("mapping function returned None")
            result.push_back(value)
        return result
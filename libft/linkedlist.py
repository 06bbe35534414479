"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

Deleter = Callable[[Any], Any]


@dataclass(eq=False)
class Node:
    """One link of a list: a value and the next link."""

    content: Any
    next: Optional[Node] = None

    def release(self, delete: Optional[Deleter]) -> None:
        """Hand the content to ``delete`` and detach the node.

        Nothing happens when ``delete`` is None.
        """
        if delete is None:
            return
        delete(self.content)
        self.next = None


@dataclass(eq=False)
class LinkedList:
    """A list held by its first node."""

    head: Optional[Node] = None

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def push_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the new head; a None node is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def push_back(self, node: Optional[Node]) -> None:
        """Link ``node`` after the last node; a None node is ignored."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def clear(self, delete: Optional[Deleter]) -> None:
        """Release every node through ``delete`` and empty the list.

        When ``delete`` is None the list is left untouched.
        """
        if delete is None:
            return
        for node in self._nodes():
            node.release(delete)
        self.head = None

    def for_each(self, func: Optional[Callable[[Any], Any]]) -> None:
        """Call ``func`` on every value in order."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self, func: Optional[Callable[[Any], Any]], delete: Optional[Deleter]
    ) -> LinkedList:
        """A new list of ``func(value)`` for every value.

        An empty list results when ``func`` or ``delete`` is None. If ``func``
        raises, the values built so far are released through ``delete`` and
        the exception propagates.
        """
        result = LinkedList()
        if func is None or delete is None:
            return result
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result
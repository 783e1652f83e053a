"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """One cell of a :class:`LinkedList`."""

    content: Any
    next: Optional["ListNode"] = None


class LinkedList:
    """A singly linked list that supports appending, prepending and mapping."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0
        for item in items:
            self.append(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    @property
    def head(self) -> ListNode | None:
        """The first node, or None when the list is empty."""
        return self._head

    def append(self, content: Any) -> ListNode:
        """Add ``content`` at the end of the list and return its node."""
        node = ListNode(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def prepend(self, content: Any) -> ListNode:
        """Add ``content`` at the front of the list and return its node."""
        node = ListNode(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def last(self) -> ListNode | None:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Empty the list, passing every content to ``delete`` first when given."""
        if delete is not None:
            for content in self:
                delete(content)
        self._head = None
        self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], None] | None = None,
    ) -> "LinkedList":
        """Return a new list of ``func(content)`` for every content.

        If ``func`` raises, the contents produced so far are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.append(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result
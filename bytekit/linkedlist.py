"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One cell of a linked list."""

    content: Any
    next: Optional["Node"] = None

    def __repr__(self) -> str:
        return f"Node({self.content!r})"


Deleter = Optional[Callable[[Any], Any]]


class LinkedList:
    """A singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._length = 0
        if items is not None:
            for item in items:
                self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._length += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1
        return node

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[Node]:
        """Return the last node, or ``None`` when the list is empty."""
        return self._tail

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first element, pass it to ``delete`` if given, and return it."""
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._length -= 1
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, passing each element to ``delete`` from last to first."""
        contents = list(self)
        self.head = None
        self._tail = None
        self._length = 0
        if delete is not None:
            for content in reversed(contents):
                delete(content)

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every element, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list holding ``f`` applied to every element.

        If ``f`` raises, the elements already produced are passed to
        ``delete`` (last to first) and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result
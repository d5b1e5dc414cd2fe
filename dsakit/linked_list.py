"""A singly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    value: int
    next: _Node | None = None


class LinkedList:
    """Singly linked list supporting insertion and removal at either end."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: int) -> None:
        """Insert value before the current head."""
        self._head = _Node(value, self._head)
        self._size += 1

    def push_back(self, value: int) -> None:
        """Append value after the current tail."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            current = self._head
            while current.next is not None:
                current = current.next
            current.next = node
        self._size += 1

    def pop_front(self) -> int | None:
        """Remove and return the head value; an empty list is left as it is."""
        if self._head is None:
            return None
        removed = self._head
        self._head = removed.next
        self._size -= 1
        return removed.value

    def remove(self, value: int) -> bool:
        """Remove the first node holding value; return whether one was found."""
        if self._head is None:
            return False
        if self._head.value == value:
            self.pop_front()
            return True
        current = self._head
        while current.next is not None and current.next.value != value:
            current = current.next
        if current.next is None:
            return False
        current.next = current.next.next
        self._size -= 1
        return True

    def __iter__(self) -> Iterator[int]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
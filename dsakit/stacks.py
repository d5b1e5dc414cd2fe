"""Stacks and monotonic-stack algorithms."""

from __future__ import annotations

from collections.abc import Sequence

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENING = frozenset(_PAIRS.values())


class Stack:
    """A last-in, first-out stack of integers."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Place value on top of the stack."""
        self._items.append(value)

    def pop(self) -> int | None:
        """Remove and return the top value; an empty stack is left as it is."""
        if not self._items:
            return None
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek from empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class MinStack:
    """A stack that reports its minimum in constant time."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minimums: list[int] = []

    def push(self, value: int) -> None:
        """Place value on top of the stack."""
        self._items.append(value)
        if not self._minimums or value <= self._minimums[-1]:
            self._minimums.append(value)

    def pop(self) -> None:
        """Remove the top value; an empty stack is left as it is."""
        if not self._items:
            return
        if self._items[-1] == self._minimums[-1]:
            self._minimums.pop()
        self._items.pop()

    def top(self) -> int:
        """Return the top value."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def minimum(self) -> int:
        """Return the smallest value currently on the stack."""
        if not self._minimums:
            raise IndexError("minimum of empty stack")
        return self._minimums[-1]

    def __len__(self) -> int:
        return len(self._items)


def next_greater_elements(values: Sequence[int]) -> list[int]:
    """For each element, the first strictly greater element to its right, or -1."""
    result = [-1] * len(values)
    pending: list[int] = []
    for position in range(len(values) - 1, -1, -1):
        value = values[position]
        while pending and pending[-1] <= value:
            pending.pop()
        if pending:
            result[position] = pending[-1]
        pending.append(value)
    return result


def previous_smaller_elements(values: Sequence[int]) -> list[int]:
    """For each element, the nearest strictly smaller element to its left, or -1."""
    result = []
    pending: list[int] = []
    for value in values:
        while pending and pending[-1] >= value:
            pending.pop()
        result.append(pending[-1] if pending else -1)
        pending.append(value)
    return result


def stock_span(prices: Sequence[int]) -> list[int]:
    """For each day, the count of consecutive days up to it priced no higher."""
    spans = []
    pending: list[int] = []
    for day, price in enumerate(prices):
        while pending and prices[pending[-1]] <= price:
            pending.pop()
        spans.append(day - pending[-1] if pending else day + 1)
        pending.append(day)
    return spans


def is_valid_brackets(text: str) -> bool:
    """Return True if every bracket in text is closed in the right order.

    Any character that is not an opening bracket is treated as a closer.
    """
    open_brackets: list[str] = []
    for char in text:
        if char in _OPENING:
            open_brackets.append(char)
        elif not open_brackets or _PAIRS.get(char) != open_brackets[-1]:
            return False
        else:
            open_brackets.pop()
    return not open_brackets
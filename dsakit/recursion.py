"""Recursive and backtracking algorithms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from itertools import pairwise


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of n non-attacking queens on an n-by-n board.

    Each solution is a list of rows drawn with 'Q' for a queen and '.' for an
    empty square. Solutions come in the order found by placing queens row by
    row, trying columns from left to right.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[list[str]] = []
    placed: list[int] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(
                ["." * col + "Q" + "." * (n - col - 1) for col in placed]
            )
            return
        for col in range(n):
            if col in columns or row + col in diagonals or row - col in anti_diagonals:
                continue
            placed.append(col)
            columns.add(col)
            diagonals.add(row + col)
            anti_diagonals.add(row - col)
            place(row + 1)
            placed.pop()
            columns.discard(col)
            diagonals.discard(row + col)
            anti_diagonals.discard(row - col)

    place(0)
    return solutions


def triangular_sum(n: int) -> int:
    """Return 1 + 2 + ... + n for a positive n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return sum(range(1, n + 1))


def permutations(values: Iterable[int]) -> list[list[int]]:
    """Return all orderings of values, generated by swapping into each position."""
    items = list(values)
    result: list[list[int]] = []

    def permute(position: int) -> None:
        if position == len(items):
            result.append(items.copy())
            return
        for other in range(position, len(items)):
            items[position], items[other] = items[other], items[position]
            permute(position + 1)
            items[position], items[other] = items[other], items[position]

    permute(0)
    return result


def factorial(n: int) -> int:
    """Return n! for a non-negative n."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.factorial(n)


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if values never decrease."""
    return all(left <= right for left, right in pairwise(values))


def _partition(values: MutableSequence[int], start: int, end: int) -> int:
    pivot = values[end]
    boundary = start - 1
    for position in range(start, end):
        if values[position] <= pivot:
            boundary += 1
            values[position], values[boundary] = values[boundary], values[position]
    boundary += 1
    values[end], values[boundary] = values[boundary], values[end]
    return boundary


def _quick_sort(values: MutableSequence[int], start: int, end: int) -> None:
    while start < end:
        pivot = _partition(values, start, end)
        # Recurse into the smaller side to keep the depth logarithmic.
        if pivot - start < end - pivot:
            _quick_sort(values, start, pivot - 1)
            start = pivot + 1
        else:
            _quick_sort(values, pivot + 1, end)
            end = pivot - 1


def quick_sort(values: MutableSequence[int]) -> None:
    """Sort values in place with quicksort, using the last element as pivot."""
    _quick_sort(values, 0, len(values) - 1)


def binary_search_recursive(values: Sequence[int], target: int) -> int:
    """Return an index of target in the ascending values, or -1 if absent."""

    def search(start: int, end: int) -> int:
        if start > end:
            return -1
        mid = start + (end - start) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            return search(mid + 1, end)
        return search(start, mid - 1)

    return search(0, len(values) - 1)


def subsets(values: Iterable[int]) -> Iterator[list[int]]:
    """Yield every subset of values, trying inclusion before exclusion."""
    items = list(values)

    def build(position: int, chosen: list[int]) -> Iterator[list[int]]:
        if position == len(items):
            yield list(chosen)
            return
        chosen.append(items[position])
        yield from build(position + 1, chosen)
        chosen.pop()
        yield from build(position + 1, chosen)

    yield from build(0, [])
"""Classic array algorithms: subarray sums, searches, majority votes and more."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Extremes:
    """Smallest and largest values of a sequence with their first positions."""

    smallest: int
    smallest_index: int
    largest: int
    largest_index: int


def _require_items(values: Sequence[int], what: str) -> None:
    if not values:
        raise ValueError(f"{what} requires at least one element")


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of any non-empty contiguous run (Kadane)."""
    _require_items(values, "max_subarray_sum")
    current = best = values[0]
    for value in values[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def find_in_matrix(
    matrix: Sequence[Sequence[int]], key: int
) -> tuple[int, int] | None:
    """Return the (row, column) of the first cell equal to key, or None."""
    for row_index, row in enumerate(matrix):
        for col_index, cell in enumerate(row):
            if cell == key:
                return row_index, col_index
    return None


def majority_candidate(values: Sequence[int]) -> int:
    """Return the Boyer-Moore voting candidate for the majority element."""
    _require_items(values, "majority_candidate")
    candidate = values[0]
    counter = 1
    for value in values[1:]:
        if value == candidate:
            counter += 1
        else:
            counter -= 1
            if counter == 0:
                candidate = value
                counter = 1
    return candidate


def product_except_self(values: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    output = []
    prefix = 1
    for value in values:
        output.append(prefix)
        prefix *= value
    suffix = 1
    for position in range(len(values) - 1, -1, -1):
        output[position] *= suffix
        suffix *= values[position]
    return output


def reverse_in_place(values: MutableSequence[int]) -> None:
    """Reverse a mutable sequence in place by swapping from both ends."""
    start, end = 0, len(values) - 1
    while start < end:
        values[start], values[end] = values[end], values[start]
        start += 1
        end -= 1


def smallest_and_largest(values: Sequence[int]) -> Extremes:
    """Return the smallest and largest values and where each first occurs."""
    _require_items(values, "smallest_and_largest")
    smallest_index = min(range(len(values)), key=values.__getitem__)
    largest_index = max(range(len(values)), key=values.__getitem__)
    return Extremes(
        smallest=values[smallest_index],
        smallest_index=smallest_index,
        largest=values[largest_index],
        largest_index=largest_index,
    )


def subarrays(values: Sequence[int]) -> Iterator[list[int]]:
    """Yield every contiguous subarray, ordered by start then by end."""
    size = len(values)
    for start in range(size):
        for end in range(start + 1, size + 1):
            yield list(values[start:end])


def second_largest(values: Sequence[int]) -> int:
    """Return the largest value strictly smaller than the maximum."""
    if len(values) < 2:
        raise ValueError("second_largest requires at least 2 elements")
    first: int | None = None
    second: int | None = None
    for value in values:
        if first is None or value > first:
            second = first
            first = value
        elif value < first and (second is None or value > second):
            second = value
    if second is None:
        raise ValueError("no second largest element: all elements are equal")
    return second
"""Linear and binary search algorithms over sequences and answer ranges."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(values: Sequence[int], target: int) -> int:
    """Return an index of target in the ascending values, or -1 if absent."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if target > values[mid]:
            start = mid + 1
        elif target < values[mid]:
            end = mid - 1
        else:
            return mid
    return -1


def _fits(pages: Sequence[int], students: int, limit: int) -> bool:
    student_count = 1
    page_sum = 0
    for book in pages:
        if page_sum + book <= limit:
            page_sum += book
        else:
            student_count += 1
            if student_count > students or book > limit:
                return False
            page_sum = book
    return True


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum of pages given to any one student.

    Books are handed out in order as contiguous runs, one run per student.
    """
    if students < 1:
        raise ValueError("there must be at least one student")
    start, end = 0, sum(pages)
    answer = -1
    while start <= end:
        mid = start + (end - start) // 2
        if _fits(pages, students, mid):
            answer = mid
            end = mid - 1
        else:
            start = mid + 1
    return answer


def first_occurrence(values: Sequence[int], target: int) -> int:
    """Return the lowest index of target in the ascending values, or -1."""
    start, end = 0, len(values) - 1
    answer = -1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            answer = mid
            end = mid - 1
        elif values[mid] < target:
            start = mid + 1
        else:
            end = mid - 1
    return answer


def last_occurrence(values: Sequence[int], target: int) -> int:
    """Return the highest index of target in the ascending values, or -1."""
    start, end = 0, len(values) - 1
    answer = -1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            answer = mid
            start = mid + 1
        elif values[mid] < target:
            start = mid + 1
        else:
            end = mid - 1
    return answer


def count_occurrences(values: Sequence[int], target: int) -> int:
    """Return how many times target appears in the ascending values."""
    first = first_occurrence(values, target)
    if first == -1:
        return 0
    return last_occurrence(values, target) - first + 1


def find_pivot(values: Sequence[int]) -> int:
    """Return the index of the largest element of a rotated ascending sequence.

    Returns -1 when the sequence is not rotated.
    """
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if mid < end and values[mid] > values[mid + 1]:
            return mid
        if mid > start and values[mid] < values[mid - 1]:
            return mid - 1
        if values[start] >= values[mid]:
            end = mid - 1
        else:
            start = mid + 1
    return -1


def linear_search(values: Sequence[int], target: int) -> int:
    """Return the first index of target in values, or -1 if absent."""
    for position, value in enumerate(values):
        if value == target:
            return position
    return -1


def _climb_to_peak(values: Sequence[int]) -> int:
    if not values:
        raise ValueError("cannot find a peak in an empty sequence")
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if values[mid] < values[mid + 1]:
            start = mid + 1
        else:
            end = mid
    return start


def find_peak(values: Sequence[int]) -> int:
    """Return the index of an element no smaller than its neighbours."""
    return _climb_to_peak(values)


def peak_index_in_mountain(values: Sequence[int]) -> int:
    """Return the index of the summit of a strictly rising then falling sequence."""
    return _climb_to_peak(values)


def single_non_duplicate(values: Sequence[int]) -> int:
    """Return the one element that appears once in a sorted sequence of pairs."""
    if not values:
        raise ValueError("sequence must not be empty")
    size = len(values)
    low, high = 0, size - 1
    while low < high:
        mid = low + (high - low) // 2
        if mid % 2 == 0:
            if mid + 1 < size and values[mid] == values[mid + 1]:
                low = mid + 2
            else:
                high = mid
        elif mid - 1 >= 0 and values[mid] == values[mid - 1]:
            low = mid + 1
        else:
            high = mid - 1
    return values[low]


def integer_sqrt(n: int) -> int:
    """Return the largest integer whose square does not exceed n."""
    if n < 0:
        raise ValueError("square root of a negative number")
    start, end = 0, n
    answer = 0
    while start <= end:
        mid = start + (end - start) // 2
        square = mid * mid
        if square == n:
            return mid
        if square < n:
            answer = mid
            start = mid + 1
        else:
            end = mid - 1
    return answer
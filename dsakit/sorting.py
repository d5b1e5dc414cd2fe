"""Elementary in-place sorting and merging."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def dutch_flag_sort(values: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    if any(value not in (0, 1, 2) for value in values):
        raise ValueError("values must each be 0, 1 or 2")
    low = mid = 0
    high = len(values) - 1
    while mid <= high:
        if values[mid] == 0:
            values[low], values[mid] = values[mid], values[low]
            low += 1
            mid += 1
        elif values[mid] == 1:
            mid += 1
        else:
            values[mid], values[high] = values[high], values[mid]
            high -= 1


def bubble_sort(values: MutableSequence[int]) -> None:
    """Sort values in place by repeatedly swapping adjacent out-of-order pairs."""
    size = len(values)
    for done in range(size - 1):
        for position in range(size - done - 1):
            if values[position] > values[position + 1]:
                values[position], values[position + 1] = (
                    values[position + 1],
                    values[position],
                )


def selection_sort(values: MutableSequence[int]) -> None:
    """Sort values in place by moving the smallest remaining value forward."""
    size = len(values)
    for position in range(size - 1):
        smallest = min(range(position, size), key=values.__getitem__)
        values[position], values[smallest] = values[smallest], values[position]


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first n items of nums2 into the first m items of nums1.

    Both prefixes must be ascending; nums1 must have room for m + n items.
    The merged result fills the first m + n positions of nums1.
    """
    if m < 0 or n < 0:
        raise ValueError("counts must not be negative")
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for m + n elements")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n elements")
    i, j, write = m - 1, n - 1, m + n - 1
    while i >= 0 and j >= 0:
        if nums1[i] > nums2[j]:
            nums1[write] = nums1[i]
            i -= 1
        else:
            nums1[write] = nums2[j]
            j -= 1
        write -= 1
    while j >= 0:
        nums1[write] = nums2[j]
        j -= 1
        write -= 1
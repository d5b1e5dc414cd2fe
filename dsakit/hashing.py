"""Hash-set and pointer techniques: duplicates, k-sums, missing values."""

from __future__ import annotations

from collections.abc import Sequence


def find_duplicate(values: Sequence[int]) -> int:
    """Return the repeated value among n + 1 numbers drawn from 1..n.

    Uses Floyd's cycle detection, treating each value as a link to an index.
    """
    size = len(values)
    if size < 2:
        raise ValueError("at least two values are required")
    if any(not 1 <= value <= size - 1 for value in values):
        raise ValueError(f"values must lie between 1 and {size - 1}")
    slow = fast = 0
    while True:
        slow = values[slow]
        fast = values[values[fast]]
        if slow == fast:
            break
    slow = 0
    while slow != fast:
        slow = values[slow]
        fast = values[fast]
    return slow


def four_sum(values: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct ascending quadruplet of values that sums to target."""
    nums = sorted(values)
    size = len(nums)
    result: list[list[int]] = []
    if size < 4:
        return result
    for i in range(size):
        if i > 0 and nums[i] == nums[i - 1]:
            continue
        for j in range(i + 1, size - 2):
            if j > i + 1 and nums[j] == nums[j - 1]:
                continue
            left, right = j + 1, size - 1
            while left < right:
                total = nums[i] + nums[j] + nums[left] + nums[right]
                if total == target:
                    result.append([nums[i], nums[j], nums[left], nums[right]])
                    while left < right and nums[left] == nums[left + 1]:
                        left += 1
                    while left < right and nums[right] == nums[right - 1]:
                        right -= 1
                    left += 1
                    right -= 1
                elif total < target:
                    left += 1
                else:
                    right -= 1
    return result


def missing_and_repeated(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return (missing, repeated) for an n-by-n grid meant to hold 1..n*n.

    Either part is -1 when there is no such value.
    """
    seen: set[int] = set()
    repeated = -1
    for row in grid:
        for cell in row:
            if cell in seen:
                repeated = cell
            else:
                seen.add(cell)
    size = len(grid)
    missing = next(
        (value for value in range(1, size * size + 1) if value not in seen), -1
    )
    return missing, repeated


def two_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the indices (earlier, later) of the first pair summing to target.

    The pair found is the one whose later index is smallest. Returns None
    when no pair exists.
    """
    seen: dict[int, int] = {}
    for position, value in enumerate(values):
        partner = target - value
        if partner in seen:
            return seen[partner], position
        seen[value] = position
    return None
import math

import pytest

from dsakit.arrays import (
    Extremes,
    find_in_matrix,
    majority_candidate,
    max_subarray_sum,
    product_except_self,
    reverse_in_place,
    second_largest,
    smallest_and_largest,
    subarrays,
)


def test_max_subarray_sum_worked_example():
    assert max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_sum_all_negative_picks_largest_element():
    assert max_subarray_sum([-8, -3, -6]) == -3


def test_max_subarray_sum_all_positive_is_total():
    values = [3, 1, 4, 1, 5]
    assert max_subarray_sum(values) == sum(values)


def test_max_subarray_sum_is_at_least_every_subarray():
    values = [2, -7, 3, -1, 4, -9, 5]
    best = max_subarray_sum(values)
    assert all(sum(part) <= best for part in subarrays(values))
    assert any(sum(part) == best for part in subarrays(values))


def test_max_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_find_in_matrix_locates_key():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9], [10, 11, 12]]
    row, col = find_in_matrix(matrix, 12)
    assert matrix[row][col] == 12
    assert (row, col) == (3, 2)


def test_find_in_matrix_missing_returns_none():
    assert find_in_matrix([[1, 2], [3, 4]], 99) is None


def test_find_in_matrix_returns_first_occurrence():
    matrix = [[0, 7], [7, 0]]
    assert find_in_matrix(matrix, 7) == (0, 1)


def test_majority_candidate_source_example():
    assert majority_candidate([2, 2, 1, 1, 1, 1, 2]) == 1


def test_majority_candidate_true_majority():
    values = [5, 3, 5, 5, 2, 5]
    assert majority_candidate(values) == 5


def test_majority_candidate_empty_raises():
    with pytest.raises(ValueError):
        majority_candidate([])


def test_product_except_self_invariant():
    values = [1, 2, 3, 4]
    result = product_except_self(values)
    total = math.prod(values)
    assert len(result) == len(values)
    assert all(r * v == total for r, v in zip(result, values))


def test_product_except_self_with_zero():
    result = product_except_self([2, 0, 5])
    assert result[0] == 0
    assert result[2] == 0
    assert result[1] == 2 * 5


def test_product_except_self_empty():
    assert product_except_self([]) == []


def test_reverse_in_place():
    values = [4, 2, 7, 8, 1, 2, 5]
    original = list(values)
    assert reverse_in_place(values) is None
    assert values == original[::-1]


def test_reverse_in_place_twice_restores():
    values = [1, 2, 3, 4]
    reverse_in_place(values)
    reverse_in_place(values)
    assert values == [1, 2, 3, 4]


def test_smallest_and_largest():
    values = [1, 2, 3, 5, -10]
    result = smallest_and_largest(values)
    assert isinstance(result, Extremes)
    assert result.smallest == min(values)
    assert result.largest == max(values)
    assert values[result.smallest_index] == result.smallest
    assert values[result.largest_index] == result.largest


def test_smallest_and_largest_first_occurrence():
    values = [3, 1, 9, 1, 9]
    result = smallest_and_largest(values)
    assert result.smallest_index == values.index(1)
    assert result.largest_index == values.index(9)


def test_smallest_and_largest_empty_raises():
    with pytest.raises(ValueError):
        smallest_and_largest([])


def test_subarrays_order():
    assert list(subarrays([1, 2, 3])) == [
        [1],
        [1, 2],
        [1, 2, 3],
        [2],
        [2, 3],
        [3],
    ]


def test_subarrays_count_is_triangular():
    values = list(range(6))
    parts = list(subarrays(values))
    assert len(parts) == len(values) * (len(values) + 1) // 2


def test_subarrays_empty():
    assert list(subarrays([])) == []


def test_second_largest_source_example():
    assert second_largest([12, 35, 1, 10, 34, 1]) == 34


def test_second_largest_ignores_duplicate_maximum():
    assert second_largest([7, 7, 3]) == 3


def test_second_largest_too_short_raises():
    with pytest.raises(ValueError):
        second_largest([5])


def test_second_largest_all_equal_raises():
    with pytest.raises(ValueError):
        second_largest([4, 4, 4])
# dsakit

A small library of classic data-structure and algorithm routines, written as
plain Python functions and classes with no third-party dependencies.
It needs Python 3.10 or later.

## Installation

```
pip install dsakit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `max_subarray_sum`, `find_in_matrix`, `majority_candidate`, `product_except_self`, `reverse_in_place`, `smallest_and_largest` (returns `Extremes`), `subarrays`, `second_largest` |
| `dsakit.strings` | `is_armstrong`, `is_palindrome`, `remove_occurrences`, `reverse_words` |
| `dsakit.linked_list` | `LinkedList` with `push_front`, `push_back`, `pop_front`, `remove`, iteration, `len()` and `str()` |
| `dsakit.stacks` | `Stack` (`push`, `pop`, `peek`, `is_empty`), `MinStack` (`push`, `pop`, `top`, `minimum`), `next_greater_elements`, `previous_smaller_elements`, `stock_span`, `is_valid_brackets` |
| `dsakit.vehicles` | `Vehicle`, `NormalCar` (15% tax), `LuxuryCar` (20% tax plus a fixed 30000 duty), each with `taxes()` and `total_cost()` |
| `dsakit.recursion` | `solve_n_queens`, `triangular_sum`, `permutations`, `factorial`, `is_sorted`, `quick_sort`, `binary_search_recursive`, `subsets` |
| `dsakit.sorting` | `dutch_flag_sort`, `bubble_sort`, `selection_sort`, `merge_sorted` |
| `dsakit.searching` | `binary_search`, `allocate_books`, `first_occurrence`, `last_occurrence`, `count_occurrences`, `find_pivot`, `linear_search`, `find_peak`, `peak_index_in_mountain`, `single_non_duplicate`, `integer_sqrt` |
| `dsakit.hashing` | `find_duplicate`, `four_sum`, `missing_and_repeated`, `two_sum` |
| `dsakit.bits` | `to_binary8`, `bitwise_operations` (returns `BitwiseResult`), `left_shift`, `right_shift`, `is_power_of_two` |
| `dsakit.numbers` | `fibonacci`, `reverse_integer` |
| `dsakit.patterns` | `countdown_triangle`, `star_triangle`, `index_letter_square`, `numbered_square`, `row_numbered_square`, `alphabet_rows`, `right_aligned_spaced_triangle`, `right_aligned_star_triangle`, `letter_triangle`, `number_letter_triangle` |

## Examples

```python
from dsakit.arrays import max_subarray_sum, product_except_self
from dsakit.searching import integer_sqrt, binary_search
from dsakit.stacks import MinStack, is_valid_brackets
from dsakit.linked_list import LinkedList
from dsakit.recursion import solve_n_queens
from dsakit.patterns import star_triangle

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
product_except_self([1, 2, 3, 4])                  # [24, 12, 8, 6]
integer_sqrt(20)                                   # 4
binary_search([-1, 0, 3, 4, 5, 9, 12], 4)          # 3
is_valid_brackets("([{}])")                        # True

stack = MinStack()
stack.push(3)
stack.push(1)
stack.minimum()                                    # 1

items = LinkedList()
for value in (1, 2, 3):
    items.push_back(value)
str(items)                                         # "1 -> 2 -> 3 -> NULL"

len(solve_n_queens(4))                             # 2

print("\n".join(star_triangle(3)))
```

Functions that sort or rearrange a list in place (`reverse_in_place`,
`quick_sort`, `dutch_flag_sort`, `bubble_sort`, `selection_sort`,
`merge_sorted`) say so in their docstrings and return `None`; the others leave
their arguments untouched. Invalid input, such as an empty sequence where an
element is needed or a negative number where none makes sense, raises
`ValueError`; reading from an empty `Stack` or `MinStack` raises `IndexError`.

## What it does not do

dsakit is a library only. It installs no command-line programs and reads
nothing from standard input; the functions in `dsakit.patterns` return lists
of strings, one per row, and leave printing to the caller.
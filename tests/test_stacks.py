import pytest

from dsakit.stacks import (
    MinStack,
    Stack,
    is_valid_brackets,
    next_greater_elements,
    previous_smaller_elements,
    stock_span,
)


def test_stack_demo_sequence():
    stack = Stack()
    for value in (10, 20, 30):
        stack.push(value)
    assert stack.peek() == 30
    assert stack.pop() == 30
    assert stack.peek() == 20
    assert stack.pop() == 20
    assert stack.peek() == 10
    stack.pop()
    assert stack.is_empty() is True
    assert stack.pop() is None
    assert stack.is_empty() is True


def test_stack_peek_empty_raises():
    with pytest.raises(IndexError):
        Stack().peek()


def test_stack_length_tracks_pushes():
    stack = Stack()
    stack.push(1)
    stack.push(2)
    assert len(stack) == 2
    assert stack.is_empty() is False


def test_min_stack_tracks_minimum():
    stack = MinStack()
    stack.push(5)
    stack.push(3)
    stack.push(7)
    stack.push(3)
    assert stack.minimum() == 3
    assert stack.top() == 3
    stack.pop()
    assert stack.minimum() == 3
    stack.pop()
    stack.pop()
    assert stack.minimum() == 5
    assert stack.top() == 5


def test_min_stack_empty_behaviour():
    stack = MinStack()
    stack.pop()
    assert len(stack) == 0
    with pytest.raises(IndexError):
        stack.top()
    with pytest.raises(IndexError):
        stack.minimum()


def test_min_stack_minimum_matches_min_of_contents():
    values = (4, 9, 2, 2, 8, 1, 6)
    stack = MinStack()
    for count, value in enumerate(values, start=1):
        stack.push(value)
        assert stack.minimum() == min(values[:count])
    for remaining in range(len(values), 0, -1):
        assert stack.minimum() == min(values[:remaining])
        assert stack.top() == values[remaining - 1]
        stack.pop()
    assert len(stack) == 0


def test_next_greater_example():
    assert next_greater_elements([6, 8, 0, 1, 2, 3]) == [8, -1, 1, 2, 3, -1]


@pytest.mark.parametrize("values", [[], [1], [3, 1, 4, 1, 5, 9, 2, 6], [5, 5, 5]])
def test_next_greater_invariant(values):
    result = next_greater_elements(values)
    assert len(result) == len(values)
    for position, (value, greater) in enumerate(zip(values, result)):
        later = values[position + 1 :]
        if greater == -1:
            assert all(other <= value for other in later)
        else:
            first = next(other for other in later if other > value)
            assert greater == first


def test_previous_smaller_example():
    assert previous_smaller_elements([3, 1, 0, 8, 6]) == [-1, -1, -1, 0, 0]


@pytest.mark.parametrize("values", [[], [2], [4, 5, 2, 10, 8], [1, 1, 1]])
def test_previous_smaller_invariant(values):
    result = previous_smaller_elements(values)
    for position, (value, smaller) in enumerate(zip(values, result)):
        earlier = values[:position]
        if smaller == -1:
            assert all(other >= value for other in earlier)
        else:
            nearest = next(other for other in reversed(earlier) if other < value)
            assert smaller == nearest


def test_stock_span_example():
    assert stock_span([100, 80, 60, 70, 60, 75, 85]) == [1, 1, 1, 2, 1, 4, 6]


def test_stock_span_increasing_prices_span_all_days():
    prices = [1, 2, 3, 4]
    assert stock_span(prices) == [1, 2, 3, 4]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("()[]{}", True),
        ("([{}])", True),
        ("(]", False),
        ("((())", False),
        ("{[(])}", False),
        ("", True),
        (")", False),
        ("(a)", False),
    ],
)
def test_is_valid_brackets(text, expected):
    assert is_valid_brackets(text) is expected
"""Text patterns of numbers, letters and stars, one string per row."""

from __future__ import annotations


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def countdown_triangle(n: int) -> list[str]:
    """Rows counting down from the row number to 1: '1', '21', '321', ..."""
    return ["".join(str(j) for j in range(row, 0, -1)) for row in range(1, n + 1)]


def star_triangle(n: int) -> list[str]:
    """Rows of ' * ' repeated once, twice, ... n times."""
    return [" * " * row for row in range(1, n + 1)]


def index_letter_square(n: int) -> list[str]:
    """An n-by-n square whose row i repeats 'i X ', X being the i-th letter."""
    return [f"{row} {_letter(row)} " * n for row in range(n)]


def numbered_square(n: int) -> list[str]:
    """An n-by-n square of the numbers 1 to n*n, each followed by a space."""
    return [
        "".join(f"{row * n + col + 1} " for col in range(n)) for row in range(n)
    ]


def row_numbered_square(n: int) -> list[str]:
    """An n-by-n square whose row i repeats 'i X ', counting rows from 1."""
    return [f"{row + 1} {_letter(row)} " * n for row in range(n)]


def alphabet_rows(n: int) -> list[str]:
    """n identical rows of the first n letters."""
    letters = "".join(_letter(col) for col in range(n))
    return [letters for _ in range(n)]


def right_aligned_spaced_triangle(n: int) -> list[str]:
    """A right-aligned triangle of '* ' cells."""
    return [" " * (n - row) + "* " * row for row in range(1, n + 1)]


def right_aligned_star_triangle(n: int) -> list[str]:
    """A right-aligned triangle of stars, every row n characters wide."""
    return [" " * (n - row) + "*" * row for row in range(1, n + 1)]


def letter_triangle(n: int) -> list[str]:
    """Row i repeats one letter i times, starting from 'B'."""
    return [_letter(row) * row for row in range(1, n + 1)]


def number_letter_triangle(n: int) -> list[str]:
    """Row i pairs the numbers i, i+1, ... with the letters A, B, ..."""
    return [
        "".join(f"{row + col} {_letter(col)} " for col in range(row))
        for row in range(1, n + 1)
    ]
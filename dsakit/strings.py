"""String and digit puzzles: Armstrong numbers, palindromes, word reversal."""

from __future__ import annotations


def is_armstrong(n: int) -> bool:
    """Return True if n equals the sum of the cubes of its digits."""
    sign = -1 if n < 0 else 1
    total = sum(int(digit) ** 3 for digit in str(abs(n)))
    return sign * total == n


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_palindrome(text: str) -> bool:
    """Return True if text reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [char.lower() for char in text if _is_ascii_alnum(char)]
    return cleaned == cleaned[::-1]


def remove_occurrences(text: str, part: str) -> str:
    """Repeatedly remove the leftmost occurrence of part until none is left."""
    if not part:
        raise ValueError("part must not be empty")
    while part in text:
        text = text.replace(part, "", 1)
    return text


def reverse_words(text: str) -> str:
    """Return the space-separated words of text in reverse order, single-spaced."""
    words = [word for word in text.split(" ") if word]
    if not words:
        raise ValueError("text contains no words")
    return " ".join(reversed(words))
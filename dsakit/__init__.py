"""Classic data-structure and algorithm routines: arrays, strings, linked lists,
stacks, searching, sorting, recursion, hashing, bits, numbers and text patterns."""

__version__ = "0.1.0"
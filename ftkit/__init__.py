"""Helpers for ASCII characters, strings, number conversion, printf-style formatting, line reading, memory buffers, random numbers and a binary search tree."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "chars",
    "convert",
    "gnl",
    "memory",
    "numbers",
    "printf",
    "strings",
]
"""Searching, comparing and slicing strings.

Search functions return an index into the text, or None when nothing is found.
Comparisons give the difference of the first pair of differing character codes.
The end of a string compares as a NUL character.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Optional

_NUL = "\0"


def skip_blank(text: str) -> str:
    """Return text without its leading spaces and tabs."""
    return text.lstrip(" \t")


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first c in text; NUL is found at the end of the text."""
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return index if index >= 0 else None


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last c in text; NUL is found at the end of the text."""
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return index if index >= 0 else None


def _compare(pairs) -> int:
    for a, b in pairs:
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; negative, zero or positive like the C function."""
    return _compare(zip_longest(s1, s2, fillvalue=_NUL))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of two strings."""
    if n <= 0:
        return 0
    return _compare(islice(zip_longest(s1, s2, fillvalue=_NUL), n))


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of little inside the first length characters of big.

    An empty little is found at index 0.
    """
    if not little:
        return 0
    index = big.find(little, 0, max(0, min(length, len(big))))
    return index if index >= 0 else None


def strpbrk(text: str, charset: str) -> Optional[int]:
    """Index of the first character of text that belongs to charset."""
    return next((i for i, c in enumerate(text) if c in charset), None)


def strtrim(text: str, charset: str) -> str:
    """Remove characters of charset from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text from start, clamped to the text."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    start = min(start, len(text))
    return text[start:start + length]


def strmapi(text: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, char) for each character.

    f is called from the last character to the first.
    """
    mapped = [f(i, c) for i, c in reversed(list(enumerate(text)))]
    return "".join(reversed(mapped))
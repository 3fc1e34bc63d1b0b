"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
Only the ASCII ranges are recognised, whatever the locale.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def isalpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def isblank(c: CharLike) -> bool:
    """True for a space or a horizontal tab."""
    return _code(c) in (ord(" "), ord("\t"))


def isprint(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def isspace(c: CharLike) -> bool:
    """True for a space or one of tab, newline, vertical tab, form feed, return."""
    code = _code(c)
    return ord("\t") <= code <= ord("\r") or code == ord(" ")


def _convert(c: CharLike, low: str, high: str, shift: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else comes back unchanged."""
    return _convert(c, "a", "z", ord("A") - ord("a"))


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else comes back unchanged."""
    return _convert(c, "A", "Z", ord("a") - ord("A"))
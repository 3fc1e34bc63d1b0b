"""Number parsing and formatting, digit counting and word splitting."""

from __future__ import annotations

from itertools import groupby

from .chars import isdigit, isspace

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _wrap32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 2**32 if n > INT_MAX else n


def _sign_prefix(text: str) -> tuple[int, int]:
    """Skip leading whitespace and one optional sign; return (sign, index)."""
    i = 0
    while i < len(text) and isspace(text[i]):
        i += 1
    sign = 1
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    return sign, i


def _digit_run(text: str, start: int) -> int:
    end = start
    while end < len(text) and isdigit(text[end]):
        end += 1
    return end


def _decimal(text: str, start: int, end: int) -> float:
    res = 0.0
    for c in text[start:end]:
        res = res * 10 + (ord(c) - ord("0"))
    return res


def _fraction(text: str, start: int, end: int) -> float:
    res = 0.0
    mod = 10.0
    for c in text[start:end]:
        res += (ord(c) - ord("0")) / mod
        mod *= 10
    return res


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping like a 32-bit int; 0 if none."""
    sign, i = _sign_prefix(text)
    end = _digit_run(text, i)
    value = int(text[i:end]) if end > i else 0
    return _wrap32(value * sign)


def atof(text: str) -> float:
    """Parse a leading decimal number with optional fraction; 0.0 if none."""
    sign, i = _sign_prefix(text)
    end = _digit_run(text, i)
    res = _decimal(text, i, end)
    if end < len(text) and text[end] == ".":
        frac_end = _digit_run(text, end + 1)
        res += _fraction(text, end + 1, frac_end)
    return res * sign


def strtoi(text: str) -> tuple[int, int]:
    """Parse a leading int; return (value, index just past it).

    With no digits the result is (0, 0).  A value outside the 32-bit
    range raises OverflowError.
    """
    sign, i = _sign_prefix(text)
    if i >= len(text) or not isdigit(text[i]):
        return 0, 0
    res = 0
    while i < len(text) and isdigit(text[i]):
        res = res * 10 + (ord(text[i]) - ord("0"))
        if not INT_MIN <= res * sign <= INT_MAX:
            raise OverflowError(f"integer out of range in {text!r}")
        i += 1
    return res * sign, i


def strtof(text: str) -> tuple[float, int]:
    """Parse a leading decimal number; return (value, index just past it).

    With no digits before an optional fraction the result is (0.0, 0).
    """
    sign, i = _sign_prefix(text)
    if i >= len(text) or not isdigit(text[i]):
        return 0.0, 0
    end = _digit_run(text, i)
    res = _decimal(text, i, end)
    if end < len(text) and text[end] == ".":
        frac_end = _digit_run(text, end + 1)
        res += _fraction(text, end + 1, frac_end)
        end = frac_end
    return res * sign, end


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    return str(int(n))


def _count_digits(n: int, base: int) -> int:
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    length = 1
    while n // base:
        n //= base
        length += 1
    return length


def bytelen(n: int, base: int) -> int:
    """Number of digits of an unsigned byte in the given base."""
    return _count_digits(n & 0xFF, base)


def intlen(n: int, base: int) -> int:
    """Number of characters of a signed int in the given base, sign included."""
    length = _count_digits(abs(n), base)
    return length + 1 if n < 0 else length


def uintlen(n: int, base: int) -> int:
    """Number of digits of an unsigned 32-bit int in the given base."""
    return _count_digits(n & 0xFFFFFFFF, base)


def llulen(n: int, base: int) -> int:
    """Number of digits of an unsigned 64-bit int in the given base."""
    return _count_digits(n & 0xFFFFFFFFFFFFFFFF, base)


def word_len(text: str, sep: str) -> int:
    """Length of the run at the start of text holding no character of sep."""
    length = 0
    for c in text:
        if c in sep:
            break
        length += 1
    return length


def split(text: str, sep: str) -> list[str]:
    """Split text on any character of sep, dropping empty words."""
    return ["".join(group) for is_sep, group in groupby(text, key=lambda c: c in sep) if not is_sep]


def count_words(text: str, sep: str) -> int:
    """Number of non-empty words in text separated by characters of sep."""
    return sum(1 for is_sep, _ in groupby(text, key=lambda c: c in sep) if not is_sep)
"""Formatted output with the conversions c, s, p, d, i, u, x, X and %.

Flags "-+ #0", a field width and a precision are understood, both of which
may be given as "*" to take them from the arguments.  An unknown conversion
drops its "%" and leaves the text after it as it is.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from .convert import strtoi

SPECIFIERS = "cspdiuxX%"

_STDOUT = 1
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


class _Flag(IntFlag):
    NONE = 0
    PLUS = 1
    MINUS = 2
    SPACE = 4
    HASH = 8
    ZERO = 16
    POINT = 32


class _State(IntFlag):
    NONE = 0
    PREFIX = 1
    PREFIX_HASH = 2
    WIDTH_SPACE = 4
    WIDTH_ZERO = 8
    PRECISION = 16
    NEGATIVE = 32
    DISPLAY = 64


_FLAG_CHARS = {
    "+": _Flag.PLUS,
    "-": _Flag.MINUS,
    " ": _Flag.SPACE,
    "#": _Flag.HASH,
    "0": _Flag.ZERO,
}

_NUMERIC = _State.PREFIX | _State.WIDTH_SPACE | _State.WIDTH_ZERO | _State.PRECISION


def _wrap32(n: int) -> int:
    n &= _MASK32
    return n - 2**32 if n >= 2**31 else n


def _take(args: Iterator[Any], what: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for {what}") from None


def _take_int(args: Iterator[Any], what: str) -> int:
    value = _take(args, what)
    if not isinstance(value, int):
        raise TypeError(f"{what} needs an int, got {type(value).__name__}")
    return value


def _take_value(args: Iterator[Any], spec: str) -> Any:
    what = f"%{spec}"
    if spec == "%":
        return None
    if spec == "c":
        value = _take(args, what)
        if isinstance(value, int):
            return chr(value & 0xFF)
        if isinstance(value, str) and len(value) == 1:
            return value
        raise TypeError(f"{what} needs an int or a single character, got {value!r}")
    if spec == "s":
        value = _take(args, what)
        if value is not None and not isinstance(value, str):
            raise TypeError(f"{what} needs a str or None, got {type(value).__name__}")
        return value
    if spec == "p":
        value = _take(args, what)
        if value is not None and not isinstance(value, int):
            raise TypeError(f"{what} needs an int address or None, got {value!r}")
        return value
    if spec in "di":
        return _wrap32(_take_int(args, what))
    return _take_int(args, what) & _MASK32


@dataclass
class _Conversion:
    """One parsed conversion and the layout state used to render it."""

    specifier: str
    value: Any = None
    flags: _Flag = _Flag.NONE
    width: int = 0
    precision: int = 0
    state: _State = _State.NONE
    var_len: int = 0
    prefix: str = ""

    def __post_init__(self) -> None:
        if self.width < 0:
            self.flags |= _Flag.MINUS
            self.width = -self.width
        self.precision = abs(self.precision)

    def _shown(self) -> bool:
        return _State.DISPLAY in self.state

    def _precise(self) -> bool:
        return _State.PRECISION in self.state and _Flag.POINT in self.flags

    def _set_len(self, length: int) -> None:
        if self._shown():
            self.var_len = length

    def _set_prefix(self, hash_prefix: str) -> None:
        shown = self._shown()
        signed = shown and _State.PREFIX in self.state
        if signed and _State.NEGATIVE in self.state:
            self.prefix = "-"
        elif signed and _Flag.PLUS in self.flags:
            self.prefix = "+"
        elif signed and _Flag.SPACE in self.flags:
            self.prefix = " "
        elif shown and _State.PREFIX_HASH in self.state and _Flag.HASH in self.flags:
            self.prefix = hash_prefix
        else:
            self.prefix = ""

    def _space_pad(self) -> str:
        body = self.var_len
        if self._precise():
            body = max(self.precision, body)
        body += len(self.prefix)
        return " " * max(0, self.width - body)

    def _zero_pad(self) -> str:
        return "0" * max(0, self.width - self.var_len - len(self.prefix))

    def _precision_pad(self) -> str:
        return "0" * max(0, self.precision - self.var_len)

    def _layout(self, body: str) -> str:
        parts: List[str] = []
        left_aligned = _Flag.MINUS in self.flags
        if (
            _State.WIDTH_SPACE in self.state
            and not left_aligned
            and (
                _State.WIDTH_ZERO not in self.state
                or _Flag.ZERO not in self.flags
                or self._precise()
            )
        ):
            parts.append(self._space_pad())
        parts.append(self.prefix)
        if (
            _State.WIDTH_ZERO in self.state
            and _Flag.ZERO in self.flags
            and (_Flag.POINT not in self.flags or _State.PRECISION not in self.state)
            and self._shown()
        ):
            parts.append(self._zero_pad())
        if self._precise() and self._shown():
            parts.append(self._precision_pad())
        parts.append(body)
        if _State.WIDTH_SPACE in self.state and left_aligned:
            parts.append(self._space_pad())
        return "".join(parts)

    def _number_shown(self, value: int) -> bool:
        return bool(value) or _Flag.POINT not in self.flags or bool(self.precision)

    def _char(self) -> str:
        self.state = _State.WIDTH_SPACE | _State.DISPLAY
        self._set_len(1)
        self._set_prefix("")
        return self._layout(self.value)

    def _string(self) -> str:
        text: Optional[str] = self.value
        shown = text is not None or _Flag.POINT not in self.flags or self.precision > 5
        self.state = _State.WIDTH_SPACE | (_State.DISPLAY if shown else _State.NONE)
        if text is None:
            text = _NULL_STRING
        text = text.split("\0", 1)[0]
        length = len(text)
        if _Flag.POINT in self.flags:
            length = min(self.precision, length)
        self._set_len(length)
        self._set_prefix("")
        return self._layout(text[:length] if shown else "")

    def _pointer(self) -> str:
        address = (self.value or 0) & _MASK64
        shown = bool(address)
        self.state = _NUMERIC | _State.PREFIX_HASH | (_State.DISPLAY if shown else _State.NONE)
        self.flags |= _Flag.HASH
        self.var_len = len(_NULL_POINTER)
        digits = format(address, "x")
        self._set_len(len(digits))
        self._set_prefix("0x")
        return self._layout(digits if shown else _NULL_POINTER)

    def _signed(self) -> str:
        n: int = self.value
        shown = self._number_shown(n)
        self.state = (
            _NUMERIC
            | (_State.NEGATIVE if n < 0 else _State.NONE)
            | (_State.DISPLAY if shown else _State.NONE)
        )
        digits = str(abs(n))
        self._set_len(len(digits))
        self._set_prefix("")
        return self._layout(digits if shown else "")

    def _unsigned(self) -> str:
        n: int = self.value
        shown = self._number_shown(n)
        self.state = _NUMERIC | (_State.DISPLAY if shown else _State.NONE)
        digits = str(n)
        self._set_len(len(digits))
        self._set_prefix("")
        return self._layout(digits if shown else "")

    def _hexadecimal(self, upper: bool) -> str:
        x: int = self.value
        shown = self._number_shown(x)
        self.state = (
            _State.PREFIX_HASH
            | _State.WIDTH_SPACE
            | _State.WIDTH_ZERO
            | _State.PRECISION
            | (_State.DISPLAY if shown else _State.NONE)
        )
        digits = format(x, "X" if upper else "x")
        self._set_len(len(digits))
        self._set_prefix(("0X" if upper else "0x") if x else "")
        return self._layout(digits if shown else "")

    def render(self) -> str:
        handlers: Dict[str, Callable[[], str]] = {
            "c": self._char,
            "s": self._string,
            "p": self._pointer,
            "d": self._signed,
            "i": self._signed,
            "u": self._unsigned,
            "x": lambda: self._hexadecimal(False),
            "X": lambda: self._hexadecimal(True),
            "%": lambda: "%",
        }
        return handlers[self.specifier]()


def _read_number(fmt: str, pos: int, args: Iterator[Any], what: str) -> Tuple[int, int]:
    """Read a "*" or a run of digits at pos; return (value, next position)."""
    if pos < len(fmt) and fmt[pos] == "*":
        return _take_int(args, what), pos + 1
    if pos < len(fmt) and fmt[pos].isascii() and fmt[pos].isdigit():
        value, used = strtoi(fmt[pos:])
        return value, pos + used
    return 0, pos


def _read_conversion(
    fmt: str, start: int, args: Iterator[Any]
) -> Tuple[Optional[_Conversion], int]:
    """Parse the conversion whose "%" is at start; return it and its last index."""
    pos = start + 1
    flags = _Flag.NONE
    while pos < len(fmt) and fmt[pos] in _FLAG_CHARS:
        flags |= _FLAG_CHARS[fmt[pos]]
        pos += 1
    width, pos = _read_number(fmt, pos, args, "width")
    precision = 0
    if pos < len(fmt) and fmt[pos] == ".":
        flags |= _Flag.POINT
        precision, pos = _read_number(fmt, pos + 1, args, "precision")
    if pos < len(fmt) and fmt[pos] in SPECIFIERS:
        spec = fmt[pos]
        value = _take_value(args, spec)
        return _Conversion(spec, value, flags, width, precision), pos
    return None, start


def render(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted arguments.

    Text after a NUL in fmt is ignored.  Missing or mistyped arguments raise
    TypeError; extra arguments are ignored.
    """
    fmt = fmt.split("\0", 1)[0]
    remaining = iter(args)
    out: List[str] = []
    pos = 0
    while pos < len(fmt):
        if fmt[pos] != "%":
            out.append(fmt[pos])
            pos += 1
            continue
        conversion, last = _read_conversion(fmt, pos, remaining)
        if conversion is not None:
            out.append(conversion.render())
        pos = last + 1
    return "".join(out)


def dprintf(fd: int, fmt: str, *args: Any) -> int:
    """Write the formatted text to fd and return the number of bytes written."""
    data = render(fmt, *args).encode()
    view = memoryview(data)
    while view:
        view = view[os.write(fd, view):]
    return len(data)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the bytes written."""
    return dprintf(_STDOUT, fmt, *args)
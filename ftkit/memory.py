"""Byte searching and comparison, a block arena and a growable byte buffer."""

from __future__ import annotations

from typing import List, Optional, Union

BUFFER_SIZE = 0x10000

BytesLike = Union[bytes, bytearray, memoryview]
ByteLike = Union[int, str, bytes]


def _byte(c: ByteLike) -> int:
    if isinstance(c, int):
        return c & 0xFF
    raw = c.encode() if isinstance(c, str) else bytes(c)
    if len(raw) != 1:
        raise ValueError(f"expected a single byte, got {c!r}")
    return raw[0]


def memchr(data: BytesLike, c: ByteLike) -> Optional[int]:
    """Index of the first byte equal to c, or None; an int c is taken modulo 256."""
    index = bytes(data).find(bytes([_byte(c)]))
    return index if index >= 0 else None


def memchrset(data: BytesLike, charset: BytesLike) -> Optional[int]:
    """Index of the first byte of data that occurs in charset, or None."""
    wanted = set(bytes(charset))
    return next((i for i, b in enumerate(bytes(data)) if b in wanted), None)


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Difference of the first differing byte among the first n bytes; 0 if equal."""
    if n <= 0:
        return 0
    left, right = bytes(a), bytes(b)
    if len(left) < n or len(right) < n:
        raise ValueError(f"both operands need at least {n} bytes")
    for x, y in zip(left[:n], right[:n]):
        if x != y:
            return x - y
    return 0


class Arena:
    """Hands out slices of fixed-size blocks; blocks are kept for reuse after reset."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 0:
            raise ValueError("buffer_size must not be negative")
        self.buffer_size = buffer_size
        self.free_size = 0
        self._blocks: List[bytearray] = []
        self._current: Optional[int] = None

    @property
    def block_count(self) -> int:
        """Number of blocks owned by the arena."""
        return len(self._blocks)

    def _new_block(self) -> None:
        self._blocks.append(bytearray(self.buffer_size))
        self._current = len(self._blocks) - 1
        self.free_size = self.buffer_size

    def malloc(self, size: int) -> memoryview:
        """Return a writable view of size bytes taken from the current block."""
        if size < 0 or size > BUFFER_SIZE or size > self.buffer_size:
            raise ValueError(f"cannot allocate {size} bytes from this arena")
        if self._current is None or self.free_size < size:
            if self._current is not None and self._current + 1 < len(self._blocks):
                self._current += 1
                self.free_size = self.buffer_size
            else:
                self._new_block()
        block = self._blocks[self._current]
        start = self.buffer_size - self.free_size
        self.free_size -= size
        return memoryview(block)[start:start + size]

    def reset(self) -> None:
        """Start handing out memory from the first block again."""
        if self._blocks:
            self._current = 0
            self.free_size = self.buffer_size

    def free(self) -> None:
        """Drop every block; the arena can hand out nothing afterwards."""
        self._blocks.clear()
        self._current = None
        self.free_size = 0
        self.buffer_size = 0

    def __enter__(self) -> "Arena":
        return self

    def __exit__(self, *exc_info) -> None:
        self.free()


class GrowableBuffer:
    """A byte buffer that at least doubles its size whenever it has to grow."""

    def __init__(self, data: BytesLike = b"") -> None:
        self._data = bytearray(data)

    @property
    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def resize(self, new_size: int) -> None:
        """Grow to max(2 * size, new_size), keeping the current content."""
        if new_size < 0:
            raise ValueError("new_size must not be negative")
        new_size = max(len(self._data) * 2, new_size)
        if new_size == len(self._data):
            return
        grown = bytearray(new_size)
        keep = min(len(self._data), new_size)
        grown[:keep] = self._data[:keep]
        self._data = grown

    def reserve(self, offset: int, size: int) -> memoryview:
        """Make room for size bytes at offset and return a view of them."""
        if offset < 0 or size < 0:
            raise ValueError("offset and size must not be negative")
        if len(self._data) < offset + size:
            self.resize(offset + size)
        return memoryview(self._data)[offset:offset + size]

    def write(self, src: Union[BytesLike, "GrowableBuffer"], offset: int) -> memoryview:
        """Copy src into the buffer at offset and return a view of the copy."""
        data = bytes(src)
        self.reserve(offset, offset + len(data))
        self._data[offset:offset + len(data)] = data
        return memoryview(self._data)[offset:offset + len(data)]

    def release(self) -> None:
        """Drop the content; the buffer becomes empty."""
        self._data = bytearray()
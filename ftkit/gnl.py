"""Reading a file descriptor one line at a time, keeping leftovers per descriptor."""

from __future__ import annotations

import os
from typing import Dict, List

BUFFER_SIZE = 0x10000
FD_MAX = 1024


class LineReader:
    """Reads lines from file descriptors, remembering unread bytes for each one."""

    def __init__(self) -> None:
        self._pending: Dict[int, bytes] = {}

    def _keep(self, fd: int, rest: bytes) -> None:
        if rest:
            self._pending[fd] = rest

    def read_line(self, fd: int) -> bytes:
        """Next line of fd with its newline; the last line may lack one; b"" at end.

        A descriptor outside 0..FD_MAX-1 yields b"". Read errors raise OSError.
        """
        if not 0 <= fd < FD_MAX:
            return b""
        pending = self._pending.pop(fd, b"")
        newline = pending.find(b"\n")
        if newline >= 0:
            self._keep(fd, pending[newline + 1:])
            return pending[:newline + 1]
        parts: List[bytes] = [pending]
        read_size = len(pending)
        while True:
            read_size = max(read_size * 2, BUFFER_SIZE)
            chunk = os.read(fd, read_size)
            if not chunk:
                return b"".join(parts)
            newline = chunk.find(b"\n")
            if newline >= 0:
                parts.append(chunk[:newline + 1])
                self._keep(fd, chunk[newline + 1:])
                return b"".join(parts)
            parts.append(chunk)

    def close(self, fd: int) -> None:
        """Forget what was buffered for fd and close it unless it is 0, 1 or 2."""
        self._pending.pop(fd, None)
        if fd > 2:
            os.close(fd)


_default = LineReader()


def get_next_line(fd: int) -> bytes:
    """Next line of fd from the shared reader."""
    return _default.read_line(fd)


def close(fd: int) -> None:
    """Close fd and drop what the shared reader buffered for it."""
    _default.close(fd)
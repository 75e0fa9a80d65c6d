"""A fixed-size ring buffer of bytes."""

from __future__ import annotations

from vpinlink.config import MAX_READBYTES


class Fifo:
    """Byte ring buffer holding at most ``capacity - 1`` bytes.

    Writes that do not fit are cut short; reads return what is there.
    """

    def __init__(self, capacity: int = MAX_READBYTES * 2) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._n = capacity
        self._buf = bytearray(capacity)
        self._r = 0
        self._w = 0

    def clear(self) -> None:
        self._r = 0
        self._w = 0

    def free(self) -> int:
        """Number of bytes that can still be written."""
        space = self._r - self._w
        if space <= 0:
            space += self._n
        return space - 1

    def writeable(self) -> bool:
        return self.free() > 0

    def readable(self) -> bool:
        return self._r != self._w

    def __len__(self) -> int:
        return (self._w - self._r) % self._n

    def put(self, data: bytes) -> int:
        """Write as much of ``data`` as fits; return the number of bytes written."""
        if isinstance(data, int):
            raise TypeError("put() takes a bytes-like object, not int")
        data = bytes(data)
        written = 0
        while written < len(data):
            room = self.free()
            if room == 0:
                break
            w = self._w
            n = min(room, len(data) - written, self._n - w)
            self._buf[w:w + n] = data[written:written + n]
            self._w = (w + n) % self._n
            written += n
        return written

    def get(self, count: int = 1) -> bytes:
        """Read up to ``count`` bytes."""
        if count < 0:
            raise ValueError("count must not be negative")
        out = bytearray()
        while len(out) < count:
            available = len(self)
            if not available:
                break
            r = self._r
            n = min(available, count - len(out), self._n - r)
            out += self._buf[r:r + n]
            self._r = (r + n) % self._n
        return bytes(out)

    def peek(self) -> int:
        """Return the next byte without removing it."""
        if self._r == self._w:
            raise IndexError("peek from an empty FIFO")
        return self._buf[self._r]
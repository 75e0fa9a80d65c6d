"""Parameter lists: NUL-terminated string fields as carried on the wire."""

from __future__ import annotations

import re
from collections.abc import Iterator
from itertools import islice

_SPACE = rb"[ \t\n\x0b\f\r]*"
_INT_RE = re.compile(_SPACE + rb"([+-]?\d+)")
_FLOAT_RE = re.compile(
    _SPACE
    + rb"([+-]?(?:"
    + rb"0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
    + rb"|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    + rb"|infinity|inf|nan))",
    re.IGNORECASE,
)


def _to_int(raw: bytes) -> int:
    """Read the leading integer of ``raw`` the way C's atoi does; 0 if none."""
    match = _INT_RE.match(raw)
    return int(match.group(1)) if match else 0


def _to_float(raw: bytes) -> float:
    """Read the leading number of ``raw`` the way C's atof does; 0.0 if none."""
    match = _FLOAT_RE.match(raw)
    if not match:
        return 0.0
    text = match.group(1).decode("ascii")
    if "x" in text.lower() and "inf" not in text.lower():
        return float.fromhex(text)
    return float(text)


def _c_string(raw: bytes) -> bytes:
    """Cut ``raw`` at its first NUL byte."""
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


class ParamItem:
    """One field of a :class:`Param`, or an invalid item when a lookup misses."""

    __slots__ = ("_raw",)

    def __init__(self, raw: bytes | None = None) -> None:
        self._raw = raw

    def as_str(self) -> str:
        if self._raw is None:
            return ""
        return self._raw.decode("utf-8", "replace")

    def as_int(self) -> int:
        if self._raw is None:
            return 0
        return _to_int(self._raw)

    def as_float(self) -> float:
        if self._raw is None:
            return 0.0
        return _to_float(self._raw)

    def is_valid(self) -> bool:
        return self._raw is not None

    def is_empty(self) -> bool:
        return not self._raw

    def __str__(self) -> str:
        return self.as_str()

    def __int__(self) -> int:
        return self.as_int()

    def __float__(self) -> float:
        return self.as_float()

    def __repr__(self) -> str:
        if self._raw is None:
            return "ParamItem(<invalid>)"
        return f"ParamItem({self._raw!r})"


class Param:
    """A growable list of NUL-terminated fields with an optional byte capacity.

    Values that do not fit in the remaining capacity are dropped whole.
    """

    def __init__(self, data: bytes = b"", capacity: int | None = None) -> None:
        self._buffer = bytearray(data)
        if capacity is not None and capacity < len(self._buffer):
            raise ValueError(
                f"capacity {capacity} is smaller than the {len(self._buffer)} bytes given"
            )
        self._capacity = capacity

    def _fields(self) -> Iterator[bytes]:
        buf = bytes(self._buffer)
        pos, end = 0, len(buf)
        while pos < end:
            nul = buf.find(0, pos)
            if nul < 0:
                nul = end
            yield buf[pos:nul]
            pos = nul + 1

    def __iter__(self) -> Iterator[ParamItem]:
        return (ParamItem(field) for field in self._fields())

    def __getitem__(self, index: int) -> ParamItem:
        """Return the field at ``index``, or an invalid item if there is none."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"field index must be an int, not {type(index).__name__}")
        if index < 0:
            return ParamItem()
        return ParamItem(next(islice(self._fields(), index, None), None))

    def __len__(self) -> int:
        """Number of fields."""
        return sum(1 for _ in self._fields())

    def get(self, key: str) -> ParamItem:
        """Treat the fields as key/value pairs and return the value for ``key``."""
        wanted = key.encode("utf-8")
        fields = self._fields()
        for field in fields:
            if field == wanted:
                return ParamItem(next(fields, None))
            if next(fields, None) is None:
                break
        return ParamItem()

    def as_str(self) -> str:
        return _c_string(bytes(self._buffer)).decode("utf-8", "replace")

    def as_int(self) -> int:
        return _to_int(bytes(self._buffer))

    def as_float(self) -> float:
        return _to_float(bytes(self._buffer))

    def is_empty(self) -> bool:
        return not self._buffer or self._buffer[0] == 0

    def _append(self, chunk: bytes) -> bool:
        if self._capacity is not None and len(self._buffer) + len(chunk) > self._capacity:
            return False
        self._buffer += chunk
        return True

    def add(self, value: object) -> bool:
        """Append one value; return False if it did not fit.

        Numbers and strings become NUL-terminated text, ``None`` an empty
        field, and bytes-like values are appended raw.
        """
        if value is None:
            return self._append(b"\x00")
        if isinstance(value, int):
            return self._append(str(int(value)).encode("ascii") + b"\x00")
        if isinstance(value, float):
            return self._append(f"{value:2.7f}".encode("ascii") + b"\x00")
        if isinstance(value, str):
            return self._append(value.encode("utf-8") + b"\x00")
        if isinstance(value, (bytes, bytearray, memoryview)):
            return self._append(bytes(value))
        raise TypeError(f"cannot add a value of type {type(value).__name__}")

    def add_multi(self, *args: object) -> None:
        for value in args:
            self.add(value)

    def add_key(self, key: str, value: object) -> None:
        self.add(key)
        self.add(value)

    def to_bytes(self) -> bytes:
        return bytes(self._buffer)

    def __repr__(self) -> str:
        return f"Param({bytes(self._buffer)!r}, capacity={self._capacity})"
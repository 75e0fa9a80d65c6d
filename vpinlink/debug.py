"""Formatting helpers for diagnostic output: log lines, hex dumps and IP addresses."""

from __future__ import annotations

from collections.abc import Iterable


def format_dump(message: str, data: bytes) -> str:
    """Render ``data`` after ``message`` for a debug dump.

    Printable ASCII bytes appear as themselves. Runs of other bytes appear as
    two-digit lower-case hex values in brackets, separated by ``|``.
    """
    parts = [message]
    prev_printable = True
    for byte in bytes(data):
        if 32 <= byte < 127:
            if not prev_printable:
                parts.append("]")
            parts.append(chr(byte))
            prev_printable = True
        else:
            parts.append("[" if prev_printable else "|")
            parts.append(f"{byte:02x}")
            prev_printable = False
    if not prev_printable:
        parts.append("]")
    return "".join(parts)


def format_log(millis: int, *args: object) -> str:
    """Build a log line: the uptime in milliseconds in brackets, then ``args`` joined."""
    return f"[{millis}] " + "".join(str(arg) for arg in args)


def format_ip(message: str, octets: Iterable[int], reverse: bool = False) -> str:
    """Render a dotted IPv4 address after ``message``.

    With ``reverse`` the octets are printed last to first, for addresses
    stored in the opposite byte order.
    """
    values = list(octets)
    if len(values) != 4:
        raise ValueError(f"an IPv4 address has 4 octets, got {len(values)}")
    for value in values:
        if not 0 <= value <= 255:
            raise ValueError(f"octet out of range: {value}")
    if reverse:
        values.reverse()
    return message + ".".join(str(value) for value in values)
"""Virtual pin handler registry: read/write callbacks and connection events."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

from vpinlink.params import Param

_log = logging.getLogger(__name__)

# Write-only pins used by the library itself rather than by widgets.
INTERNAL_PINS = ("ACON", "ADIS", "RTC", "OTA")

PinKey = Union[int, str, None]


@dataclass(frozen=True)
class Request:
    """The pin a read or write request is addressed to."""

    pin: int | str


ReadHandler = Callable[[Request], object]
WriteHandler = Callable[[Request, Param], object]


class HandlerRegistry:
    """Maps virtual pins to read and write handlers.

    ``None`` as a pin registers the default handler, called for pins that
    have none of their own. Write handlers may also be registered for the
    names in :data:`INTERNAL_PINS`.
    """

    def __init__(self, pin_count: int = 32) -> None:
        if isinstance(pin_count, bool) or not isinstance(pin_count, int) or pin_count < 1:
            raise ValueError(f"pin_count must be a positive int, got {pin_count!r}")
        self.pin_count = pin_count
        self._read: dict[PinKey, ReadHandler] = {}
        self._write: dict[PinKey, WriteHandler] = {}
        self._connected: Callable[[], object] | None = None
        self._disconnected: Callable[[], object] | None = None

    def _in_range(self, pin: object) -> bool:
        return (
            isinstance(pin, int)
            and not isinstance(pin, bool)
            and 0 <= pin < self.pin_count
        )

    def _check(self, pin: PinKey, allow_internal: bool) -> None:
        if pin is None or self._in_range(pin):
            return
        if allow_internal and isinstance(pin, str) and pin in INTERNAL_PINS:
            return
        raise ValueError(f"no such virtual pin: {pin!r}")

    def on_read(self, pin: PinKey) -> Callable[[ReadHandler], ReadHandler]:
        """Decorator registering a read handler for ``pin``."""
        self._check(pin, allow_internal=False)

        def register(handler: ReadHandler) -> ReadHandler:
            self._read[pin] = handler
            return handler

        return register

    def on_write(self, pin: PinKey) -> Callable[[WriteHandler], WriteHandler]:
        """Decorator registering a write handler for ``pin``."""
        self._check(pin, allow_internal=True)

        def register(handler: WriteHandler) -> WriteHandler:
            self._write[pin] = handler
            return handler

        return register

    def on_connected(self, callback: Callable[[], object]) -> Callable[[], object]:
        self._connected = callback
        return callback

    def on_disconnected(self, callback: Callable[[], object]) -> Callable[[], object]:
        self._disconnected = callback
        return callback

    def read_handler(self, pin: PinKey) -> ReadHandler | None:
        """The handler registered for ``pin``, or None."""
        if pin is not None and not self._in_range(pin):
            return None
        return self._read.get(pin)

    def write_handler(self, pin: PinKey) -> WriteHandler | None:
        """The handler registered for ``pin``, or None."""
        if pin is not None and not self._in_range(pin):
            if not (isinstance(pin, str) and pin in INTERNAL_PINS):
                return None
        return self._write.get(pin)

    def dispatch_read(self, pin: int | str) -> bool:
        """Run the read handler for ``pin``; return False if the default ran."""
        request = Request(pin)
        handler = self.read_handler(pin) if pin is not None else None
        if handler is not None:
            handler(request)
            return True
        default = self._read.get(None)
        if default is not None:
            default(request)
        else:
            _log.info("No handler for reading from pin %s", pin)
        return False

    def dispatch_write(self, pin: int | str, param: Param) -> bool:
        """Run the write handler for ``pin``; return False if the default ran."""
        request = Request(pin)
        handler = self.write_handler(pin) if pin is not None else None
        if handler is not None:
            handler(request, param)
            return True
        default = self._write.get(None)
        if default is not None:
            default(request, param)
        else:
            _log.info("No handler for writing to pin %s", pin)
        return False

    def fire_connected(self) -> None:
        if self._connected is not None:
            self._connected()

    def fire_disconnected(self) -> None:
        if self._disconnected is not None:
            self._disconnected()
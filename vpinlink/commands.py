"""Processing of incoming hardware commands and the device info profile."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Mapping
from typing import Protocol

from vpinlink.config import HEARTBEAT, MAX_READBYTES, VERSION
from vpinlink.handlers import HandlerRegistry
from vpinlink.params import Param, ParamItem

_log = logging.getLogger(__name__)


class Command(enum.Enum):
    """Kinds of outgoing messages a processor sends."""

    RESPONSE = "response"
    HARDWARE = "hardware"
    INTERNAL = "internal"


class ResponseStatus(enum.Enum):
    ILLEGAL_COMMAND = "illegal_command"


class PinIO(Protocol):
    """Access to physical pins."""

    def digital_read(self, pin: int) -> int: ...

    def digital_write(self, pin: int, value: int) -> None: ...

    def analog_read(self, pin: int) -> float: ...


Sender = Callable[[Command, int, object], object]

_VALID_MODES = ("in", "out", "pwm")


class CommandProcessor:
    """Decodes hardware commands and acts on them.

    ``send(command, msg_id, body)`` delivers replies. Without ``pins`` the
    built-in pin commands are unavailable and answered as illegal.
    """

    def __init__(
        self,
        registry: HandlerRegistry,
        send: Sender,
        pins: PinIO | None = None,
    ) -> None:
        self.registry = registry
        self._send = send
        self.pins = pins
        self.msg_id_override = 0

    def process(self, data: bytes) -> None:
        data = bytes(data)
        fields = list(Param(data))
        if len(fields) < 2:
            return
        pin = fields[1].as_int() & 0xFF
        code = data[:2]

        if code == b"vr":
            self.registry.dispatch_read(pin)
        elif code == b"vw":
            self._virtual_write(data, pin)
        elif self.pins is not None and code in (b"pm", b"dr", b"dw", b"ar", b"aw"):
            self._builtin(code, fields, pin)
        else:
            _log.warning("Invalid HW cmd: %s", fields[0].as_str())
            self._send(Command.RESPONSE, self.msg_id_override, ResponseStatus.ILLEGAL_COMMAND)

    def _virtual_write(self, data: bytes, pin: int) -> None:
        parts = data.split(b"\x00")
        start = len(parts[0]) + 1 + len(parts[1]) + 1
        payload = data[start:] if start < len(data) else b""
        self.registry.dispatch_write(pin, Param(payload))

    def _reply(self, *values: object) -> None:
        rsp = Param(capacity=16)
        rsp.add_multi(*values)
        self._send(Command.HARDWARE, 0, rsp.to_bytes()[:-1])

    def _builtin(self, code: bytes, fields: list[ParamItem], pin: int) -> None:
        pins = self.pins
        assert pins is not None
        if code == b"pm":
            items = iter(fields[1:])
            for pin_item in items:
                mode = next(items, ParamItem()).as_str()
                if mode not in _VALID_MODES:
                    _log.debug(
                        "Invalid pin %d mode %s", pin_item.as_int() & 0xFF, mode
                    )
        elif code == b"dr":
            self._reply("dw", pin, int(pins.digital_read(pin)))
        elif code == b"dw":
            if len(fields) < 3:
                return
            pins.digital_write(pin, 1 if fields[2].as_int() else 0)
        elif code == b"ar":
            self._reply("aw", pin, int(pins.analog_read(pin) * 1024))
        else:
            _log.debug("Analog write to pin %d is not supported", pin)


def build_info_profile(
    heartbeat: int = HEARTBEAT,
    buffer_in: int = MAX_READBYTES,
    extra: Mapping[str, object] | None = None,
) -> bytes:
    """Build the key/value body describing the device to the server.

    ``extra`` adds further pairs (such as ``dev``, ``cpu``, ``con``,
    ``fw-type``, ``fw``, ``build`` or ``tmpl``) in order; pairs whose value
    is None or empty are left out.
    """
    profile = Param()
    profile.add_key("ver", VERSION)
    profile.add_key("h-beat", str(heartbeat))
    profile.add_key("buff-in", str(buffer_in))
    for key, value in (extra or {}).items():
        if value is None or value == "":
            continue
        profile.add_key(key, str(value))
    return profile.to_bytes()
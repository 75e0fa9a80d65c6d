"""Widget helpers: GPS readings and LED brightness."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from vpinlink.params import Param


@dataclass(frozen=True)
class GpsParam:
    """A GPS reading: latitude, longitude, altitude and speed."""

    lat: float = 0.0
    lon: float = 0.0
    altitude: float = 0.0
    speed: float = 0.0

    @classmethod
    def from_param(cls, param: Param) -> "GpsParam":
        """Read up to four numeric fields; missing ones stay 0."""
        values = [item.as_float() for item, _ in zip(param, range(4))]
        return cls(*values)


class Led:
    """An LED widget on a virtual pin; brightness runs from 0 to 255."""

    def __init__(self, pin: int, writer: Callable[[int, int], object]) -> None:
        self.pin = pin
        self._writer = writer
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    def set_value(self, value: int) -> None:
        """Store the brightness and send it to the pin."""
        if not 0 <= value <= 255:
            raise ValueError(f"LED value must be in 0..255, got {value}")
        self._value = value
        self._writer(self.pin, value)

    def on(self) -> None:
        self.set_value(255)

    def off(self) -> None:
        self.set_value(0)
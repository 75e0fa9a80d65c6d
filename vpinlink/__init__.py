"""Device-side toolkit for virtual-pin IoT clients: parameters, FIFO, handlers, commands, widgets, NTP and debug formatting."""

__version__ = "0.6.1"
# vpinlink

`vpinlink` is a small, dependency-free library for the device side of a
virtual-pin IoT cloud client. It provides these modules:

- **`vpinlink.config`** – library defaults: `DEFAULT_DOMAIN`, `DEFAULT_PORT`,
  `DEFAULT_PORT_SSL`, `VERSION`, `HEARTBEAT`, `TIMEOUT_MS`, `MSG_LIMIT`,
  `MAX_READBYTES` and `MAX_SENDBYTES`.
- **`vpinlink.params`** – `Param`, a list of NUL-terminated fields with an
  optional byte capacity, and `ParamItem`, one field of it. Fields are read with
  `as_str`, `as_int` and `as_float` (leading-number parsing, 0 when there is
  none); `Param.get(key)` treats the fields as key/value pairs. `add`,
  `add_multi` and `add_key` append values; a value that does not fit the
  capacity is dropped whole and `add` returns False.
- **`vpinlink.fifo`** – `Fifo`, a fixed-size byte ring buffer holding at most
  `capacity - 1` bytes. `put` writes what fits and returns the count, `get`
  reads up to the count asked for, `peek` raises `IndexError` when empty.
- **`vpinlink.handlers`** – `HandlerRegistry`, mapping virtual pins to read and
  write handlers (`on_read`, `on_write` decorators, `None` for the default
  handler), with `dispatch_read`, `dispatch_write` and connect/disconnect
  callbacks. Write handlers may also be registered for the internal pins
  `"ACON"`, `"ADIS"`, `"RTC"` and `"OTA"`.
- **`vpinlink.commands`** – `CommandProcessor`, which decodes incoming hardware
  command bodies (`vr`, `vw`, and with a pin-access object `pm`, `dr`, `dw`,
  `ar`, `aw`) and routes them to the registry; unknown commands are answered
  with `ResponseStatus.ILLEGAL_COMMAND`. `build_info_profile` builds the
  key/value body describing the device.
- **`vpinlink.widgets`** – `GpsParam.from_param` reads latitude, longitude,
  altitude and speed; `Led` keeps a 0–255 brightness and writes it to its pin.
- **`vpinlink.ntp`** – `build_request`, `parse_response` and `fetch_time`, which
  asks an NTP server for Unix time and raises `TimeoutError` if no answer comes.
- **`vpinlink.debug`** – `format_log`, `format_dump` and `format_ip` for log
  lines, hex dumps and dotted IPv4 addresses.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Handling virtual pins

```python
from vpinlink.commands import CommandProcessor
from vpinlink.handlers import HandlerRegistry

registry = HandlerRegistry(32)

@registry.on_write(5)
def slider_moved(request, param):
    print("V5 is now", param.as_int())

@registry.on_read(6)
def report_value(request):
    ...

def send(command, msg_id, body):
    ...  # deliver a reply to the server

processor = CommandProcessor(registry, send)
processor.process(b"vw\x005\x0042")   # calls slider_moved with Param(b"42")
```

Pins without a handler of their own fall back to the registry's default
handler, registered with `on_read(None)` or `on_write(None)`; when there is no
default either, the request is logged.

## What the package does not do

The package has no network connection to the cloud server: it decodes command
bodies and builds replies, but message framing, login, heartbeats and the TCP
transport are left to the caller, who passes a `send` callable to
`CommandProcessor`. It installs no command-line program. It has no Wi-Fi setup
portal, no storage for device configuration and no status-LED driver.
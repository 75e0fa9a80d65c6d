"""A minimal SNTP client returning Unix time."""

from __future__ import annotations

import logging
import socket
import time

NTP_PACKET_SIZE = 48
NTP_PORT = 123
DEFAULT_SERVER = "time.nist.gov"

# Seconds between 1900-01-01 and 1970-01-01.
SEVENTY_YEARS = 2208988800

_log = logging.getLogger(__name__)


def build_request() -> bytes:
    """Build the 48-byte client request packet."""
    packet = bytearray(NTP_PACKET_SIZE)
    packet[0] = 0b11100011  # LI, version, mode
    packet[1] = 0           # stratum
    packet[2] = 6           # polling interval
    packet[3] = 0xEC        # peer clock precision
    packet[12:16] = bytes((49, 0x4E, 49, 52))
    return bytes(packet)


def parse_response(packet: bytes) -> int:
    """Return the Unix time carried in the transmit timestamp of ``packet``."""
    if len(packet) < 44:
        raise ValueError(f"NTP response too short: {len(packet)} bytes")
    secs_since_1900 = int.from_bytes(packet[40:44], "big")
    return (secs_since_1900 - SEVENTY_YEARS) & 0xFFFFFFFF


def fetch_time(
    server: str = DEFAULT_SERVER,
    port: int = NTP_PORT,
    attempts: int = 10,
    timeout: float = 1.0,
) -> int:
    """Ask ``server`` for the time, retrying; raise TimeoutError if none answers."""
    request = build_request()
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        for _ in range(attempts):
            sock.sendto(request, (server, port))
            deadline = time.monotonic() + timeout
            while True:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    break
                sock.settimeout(remaining)
                try:
                    data, _addr = sock.recvfrom(NTP_PACKET_SIZE)
                except socket.timeout:
                    break
                if len(data) >= 44:
                    epoch = parse_response(data)
                    _log.info("Unix time = %d", epoch)
                    return epoch
            _log.info("Retry NTP")
    _log.warning("NTP failed")
    raise TimeoutError(f"no NTP response from {server}:{port}")
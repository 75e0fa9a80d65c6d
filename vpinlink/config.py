"""Library-wide defaults: server address, protocol limits and timing."""

DEFAULT_DOMAIN = "blynk-cloud.com"
DEFAULT_PORT = 80
DEFAULT_PORT_SSL = 443

VERSION = "0.6.1"

# Heartbeat period in seconds.
HEARTBEAT = 10

# Network timeout in milliseconds.
TIMEOUT_MS = 3000

# Outgoing commands allowed per second.
MSG_LIMIT = 15

# Longest incoming command, in bytes.
MAX_READBYTES = 256

# Longest outgoing command, in bytes.
MAX_SENDBYTES = 128
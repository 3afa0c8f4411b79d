"""WebSocket protocol configuration and constants."""

from __future__ import annotations

import os

WS_ENDPOINT_PATH = "/__wscapture__/socket"

# Control message keys
WS_KEY_TYPE = "type"
WS_KEY_WIDTH = "width"
WS_KEY_HEIGHT = "height"
WS_KEY_FRAMERATE = "framerate"
WS_KEY_LENGTH = "length"
WS_KEY_FRAME = "frame"

# Control message types
WS_TYPE_START = "start"
WS_TYPE_ACK = "ack"

# Zero-length binary message: end of stream.
WS_STOP_PAYLOAD = b""

BYTES_PER_PIXEL = 4

# Ping/keepalive (websockets library); 0 disables.
ENV_WS_PING_INTERVAL_S = "WS_PING_INTERVAL_S"
ENV_WS_PING_TIMEOUT_S = "WS_PING_TIMEOUT_S"
ENV_WS_MAX_MESSAGE_BYTES = "WS_MAX_MESSAGE_BYTES"

DEFAULT_WS_PING_INTERVAL_S = 20.0
DEFAULT_WS_PING_TIMEOUT_S = 20.0
# Inbound messages are small JSON records.
DEFAULT_WS_MAX_MESSAGE_BYTES = 64 * 1024

WS_PING_INTERVAL_S = float(os.getenv(ENV_WS_PING_INTERVAL_S, str(DEFAULT_WS_PING_INTERVAL_S)))
WS_PING_TIMEOUT_S = float(os.getenv(ENV_WS_PING_TIMEOUT_S, str(DEFAULT_WS_PING_TIMEOUT_S)))
WS_MAX_MESSAGE_BYTES = int(os.getenv(ENV_WS_MAX_MESSAGE_BYTES, str(DEFAULT_WS_MAX_MESSAGE_BYTES)))

__all__ = [
    "WS_ENDPOINT_PATH",
    "WS_KEY_TYPE",
    "WS_KEY_WIDTH",
    "WS_KEY_HEIGHT",
    "WS_KEY_FRAMERATE",
    "WS_KEY_LENGTH",
    "WS_KEY_FRAME",
    "WS_TYPE_START",
    "WS_TYPE_ACK",
    "WS_STOP_PAYLOAD",
    "BYTES_PER_PIXEL",
    "ENV_WS_PING_INTERVAL_S",
    "ENV_WS_PING_TIMEOUT_S",
    "ENV_WS_MAX_MESSAGE_BYTES",
    "DEFAULT_WS_PING_INTERVAL_S",
    "DEFAULT_WS_PING_TIMEOUT_S",
    "DEFAULT_WS_MAX_MESSAGE_BYTES",
    "WS_PING_INTERVAL_S",
    "WS_PING_TIMEOUT_S",
    "WS_MAX_MESSAGE_BYTES",
]

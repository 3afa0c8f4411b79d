"""Wire encoders for control records and binary frame payloads."""

from __future__ import annotations

import orjson

from wscapture.errors import ProtocolError
from wscapture.config.websocket import (
    WS_KEY_TYPE,
    WS_TYPE_ACK,
    WS_KEY_FRAME,
    WS_KEY_WIDTH,
    WS_KEY_HEIGHT,
    WS_KEY_LENGTH,
    WS_TYPE_START,
    BYTES_PER_PIXEL,
    WS_STOP_PAYLOAD,
    WS_KEY_FRAMERATE,
)

from .messages import AckMessage, StartMessage

STOP_PAYLOAD = WS_STOP_PAYLOAD


def frame_size(width: int, height: int) -> int:
    return width * height * BYTES_PER_PIXEL


def encode_start(msg: StartMessage) -> str:
    data = {
        WS_KEY_TYPE: WS_TYPE_START,
        WS_KEY_WIDTH: msg.width,
        WS_KEY_HEIGHT: msg.height,
        WS_KEY_FRAMERATE: msg.framerate,
        WS_KEY_LENGTH: msg.length,
    }
    return orjson.dumps(data).decode("utf-8")


def encode_ack(msg: AckMessage) -> str:
    return orjson.dumps({WS_KEY_TYPE: WS_TYPE_ACK, WS_KEY_FRAME: msg.frame}).decode("utf-8")


def encode_frame(buffer: bytes | bytearray | memoryview, width: int, height: int) -> bytes:
    """Validate a top-down RGBA8 buffer and return it as a frame payload."""
    data = bytes(buffer)
    expected = frame_size(width, height)
    if len(data) != expected:
        raise ProtocolError(f"frame is {len(data)} bytes, expected {expected} for {width}x{height}")
    return data


def decode_binary(payload: bytes, width: int, height: int) -> bytes | None:
    """Decode a binary message on the consumer side.

    Returns ``None`` for the end-of-stream marker, or the frame bytes.
    """
    if len(payload) == 0:
        return None
    expected = frame_size(width, height)
    if len(payload) != expected:
        raise ProtocolError(f"got {len(payload)} bytes, expected {expected}")
    return payload


__all__ = [
    "STOP_PAYLOAD",
    "decode_binary",
    "encode_ack",
    "encode_frame",
    "encode_start",
    "frame_size",
]

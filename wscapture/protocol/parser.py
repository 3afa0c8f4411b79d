"""Peer control message parsing/validation."""

from __future__ import annotations

from typing import Any

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
    WS_KEY_FRAMERATE,
)

from .messages import AckMessage, StartMessage, ControlMessage


def _require_int(msg: dict[str, Any], key: str) -> int:
    value = msg.get(key)
    # bool is an int subclass; JSON true/false is never a valid count.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ProtocolError(f"missing or non-integer '{key}'")
    return value


def _require_number(msg: dict[str, Any], key: str) -> float:
    value = msg.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ProtocolError(f"missing or non-numeric '{key}'")
    return value


def _parse_start(msg: dict[str, Any]) -> StartMessage:
    width = _require_int(msg, WS_KEY_WIDTH)
    height = _require_int(msg, WS_KEY_HEIGHT)
    framerate = _require_number(msg, WS_KEY_FRAMERATE)
    length = _require_int(msg, WS_KEY_LENGTH)
    if width <= 0 or height <= 0:
        raise ProtocolError(f"invalid size {width}x{height}")
    if not framerate > 0:
        raise ProtocolError(f"invalid framerate {framerate!r}")
    return StartMessage(width=width, height=height, framerate=framerate, length=length)


def _parse_ack(msg: dict[str, Any]) -> AckMessage:
    frame = _require_int(msg, WS_KEY_FRAME)
    if frame < 0:
        raise ProtocolError(f"invalid frame {frame}")
    return AckMessage(frame=frame)


_PARSERS = {
    WS_TYPE_START: _parse_start,
    WS_TYPE_ACK: _parse_ack,
}


def parse_control_message(raw: str | bytes) -> ControlMessage:
    if not isinstance(raw, str):
        raise ProtocolError("control message must be text")

    try:
        msg = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ProtocolError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise ProtocolError("message must be a JSON object")

    msg_type = msg.get(WS_KEY_TYPE)
    if not isinstance(msg_type, str):
        raise ProtocolError(f"message missing '{WS_KEY_TYPE}'")

    parser = _PARSERS.get(msg_type)
    if parser is None:
        raise ProtocolError(f"unknown message type '{msg_type}'")
    return parser(msg)


__all__ = ["parse_control_message"]

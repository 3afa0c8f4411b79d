from __future__ import annotations

import json

import pytest

from wscapture.errors import ProtocolError
from wscapture.protocol import (
    STOP_PAYLOAD,
    AckMessage,
    StartMessage,
    frame_size,
    encode_ack,
    encode_frame,
    encode_start,
    decode_binary,
    parse_control_message,
)


def test_encode_start_matches_wire_record() -> None:
    text = encode_start(StartMessage(width=1280, height=720, framerate=30.0, length=300))
    assert json.loads(text) == {"type": "start", "width": 1280, "height": 720, "framerate": 30.0, "length": 300}
    assert parse_control_message(text) == StartMessage(width=1280, height=720, framerate=30.0, length=300)


def test_encode_ack() -> None:
    assert json.loads(encode_ack(AckMessage(frame=42))) == {"type": "ack", "frame": 42}


def test_frame_size_is_rgba8() -> None:
    assert frame_size(426, 240) == 426 * 240 * 4


def test_encode_frame_accepts_exact_buffer() -> None:
    buf = bytearray(range(16))
    assert encode_frame(buf, 2, 2) == bytes(buf)
    assert encode_frame(memoryview(bytes(16)), 1, 4) == bytes(16)


@pytest.mark.parametrize("size", [0, 15, 17])
def test_encode_frame_rejects_wrong_size(size: int) -> None:
    with pytest.raises(ProtocolError):
        encode_frame(bytes(size), 2, 2)


def test_stop_payload_is_empty() -> None:
    assert STOP_PAYLOAD == b""
    assert decode_binary(STOP_PAYLOAD, 2, 2) is None


def test_decode_binary_frame() -> None:
    assert decode_binary(b"\x01" * 16, 2, 2) == b"\x01" * 16
    with pytest.raises(ProtocolError):
        decode_binary(b"\x01" * 12, 2, 2)

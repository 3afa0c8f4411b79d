from .parser import parse_control_message
from .messages import AckMessage, StartMessage, ControlMessage
from .codec import (
    STOP_PAYLOAD,
    frame_size,
    encode_ack,
    encode_frame,
    encode_start,
    decode_binary,
)

__all__ = [
    "STOP_PAYLOAD",
    "AckMessage",
    "ControlMessage",
    "StartMessage",
    "decode_binary",
    "encode_ack",
    "encode_frame",
    "encode_start",
    "frame_size",
    "parse_control_message",
]

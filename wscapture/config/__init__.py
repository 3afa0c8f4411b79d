"""Configuration module exports (env-resolved constants only)."""

from .capture import MAX_OUTSTANDING, FRAME_LOOP_FPS
from .websocket import WS_ENDPOINT_PATH

__all__ = [
    "FRAME_LOOP_FPS",
    "MAX_OUTSTANDING",
    "WS_ENDPOINT_PATH",
]

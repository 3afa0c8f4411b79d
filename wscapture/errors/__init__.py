"""Shared error types for the capture client."""

from .window import WindowSaturatedError
from .protocol import ProtocolError
from .frame_source import FrameSourceError

__all__ = ["FrameSourceError", "ProtocolError", "WindowSaturatedError"]

"""Stream rendered frames to a remote consumer over a WebSocket."""

from .controller import CaptureController
from .state import RecordingSession, ConnectionPhase
from .errors import ProtocolError, FrameSourceError, WindowSaturatedError
from .capture import FrameSource, ArrayFrameSource, FlowControlWindow, BottomUpFrameSource

__all__ = [
    "ArrayFrameSource",
    "BottomUpFrameSource",
    "CaptureController",
    "ConnectionPhase",
    "FlowControlWindow",
    "FrameSource",
    "FrameSourceError",
    "ProtocolError",
    "RecordingSession",
    "WindowSaturatedError",
]

from .session import RecordingSession
from .settings import AppSettings, CaptureSettings, WebSocketSettings
from .connection import Connection, ConnectionPhase

__all__ = [
    "AppSettings",
    "CaptureSettings",
    "Connection",
    "ConnectionPhase",
    "RecordingSession",
    "WebSocketSettings",
]

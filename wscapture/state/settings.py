"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CaptureSettings:
    max_outstanding: int
    fps: float


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    ping_interval_s: float | None
    ping_timeout_s: float | None
    max_message_bytes: int


@dataclass(frozen=True, slots=True)
class AppSettings:
    capture: CaptureSettings
    websocket: WebSocketSettings


__all__ = ["AppSettings", "CaptureSettings", "WebSocketSettings"]

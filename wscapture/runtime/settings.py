"""Load runtime settings.

Defaults live in `wscapture/config/*`; this module re-reads the environment
at call time so tests and embedding applications can change it per run.
"""

from __future__ import annotations

import os

from wscapture.state.settings import AppSettings, CaptureSettings, WebSocketSettings
from wscapture.config.capture import (
    ENV_FRAME_LOOP_FPS,
    ENV_MAX_OUTSTANDING,
    DEFAULT_FRAME_LOOP_FPS,
    DEFAULT_MAX_OUTSTANDING,
)
from wscapture.config.websocket import (
    ENV_WS_PING_TIMEOUT_S,
    ENV_WS_PING_INTERVAL_S,
    ENV_WS_MAX_MESSAGE_BYTES,
    DEFAULT_WS_PING_TIMEOUT_S,
    DEFAULT_WS_PING_INTERVAL_S,
    DEFAULT_WS_MAX_MESSAGE_BYTES,
)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _optional_seconds_env(name: str, default: float) -> float | None:
    value = _float_env(name, default)
    return value if value > 0 else None


def _load_capture_settings() -> CaptureSettings:
    max_outstanding = max(0, _int_env(ENV_MAX_OUTSTANDING, DEFAULT_MAX_OUTSTANDING))
    fps = _float_env(ENV_FRAME_LOOP_FPS, DEFAULT_FRAME_LOOP_FPS)
    if fps <= 0:
        fps = DEFAULT_FRAME_LOOP_FPS
    return CaptureSettings(max_outstanding=max_outstanding, fps=fps)


def _load_websocket_settings() -> WebSocketSettings:
    return WebSocketSettings(
        ping_interval_s=_optional_seconds_env(ENV_WS_PING_INTERVAL_S, DEFAULT_WS_PING_INTERVAL_S),
        ping_timeout_s=_optional_seconds_env(ENV_WS_PING_TIMEOUT_S, DEFAULT_WS_PING_TIMEOUT_S),
        max_message_bytes=_int_env(ENV_WS_MAX_MESSAGE_BYTES, DEFAULT_WS_MAX_MESSAGE_BYTES),
    )


def load_settings() -> AppSettings:
    return AppSettings(
        capture=_load_capture_settings(),
        websocket=_load_websocket_settings(),
    )


__all__ = ["load_settings"]

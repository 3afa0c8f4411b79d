"""Capture and flow-control configuration (env-resolved constants only)."""

from __future__ import annotations

import os

ENV_MAX_OUTSTANDING = "WSCAPTURE_MAX_OUTSTANDING"
ENV_FRAME_LOOP_FPS = "WSCAPTURE_FPS"

# Sent-but-unacknowledged frames allowed in flight before capture stalls.
DEFAULT_MAX_OUTSTANDING = 10
DEFAULT_FRAME_LOOP_FPS = 60.0

_MAX_OUTSTANDING_RAW = (os.getenv(ENV_MAX_OUTSTANDING) or "").strip()
try:
    MAX_OUTSTANDING: int = int(_MAX_OUTSTANDING_RAW) if _MAX_OUTSTANDING_RAW else DEFAULT_MAX_OUTSTANDING
except Exception:
    MAX_OUTSTANDING = DEFAULT_MAX_OUTSTANDING
MAX_OUTSTANDING = max(0, int(MAX_OUTSTANDING))

_FRAME_LOOP_FPS_RAW = (os.getenv(ENV_FRAME_LOOP_FPS) or "").strip()
try:
    FRAME_LOOP_FPS: float = float(_FRAME_LOOP_FPS_RAW) if _FRAME_LOOP_FPS_RAW else DEFAULT_FRAME_LOOP_FPS
except Exception:
    FRAME_LOOP_FPS = DEFAULT_FRAME_LOOP_FPS
if FRAME_LOOP_FPS <= 0:
    FRAME_LOOP_FPS = DEFAULT_FRAME_LOOP_FPS

__all__ = [
    "ENV_MAX_OUTSTANDING",
    "ENV_FRAME_LOOP_FPS",
    "DEFAULT_MAX_OUTSTANDING",
    "DEFAULT_FRAME_LOOP_FPS",
    "MAX_OUTSTANDING",
    "FRAME_LOOP_FPS",
]

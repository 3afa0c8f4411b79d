"""Windowed backpressure for in-flight frames."""

from __future__ import annotations

from wscapture.errors import WindowSaturatedError
from wscapture.state.session import RecordingSession
from wscapture.config.capture import MAX_OUTSTANDING


class FlowControlWindow:
    """Bound the number of sent-but-unacknowledged frames.

    Capture is admitted while ``pos - acked <= max_outstanding``.
    """

    def __init__(self, *, max_outstanding: int = MAX_OUTSTANDING) -> None:
        self.max_outstanding = max(0, int(max_outstanding))

    def admit(self, session: RecordingSession) -> None:
        outstanding = session.outstanding
        if outstanding > self.max_outstanding:
            raise WindowSaturatedError(outstanding=outstanding, limit=self.max_outstanding)


__all__ = ["FlowControlWindow", "WindowSaturatedError"]

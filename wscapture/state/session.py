"""Per-recording session state."""

from __future__ import annotations

from dataclasses import dataclass

from wscapture.config.websocket import BYTES_PER_PIXEL


@dataclass(slots=True)
class RecordingSession:
    """One negotiated recording run.

    ``pos`` counts frames sent and ``acked`` is the highest frame index the
    peer has acknowledged; ``0 <= acked <= pos`` always holds. ``ready`` is
    set by ``begin_frame`` and consumed by the ``end_frame`` of the same tick.
    A negative ``length`` means the recording has no fixed length.
    """

    width: int
    height: int
    framerate: float
    length: int
    pos: int = 0
    acked: int = 0
    ready: bool = False

    @property
    def outstanding(self) -> int:
        return self.pos - self.acked

    @property
    def frame_size(self) -> int:
        return self.width * self.height * BYTES_PER_PIXEL

    @property
    def is_unbounded(self) -> bool:
        return self.length < 0

    @property
    def is_complete(self) -> bool:
        return not self.is_unbounded and self.pos >= self.length

    def timestamp_ms(self) -> float:
        return 1000 * self.pos / self.framerate


__all__ = ["RecordingSession"]

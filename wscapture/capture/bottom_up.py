"""Row-order flip for surfaces that read back bottom-up."""

from __future__ import annotations

import numpy as np

from wscapture.errors import FrameSourceError
from wscapture.config.websocket import BYTES_PER_PIXEL

from .base import FrameSource


class BottomUpFrameSource(FrameSource):
    """Wrap a source whose rows come out bottom-up and flip them."""

    def __init__(self, inner: FrameSource) -> None:
        self.inner = inner

    def current_size(self) -> tuple[int, int]:
        return self.inner.current_size()

    def resize(self, width: int, height: int) -> None:
        self.inner.resize(width, height)

    def capture(self) -> bytes:
        width, height = self.inner.current_size()
        raw = self.inner.capture()
        row_bytes = width * BYTES_PER_PIXEL
        if len(raw) != row_bytes * height:
            raise FrameSourceError(f"source returned {len(raw)} bytes for {width}x{height}")
        rows = np.frombuffer(raw, dtype=np.uint8).reshape(height, row_bytes)
        return rows[::-1].tobytes()


__all__ = ["BottomUpFrameSource"]

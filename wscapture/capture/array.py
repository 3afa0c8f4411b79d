"""In-memory RGBA canvas frame source."""

from __future__ import annotations

import numpy as np

from wscapture.errors import FrameSourceError
from wscapture.config.websocket import BYTES_PER_PIXEL

from .base import FrameSource


class ArrayFrameSource(FrameSource):
    """RGBA canvas backed by a ``(height, width, 4)`` uint8 array."""

    def __init__(self, width: int, height: int) -> None:
        self.pixels = self._allocate(width, height)

    @staticmethod
    def _allocate(width: int, height: int) -> np.ndarray:
        if width <= 0 or height <= 0:
            raise FrameSourceError(f"invalid canvas size {width}x{height}")
        try:
            return np.zeros((height, width, BYTES_PER_PIXEL), dtype=np.uint8)
        except (ValueError, MemoryError) as exc:
            raise FrameSourceError(f"cannot allocate {width}x{height} canvas: {exc}") from exc

    def current_size(self) -> tuple[int, int]:
        height, width = self.pixels.shape[:2]
        return width, height

    def resize(self, width: int, height: int) -> None:
        self.pixels = self._allocate(width, height)

    def capture(self) -> bytes:
        return self.pixels.tobytes()


__all__ = ["ArrayFrameSource"]

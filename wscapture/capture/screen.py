"""Screen-region frame source (mss)."""

from __future__ import annotations

import logging

import mss
import numpy as np
from mss.exception import ScreenShotError

from wscapture.errors import FrameSourceError

from .base import FrameSource

logger = logging.getLogger(__name__)


class ScreenFrameSource(FrameSource):
    """Capture the top-left region of a monitor.

    ``resize`` changes the size of the captured region; it is clamped to the
    monitor, so a region larger than the monitor never matches the requested
    size and the controller keeps skipping capture.
    """

    def __init__(self, monitor: int = 1, width: int | None = None, height: int | None = None) -> None:
        self._sct = mss.mss()
        try:
            self._monitor = self._sct.monitors[monitor]
        except IndexError as exc:
            self._sct.close()
            raise FrameSourceError(f"monitor {monitor} not found") from exc
        self._width = 0
        self._height = 0
        self.resize(width or self._monitor["width"], height or self._monitor["height"])

    def current_size(self) -> tuple[int, int]:
        return self._width, self._height

    def resize(self, width: int, height: int) -> None:
        clamped_w = min(width, self._monitor["width"])
        clamped_h = min(height, self._monitor["height"])
        if (clamped_w, clamped_h) != (width, height):
            logger.warning(
                "Requested region %dx%d exceeds monitor; using %dx%d", width, height, clamped_w, clamped_h
            )
        self._width = clamped_w
        self._height = clamped_h

    def capture(self) -> bytes:
        region = {
            "top": self._monitor["top"],
            "left": self._monitor["left"],
            "width": self._width,
            "height": self._height,
        }
        try:
            shot = self._sct.grab(region)
        except ScreenShotError as exc:
            raise FrameSourceError(f"screen grab failed: {exc}") from exc
        # mss yields BGRA rows top-down.
        bgra = np.asarray(shot, dtype=np.uint8)
        return bgra[..., [2, 1, 0, 3]].tobytes()

    def close(self) -> None:
        self._sct.close()


__all__ = ["ScreenFrameSource"]

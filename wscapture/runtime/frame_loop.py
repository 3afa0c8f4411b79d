"""Fixed-rate render loop driving a capture controller."""

from __future__ import annotations

import time
import asyncio
import logging
import contextlib
from collections.abc import Callable

from wscapture.config.capture import FRAME_LOOP_FPS
from wscapture.controller import CaptureController

logger = logging.getLogger(__name__)

RenderFn = Callable[[float], None]


class FrameLoop:
    """Call ``begin_frame``/render/``end_frame`` once per tick.

    ``render`` receives the controller's clock in milliseconds: loop time
    while free-running, frame time while a recording session is active.
    """

    def __init__(
        self,
        controller: CaptureController,
        render: RenderFn,
        *,
        fps: float | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._controller = controller
        self._render = render
        fps = float(FRAME_LOOP_FPS if fps is None else fps)
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self._interval_s = 1.0 / fps
        self._clock = clock or time.monotonic
        self._start = self._clock()
        self._stop_event = asyncio.Event()
        self._task: asyncio.Task | None = None
        self.ticks = 0

    def tick(self) -> bool:
        """Run one tick. Returns True if a frame was rendered without error."""
        controller = self._controller
        self.ticks += 1
        if not controller.begin_frame():
            controller.end_frame()
            return False
        wall_ms = (self._clock() - self._start) * 1000.0
        try:
            self._render(controller.current_time_ms(wall_ms))
        except Exception:
            logger.exception("render callback failed; dropping frame")
            controller.cancel_frame()
            return False
        controller.end_frame()
        return True

    def start(self) -> asyncio.Task:
        if self._task is None:
            self._stop_event.clear()
            self._task = asyncio.create_task(self._run())
        return self._task

    async def stop(self) -> None:
        self._stop_event.set()
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None

    async def _run(self) -> None:
        while not self._stop_event.is_set():
            try:
                self.tick()
            except Exception:
                logger.exception("frame tick failed")
            await asyncio.sleep(self._interval_s)


__all__ = ["FrameLoop", "RenderFn"]

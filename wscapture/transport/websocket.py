"""WebSocket client transport (websockets asyncio client)."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any

import websockets
from websockets.exceptions import ConnectionClosed, WebSocketException

from wscapture.config.websocket import WS_PING_TIMEOUT_S, WS_PING_INTERVAL_S, WS_MAX_MESSAGE_BYTES

from .events import TransportEvents

logger = logging.getLogger(__name__)

_CLOSE = object()


def _seconds_or_none(value: float | None) -> float | None:
    if value is None or value <= 0:
        return None
    return float(value)


class WebSocketTransport:
    """Fire-and-forget WebSocket transport driven by the running event loop.

    ``open()`` schedules the connection task. Outgoing messages go through an
    unbounded queue drained by a writer task, so they reach the peer in the
    order they were sent. ``on_close`` fires once when the connection task
    ends, after ``on_error`` if the connection failed.
    """

    def __init__(
        self,
        url: str,
        events: TransportEvents,
        *,
        ping_interval_s: float | None = WS_PING_INTERVAL_S,
        ping_timeout_s: float | None = WS_PING_TIMEOUT_S,
        max_message_bytes: int = WS_MAX_MESSAGE_BYTES,
    ) -> None:
        self.url = url
        self._events = events
        self._options: dict[str, Any] = {
            "ping_interval": _seconds_or_none(ping_interval_s),
            "ping_timeout": _seconds_or_none(ping_timeout_s),
            "max_size": max_message_bytes if max_message_bytes > 0 else None,
        }
        self._queue: asyncio.Queue[object] = asyncio.Queue()
        self._task: asyncio.Task | None = None
        self._ws: Any = None
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    def open(self) -> None:
        if self._task is None and not self._closed:
            self._task = asyncio.get_running_loop().create_task(self._run())
            # A done callback also fires for a task cancelled before it started.
            self._task.add_done_callback(self._finish)

    def send_text(self, text: str) -> None:
        self._enqueue(text)

    def send_binary(self, data: bytes) -> None:
        self._enqueue(bytes(data))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._ws is None:
            if self._task is not None:
                self._task.cancel()
            return
        # Already-queued messages are flushed before the close frame.
        self._queue.put_nowait(_CLOSE)

    def _enqueue(self, item: str | bytes) -> None:
        if self._closed:
            logger.debug("transport closed; dropping %d-byte message", len(item))
            return
        self._queue.put_nowait(item)

    async def _write_loop(self, ws: Any) -> None:
        while True:
            item = await self._queue.get()
            if item is _CLOSE:
                await ws.close()
                return
            try:
                await ws.send(item)
            except ConnectionClosed:
                return

    async def _run(self) -> None:
        try:
            async with websockets.connect(self.url, **self._options) as ws:
                self._ws = ws
                self._events.on_open()
                writer = asyncio.create_task(self._write_loop(ws))
                try:
                    async for message in ws:
                        self._events.on_message(message)
                finally:
                    writer.cancel()
                    with contextlib.suppress(asyncio.CancelledError, ConnectionClosed):
                        await writer
        except (OSError, TimeoutError, WebSocketException) as exc:
            self._events.on_error(exc)

    def _finish(self, task: asyncio.Task) -> None:
        if task.cancelled():
            logger.debug("WebSocket connection to %s cancelled", self.url)
        elif task.exception() is not None:
            logger.error("WebSocket connection task failed", exc_info=task.exception())
        self._closed = True
        self._ws = None
        self._events.on_close()


__all__ = ["WebSocketTransport"]

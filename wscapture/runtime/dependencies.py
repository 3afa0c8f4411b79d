"""Controller construction (WebSocket transport + flow-control window)."""

from __future__ import annotations

from wscapture.transport.url import ws_url
from wscapture.capture.base import FrameSource
from wscapture.state.settings import AppSettings
from wscapture.controller import CaptureController
from wscapture.capture.window import FlowControlWindow
from wscapture.transport.events import TransportEvents
from wscapture.transport.websocket import WebSocketTransport

from .settings import load_settings


def build_controller(
    server: str,
    *,
    source: FrameSource | None = None,
    secure: bool = False,
    settings: AppSettings | None = None,
) -> CaptureController:
    settings = settings or load_settings()
    url = ws_url(server, secure)

    def _transport_factory(events: TransportEvents) -> WebSocketTransport:
        return WebSocketTransport(
            url,
            events,
            ping_interval_s=settings.websocket.ping_interval_s,
            ping_timeout_s=settings.websocket.ping_timeout_s,
            max_message_bytes=settings.websocket.max_message_bytes,
        )

    return CaptureController(
        _transport_factory,
        source=source,
        window=FlowControlWindow(max_outstanding=settings.capture.max_outstanding),
    )


__all__ = ["build_controller"]

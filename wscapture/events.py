"""Transport callbacks bound to the transport that produced them."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wscapture.transport.base import Transport
    from wscapture.controller import CaptureController


class ConnectionEvents:
    """Forward transport events to a controller, tagged with their transport.

    The controller drops events whose transport is no longer its current one.
    """

    def __init__(self, controller: CaptureController) -> None:
        self._controller = controller
        self.transport: Transport | None = None

    def on_open(self) -> None:
        self._controller.handle_transport_open(self.transport)

    def on_message(self, payload: str | bytes) -> None:
        self._controller.handle_transport_message(self.transport, payload)

    def on_error(self, exc: BaseException) -> None:
        self._controller.handle_transport_error(self.transport, exc)

    def on_close(self) -> None:
        self._controller.handle_transport_close(self.transport)


__all__ = ["ConnectionEvents"]

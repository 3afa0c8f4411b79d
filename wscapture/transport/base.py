"""Transport contract between the capture controller and the wire."""

from __future__ import annotations

from typing import Protocol
from collections.abc import Callable

from .events import TransportEvents


class Transport(Protocol):
    """Ordered, bidirectional message channel to one peer.

    Every method returns immediately; sends are queued by the transport.
    """

    def open(self) -> None: ...

    def send_text(self, text: str) -> None: ...

    def send_binary(self, data: bytes) -> None: ...

    def close(self) -> None: ...


TransportFactory = Callable[[TransportEvents], Transport]

__all__ = ["Transport", "TransportEvents", "TransportFactory"]

"""Connection state for a single capture controller."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING
from dataclasses import dataclass

if TYPE_CHECKING:
    from wscapture.transport.base import Transport


class ConnectionPhase(enum.Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSING = "closing"


@dataclass(slots=True)
class Connection:
    transport: Transport
    phase: ConnectionPhase = ConnectionPhase.CONNECTING

    @property
    def closing(self) -> bool:
        return self.phase is ConnectionPhase.CLOSING


__all__ = ["Connection", "ConnectionPhase"]

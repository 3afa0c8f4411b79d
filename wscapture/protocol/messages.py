"""Decoded control messages (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StartMessage:
    width: int
    height: int
    framerate: float
    length: int


@dataclass(frozen=True, slots=True)
class AckMessage:
    frame: int


ControlMessage = StartMessage | AckMessage

__all__ = ["AckMessage", "ControlMessage", "StartMessage"]

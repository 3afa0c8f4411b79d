"""Callbacks a transport reports its lifecycle through."""

from __future__ import annotations

from typing import Protocol


class TransportEvents(Protocol):
    def on_open(self) -> None: ...

    def on_message(self, payload: str | bytes) -> None: ...

    def on_error(self, exc: BaseException) -> None: ...

    def on_close(self) -> None: ...


__all__ = ["TransportEvents"]

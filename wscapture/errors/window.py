"""Backpressure error (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WindowSaturatedError(Exception):
    """Raised when too many sent frames are still unacknowledged."""

    outstanding: int
    limit: int


__all__ = ["WindowSaturatedError"]

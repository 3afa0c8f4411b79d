"""Surface acquisition error."""

from __future__ import annotations


class FrameSourceError(RuntimeError):
    """Raised when a frame source has no usable surface to read from or resize."""


__all__ = ["FrameSourceError"]

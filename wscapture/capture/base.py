"""Frame source contract."""

from __future__ import annotations

import abc


class FrameSource(abc.ABC):
    """A drawable surface of known size.

    ``capture()`` must return ``width * height * 4`` bytes of RGBA8 in
    top-down row order for the current size. Implementations raise
    ``FrameSourceError`` when the surface is missing or cannot be resized.
    """

    @abc.abstractmethod
    def current_size(self) -> tuple[int, int]: ...

    @abc.abstractmethod
    def resize(self, width: int, height: int) -> None: ...

    @abc.abstractmethod
    def capture(self) -> bytes: ...


__all__ = ["FrameSource"]

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from wscapture.capture.base import FrameSource
from wscapture.controller import CaptureController
from wscapture.errors import FrameSourceError


def pytest_configure() -> None:
    # Keep `import wscapture...` working when running `pytest` from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


class FakeTransport:
    def __init__(self, events) -> None:
        self.events = events
        self.opened = False
        self.closed = False
        self.texts: list[str] = []
        self.binaries: list[bytes] = []

    def open(self) -> None:
        self.opened = True

    def send_text(self, text: str) -> None:
        self.texts.append(text)

    def send_binary(self, data: bytes) -> None:
        self.binaries.append(bytes(data))

    def close(self) -> None:
        self.closed = True

    @property
    def frames(self) -> list[bytes]:
        return [b for b in self.binaries if b]

    @property
    def stops(self) -> int:
        return sum(1 for b in self.binaries if not b)


class FakeTransportFactory:
    def __init__(self) -> None:
        self.transports: list[FakeTransport] = []

    def __call__(self, events) -> FakeTransport:
        transport = FakeTransport(events)
        self.transports.append(transport)
        return transport

    @property
    def last(self) -> FakeTransport:
        return self.transports[-1]


class FakeFrameSource(FrameSource):
    def __init__(self, width: int = 100, height: int = 100) -> None:
        self.width = width
        self.height = height
        self.resize_calls: list[tuple[int, int]] = []
        self.capture_calls = 0
        self.available = True
        self.resize_fails = False

    def current_size(self) -> tuple[int, int]:
        if not self.available:
            raise FrameSourceError("surface lost")
        return self.width, self.height

    def resize(self, width: int, height: int) -> None:
        self.resize_calls.append((width, height))
        if self.resize_fails:
            raise FrameSourceError(f"cannot resize to {width}x{height}")

    def apply_resize(self) -> None:
        self.width, self.height = self.resize_calls[-1]

    def capture(self) -> bytes:
        if not self.available:
            raise FrameSourceError("surface lost")
        self.capture_calls += 1
        return bytes([self.capture_calls % 256]) * (self.width * self.height * 4)


@pytest.fixture
def transport_factory() -> FakeTransportFactory:
    return FakeTransportFactory()


@pytest.fixture
def frame_source() -> FakeFrameSource:
    return FakeFrameSource()


@pytest.fixture
def controller(transport_factory: FakeTransportFactory, frame_source: FakeFrameSource) -> CaptureController:
    return CaptureController(transport_factory, source=frame_source)

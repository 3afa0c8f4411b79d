from __future__ import annotations

import numpy as np
import pytest

from wscapture.capture import screen
from wscapture.errors import FrameSourceError
from wscapture.capture.screen import ScreenFrameSource


class _FakeMss:
    def __init__(self) -> None:
        self.monitors = [
            {"top": 0, "left": 0, "width": 8, "height": 6},
            {"top": 10, "left": 20, "width": 4, "height": 3},
        ]
        self.regions: list[dict[str, int]] = []
        self.closed = False

    def grab(self, region: dict[str, int]) -> np.ndarray:
        self.regions.append(region)
        shot = np.zeros((region["height"], region["width"], 4), dtype=np.uint8)
        shot[..., 0] = 1  # B
        shot[..., 1] = 2  # G
        shot[..., 2] = 3  # R
        shot[..., 3] = 255
        return shot

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_mss(monkeypatch: pytest.MonkeyPatch) -> _FakeMss:
    sct = _FakeMss()
    monkeypatch.setattr(screen.mss, "mss", lambda: sct)
    return sct


def test_screen_source_defaults_to_monitor_size(fake_mss: _FakeMss) -> None:
    source = ScreenFrameSource(monitor=1)
    assert source.current_size() == (4, 3)


def test_screen_source_swizzles_bgra_to_rgba(fake_mss: _FakeMss) -> None:
    source = ScreenFrameSource(monitor=1, width=2, height=2)
    data = source.capture()
    assert len(data) == 2 * 2 * 4
    assert data[:4] == bytes((3, 2, 1, 255))
    assert fake_mss.regions == [{"top": 10, "left": 20, "width": 2, "height": 2}]


def test_screen_source_clamps_resize_to_monitor(fake_mss: _FakeMss) -> None:
    source = ScreenFrameSource(monitor=1)
    source.resize(100, 2)
    assert source.current_size() == (4, 2)


def test_screen_source_rejects_unknown_monitor(fake_mss: _FakeMss) -> None:
    with pytest.raises(FrameSourceError):
        ScreenFrameSource(monitor=5)
    assert fake_mss.closed


def test_screen_source_close(fake_mss: _FakeMss) -> None:
    ScreenFrameSource().close()
    assert fake_mss.closed

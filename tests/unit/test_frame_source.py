from __future__ import annotations

import numpy as np
import pytest

from wscapture.errors import FrameSourceError
from wscapture.capture import ArrayFrameSource, BottomUpFrameSource


def test_array_source_captures_top_down_rgba() -> None:
    source = ArrayFrameSource(3, 2)
    assert source.current_size() == (3, 2)
    source.pixels[0, :] = (255, 0, 0, 255)
    source.pixels[1, :] = (0, 0, 255, 255)

    data = source.capture()
    assert len(data) == 3 * 2 * 4
    assert data[:4] == bytes((255, 0, 0, 255))
    assert data[-4:] == bytes((0, 0, 255, 255))


def test_array_source_resize_reallocates() -> None:
    source = ArrayFrameSource(2, 2)
    source.pixels[:] = 9
    source.resize(5, 4)
    assert source.current_size() == (5, 4)
    assert source.pixels.shape == (4, 5, 4)
    assert not source.pixels.any()


def test_array_source_rejects_empty_size() -> None:
    with pytest.raises(FrameSourceError):
        ArrayFrameSource(0, 10)


def test_array_source_unallocatable_resize_keeps_canvas() -> None:
    source = ArrayFrameSource(2, 2)
    with pytest.raises(FrameSourceError):
        source.resize(2**31, 2**31)
    assert source.current_size() == (2, 2)


def test_bottom_up_source_reverses_rows() -> None:
    inner = ArrayFrameSource(2, 3)
    for row in range(3):
        inner.pixels[row, :] = row
    flipped = BottomUpFrameSource(inner)

    rows = np.frombuffer(flipped.capture(), dtype=np.uint8).reshape(3, 2 * 4)
    assert rows[0].tolist() == [2] * 8
    assert rows[1].tolist() == [1] * 8
    assert rows[2].tolist() == [0] * 8


def test_bottom_up_source_delegates_size() -> None:
    inner = ArrayFrameSource(2, 3)
    flipped = BottomUpFrameSource(inner)
    flipped.resize(8, 6)
    assert inner.current_size() == (8, 6)
    assert flipped.current_size() == (8, 6)


def test_bottom_up_source_rejects_short_buffer() -> None:
    class _Short(ArrayFrameSource):
        def capture(self) -> bytes:
            return b"\x00" * 4

    with pytest.raises(FrameSourceError):
        BottomUpFrameSource(_Short(2, 2)).capture()

from __future__ import annotations

import pytest

from wscapture.state import RecordingSession
from wscapture.errors import WindowSaturatedError
from wscapture.capture.window import FlowControlWindow


def _session(pos: int, acked: int) -> RecordingSession:
    return RecordingSession(width=1, height=1, framerate=30, length=-1, pos=pos, acked=acked)


def test_window_defaults_to_ten() -> None:
    assert FlowControlWindow().max_outstanding == 10


def test_window_admits_up_to_limit() -> None:
    window = FlowControlWindow(max_outstanding=10)
    window.admit(_session(0, 0))
    window.admit(_session(10, 0))
    window.admit(_session(25, 15))


def test_window_rejects_when_saturated() -> None:
    window = FlowControlWindow(max_outstanding=10)
    with pytest.raises(WindowSaturatedError) as exc:
        window.admit(_session(11, 0))
    assert exc.value.outstanding == 11
    assert exc.value.limit == 10


def test_zero_window_allows_single_frame_in_flight() -> None:
    window = FlowControlWindow(max_outstanding=0)
    window.admit(_session(3, 3))
    with pytest.raises(WindowSaturatedError):
        window.admit(_session(4, 3))


def test_session_helpers() -> None:
    session = RecordingSession(width=4, height=3, framerate=25, length=5, pos=3, acked=1)
    assert session.outstanding == 2
    assert session.frame_size == 48
    assert not session.is_unbounded
    assert not session.is_complete
    session.pos = 5
    assert session.is_complete
    assert session.timestamp_ms() == 200


def test_negative_length_is_unbounded() -> None:
    session = RecordingSession(width=1, height=1, framerate=1, length=-7, pos=10_000)
    assert session.is_unbounded
    assert not session.is_complete

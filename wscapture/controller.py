"""Per-tick capture decisions and the recording connection state machine."""

from __future__ import annotations

import logging

from wscapture.capture.base import FrameSource
from wscapture.events import ConnectionEvents
from wscapture.capture.window import FlowControlWindow
from wscapture.state.session import RecordingSession
from wscapture.transport.base import Transport, TransportFactory
from wscapture.state.connection import Connection, ConnectionPhase
from wscapture.errors import ProtocolError, FrameSourceError, WindowSaturatedError
from wscapture.protocol import (
    STOP_PAYLOAD,
    AckMessage,
    StartMessage,
    ControlMessage,
    encode_frame,
    parse_control_message,
)

logger = logging.getLogger(__name__)


class CaptureController:
    """Stream rendered frames to one peer under a windowed flow-control policy.

    Drive it once per render tick::

        if controller.begin_frame():
            render(controller.current_time_ms(now_ms))
        controller.end_frame()

    The surface is injected with ``set_source``; transports are created by
    ``transport_factory`` on each ``start_recording``.
    """

    def __init__(
        self,
        transport_factory: TransportFactory,
        *,
        source: FrameSource | None = None,
        window: FlowControlWindow | None = None,
    ) -> None:
        self._transport_factory = transport_factory
        self._source = source
        self._window = window or FlowControlWindow()
        self._connection: Connection | None = None
        self._session: RecordingSession | None = None

    # -- state ---------------------------------------------------------

    @property
    def phase(self) -> ConnectionPhase:
        if self._connection is None:
            return ConnectionPhase.DISCONNECTED
        return self._connection.phase

    @property
    def closing(self) -> bool:
        return self._connection is not None and self._connection.closing

    @property
    def session(self) -> RecordingSession | None:
        return self._session

    @property
    def source(self) -> FrameSource | None:
        return self._source

    def set_source(self, source: FrameSource | None) -> None:
        self._source = source

    # -- local control -------------------------------------------------

    def start_recording(self) -> None:
        if self._connection is not None:
            return
        events = ConnectionEvents(self)
        transport = self._transport_factory(events)
        events.transport = transport
        self._connection = Connection(transport=transport)
        logger.info("Connecting capture transport")
        transport.open()

    def stop_recording(self) -> None:
        conn = self._connection
        if conn is None or conn.closing:
            return
        if self._session is None:
            conn.transport.close()
            self._teardown()
            return
        conn.transport.send_binary(STOP_PAYLOAD)
        self._session = None
        conn.phase = ConnectionPhase.CLOSING

    def current_time_ms(self, time_ms: float) -> float:
        if self._session is None:
            return time_ms
        return self._session.timestamp_ms()

    # -- per tick ------------------------------------------------------

    def begin_frame(self) -> bool:
        """Return True if the frame should be rendered and captured this tick."""
        session = self._session
        if session is None:
            return self._connection is None
        session.ready = False

        source = self._source
        if source is None:
            logger.warning("No frame source; skipping capture")
            return False
        try:
            cwidth, cheight = source.current_size()
        except FrameSourceError as exc:
            logger.warning("Frame source unavailable: %s", exc)
            return False

        if (cwidth, cheight) != (session.width, session.height):
            logger.info("Resizing surface from %dx%d to %dx%d", cwidth, cheight, session.width, session.height)
            try:
                source.resize(session.width, session.height)
            except FrameSourceError as exc:
                logger.warning("Resize to %dx%d failed: %s", session.width, session.height, exc)
            return False

        try:
            self._window.admit(session)
        except WindowSaturatedError as exc:
            logger.debug("Backpressure: %d frames outstanding (limit %d)", exc.outstanding, exc.limit)
            return False

        session.ready = True
        return True

    def cancel_frame(self) -> None:
        """Drop this tick's capture, e.g. when rendering failed."""
        if self._session is not None:
            self._session.ready = False

    def end_frame(self) -> None:
        session = self._session
        if session is None or not session.ready:
            return
        session.ready = False
        conn = self._connection
        source = self._source
        if conn is None or source is None:
            return

        try:
            frame = encode_frame(source.capture(), session.width, session.height)
        except FrameSourceError as exc:
            logger.warning("Capture failed: %s", exc)
            return
        except ProtocolError as exc:
            logger.error("Captured frame rejected: %s", exc)
            return

        conn.transport.send_binary(frame)
        session.pos += 1
        if session.is_complete:
            logger.info("Done: length=%d; pos=%d", session.length, session.pos)
            self.stop_recording()

    # -- transport events ------------------------------------------------

    def _is_current(self, transport: Transport | None) -> bool:
        return self._connection is not None and self._connection.transport is transport

    def handle_transport_open(self, transport: Transport | None) -> None:
        if not self._is_current(transport):
            return
        if self._connection.phase is ConnectionPhase.CONNECTING:
            self._connection.phase = ConnectionPhase.OPEN
        logger.info("WebSocket open")

    def handle_transport_close(self, transport: Transport | None) -> None:
        if not self._is_current(transport):
            return
        logger.info("Socket closed")
        self._teardown()

    def handle_transport_error(self, transport: Transport | None, exc: BaseException) -> None:
        if not self._is_current(transport):
            return
        logger.error("WebSocket error: %s", exc)
        self._reset()

    def handle_transport_message(self, transport: Transport | None, payload: str | bytes) -> None:
        if not self._is_current(transport):
            return
        if self._connection.phase is not ConnectionPhase.OPEN:
            logger.debug("Ignoring message in phase %s", self._connection.phase.value)
            return
        try:
            self._dispatch(parse_control_message(payload))
        except ProtocolError as exc:
            logger.error("Could not parse message: %s (%r)", exc, payload[:128])
            self._reset()

    def _dispatch(self, msg: ControlMessage) -> None:
        if isinstance(msg, StartMessage):
            self._handle_start(msg)
        elif isinstance(msg, AckMessage):
            self._handle_ack(msg)

    def _handle_start(self, msg: StartMessage) -> None:
        if self._session is not None:
            logger.info("Ignoring start: a session is already active")
            return
        self._session = RecordingSession(
            width=msg.width,
            height=msg.height,
            framerate=msg.framerate,
            length=msg.length,
        )
        logger.info(
            "Recording started: %dx%d @ %g fps, length=%d", msg.width, msg.height, msg.framerate, msg.length
        )

    def _handle_ack(self, msg: AckMessage) -> None:
        session = self._session
        if session is None:
            logger.debug("Ignoring ack %d: no active session", msg.frame)
            return
        if msg.frame > session.pos:
            raise ProtocolError(f"ack for frame {msg.frame} but only {session.pos} sent")
        if msg.frame < session.acked:
            logger.debug("Ignoring stale ack %d (acked=%d)", msg.frame, session.acked)
            return
        session.acked = msg.frame

    def _reset(self) -> None:
        if self._connection is not None:
            self._connection.transport.close()
        self._teardown()

    def _teardown(self) -> None:
        self._connection = None
        self._session = None


__all__ = ["CaptureController"]

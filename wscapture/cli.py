"""Stream a screen region to a capture consumer."""

from __future__ import annotations

import signal
import asyncio
import logging
import argparse
import contextlib

from wscapture.runtime import FrameLoop, load_settings, build_controller, configure_logging
from wscapture.state.connection import ConnectionPhase
from wscapture.capture.screen import ScreenFrameSource
from wscapture.errors import FrameSourceError

logger = logging.getLogger(__name__)

_POLL_S = 0.1


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wscapture", description=__doc__)
    parser.add_argument("--server", default="localhost:8080", help="host:port or ws(s):// URL of the consumer")
    parser.add_argument("--secure", action="store_true", help="use wss://")
    parser.add_argument("--monitor", type=int, default=1, help="mss monitor index (1 = primary)")
    parser.add_argument("--fps", type=float, default=None, help="render loop rate (default: WSCAPTURE_FPS)")
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> None:
    settings = load_settings()
    controller = build_controller(args.server, secure=args.secure, settings=settings)
    source = ScreenFrameSource(monitor=args.monitor)
    controller.set_source(source)
    frame_loop = FrameLoop(controller, lambda _time_ms: None, fps=args.fps or settings.capture.fps)
    force_close = asyncio.Event()

    def _interrupt() -> None:
        if controller.closing:
            force_close.set()
        controller.stop_recording()

    loop = asyncio.get_running_loop()
    with contextlib.suppress(NotImplementedError):
        loop.add_signal_handler(signal.SIGINT, _interrupt)

    controller.start_recording()
    frame_loop.start()
    try:
        while controller.phase is not ConnectionPhase.DISCONNECTED and not force_close.is_set():
            await asyncio.sleep(_POLL_S)
    finally:
        await frame_loop.stop()
        source.close()
    logger.info("Capture finished after %d ticks", frame_loop.ticks)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    configure_logging()
    try:
        asyncio.run(_run(args))
    except (FrameSourceError, ValueError) as exc:
        raise SystemExit(f"wscapture: {exc}") from exc


__all__ = ["main"]

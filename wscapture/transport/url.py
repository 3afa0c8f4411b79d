"""Capture socket URL helper."""

from __future__ import annotations

from urllib.parse import urlparse

from wscapture.config.websocket import WS_ENDPOINT_PATH


def ws_url(server: str, secure: bool = False, path: str = WS_ENDPOINT_PATH) -> str:
    """Resolve ``--server`` to the consumer's capture socket URL.

    A full ``ws://``/``wss://`` URL with a path is used as given, so a
    consumer mounted elsewhere can be targeted directly. A bare
    ``host[:port]`` or a URL without a path gets the default endpoint.
    """
    server = (server or "").strip().rstrip("/")
    if not server:
        raise ValueError("server address is empty")
    if server.startswith(("ws://", "wss://")):
        if urlparse(server).path:
            return server
        return f"{server}{path}"
    scheme = "wss" if secure else "ws"
    return f"{scheme}://{server}{path}"


__all__ = ["ws_url"]

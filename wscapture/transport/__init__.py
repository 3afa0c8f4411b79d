from .url import ws_url
from .websocket import WebSocketTransport
from .events import TransportEvents
from .base import Transport, TransportFactory

__all__ = [
    "Transport",
    "TransportEvents",
    "TransportFactory",
    "WebSocketTransport",
    "ws_url",
]

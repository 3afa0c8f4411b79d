"""Malformed peer message error."""

from __future__ import annotations


class ProtocolError(ValueError):
    """Raised when a peer message cannot be decoded or violates the protocol."""


__all__ = ["ProtocolError"]

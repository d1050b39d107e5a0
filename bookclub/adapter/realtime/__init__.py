"""WebSocket push channel."""

from .connections import ConnectionManager

__all__ = ["ConnectionManager"]

from typing import Any, Dict, Optional, Protocol


class Channel(Protocol):
    """Outbound side of the per-connection event channel. Sends are fire and forget."""

    def send(self, sid: str, event: str, payload: Optional[Dict[str, Any]] = None) -> None:
        ...


class SocketIOChannel:
    """Deliver events to a single connection through Flask-SocketIO."""

    def __init__(self, socketio, namespace: str = '/'):
        self._socketio = socketio
        self._namespace = namespace

    def send(self, sid: str, event: str, payload: Optional[Dict[str, Any]] = None) -> None:
        # Every sid is its own Socket.IO room
        self._socketio.emit(event, payload or {}, to=sid, namespace=self._namespace)

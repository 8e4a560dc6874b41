from flask import current_app, request
from flask_socketio import emit

from duelrelay import socketio, messages
from duelrelay.messages import InvalidPayload, JoinRequest, MoveUpdate, ShotReport


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _arena():
    return current_app.extensions['arena']


def handle_connect():
    current_app.logger.info(f"[+] sid={_get_sid()} connected")


def handle_disconnect(reason=None):
    sid = _get_sid()
    _arena().disconnect(sid)
    current_app.logger.info(f"[-] sid={sid} disconnected reason={reason}")


def handle_join(data=None):
    req = JoinRequest.from_payload(data)
    _arena().join(_get_sid(), req.name, req.room)


def handle_move(data=None):
    try:
        update = MoveUpdate.from_payload(data)
    except InvalidPayload as exc:
        current_app.logger.warning(f"[drop] event={messages.MOVE} sid={_get_sid()} {exc}")
        return
    _arena().move(_get_sid(), update.position)


def handle_shot(data=None):
    try:
        report = ShotReport.from_payload(data)
    except InvalidPayload as exc:
        current_app.logger.warning(f"[drop] event={messages.SHOT} sid={_get_sid()} {exc}")
        return
    _arena().shot(_get_sid(), report)


def handle_reload(data=None):
    _arena().reload(_get_sid())


def handle_ping(data=None):
    emit(messages.PONG, data or {})


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on the game namespace."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event(messages.JOIN, handle_join, namespace=namespace)
    socketio.on_event(messages.MOVE, handle_move, namespace=namespace)
    socketio.on_event(messages.SHOT, handle_shot, namespace=namespace)
    socketio.on_event(messages.RELOAD, handle_reload, namespace=namespace)
    socketio.on_event(messages.PING, handle_ping, namespace=namespace)

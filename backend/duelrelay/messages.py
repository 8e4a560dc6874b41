"""Wire messages exchanged with game clients.

Inbound payloads are parsed into small typed records here, before they reach
the duel services. Join requests are never rejected (bad values fall back to
defaults); movement and shot payloads that cannot be interpreted raise
`InvalidPayload` and are dropped by the socket layer.
"""
from dataclasses import dataclass
from numbers import Real
from typing import Any

from duelrelay.models import Position

# Inbound event names
JOIN = 'fps_join'
MOVE = 'fps_move'
SHOT = 'fps_shot'
RELOAD = 'fps_reload'
PING = 'ping_fps'

# Outbound event names
PONG = 'pong_fps'
WAITING_FOR_OPPONENT = 'waitingForOpponent'
ROOM_FULL = 'roomFull'
MATCH_READY = 'matchReady'
OPPONENT_MOVED = 'opponentMoved'
OPPONENT_HIT = 'opponentHit'
OPPONENT_SHOT = 'opponentShot'
ROUND_RESULT = 'roundResult'
OPPONENT_RELOADING = 'opponentReloading'
OPPONENT_LEFT = 'opponentLeft'


class InvalidPayload(ValueError):
    """Raised when an inbound payload cannot be turned into a message."""


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ''


def _number(data, key: str) -> float:
    value = data.get(key)
    # bool is a Real subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidPayload(f'{key} must be a number, got {value!r}')
    return float(value)


@dataclass(frozen=True)
class JoinRequest:
    name: str
    room: str

    @classmethod
    def from_payload(cls, data) -> 'JoinRequest':
        data = data if isinstance(data, dict) else {}
        return cls(name=_text(data.get('name')), room=_text(data.get('room')))


@dataclass(frozen=True)
class MoveUpdate:
    position: Position

    @classmethod
    def from_payload(cls, data) -> 'MoveUpdate':
        if not isinstance(data, dict):
            raise InvalidPayload('move payload must be an object')
        return cls(Position(
            x=_number(data, 'x'),
            y=_number(data, 'y'),
            z=_number(data, 'z'),
            ry=_number(data, 'ry'),
        ))


@dataclass(frozen=True)
class ShotReport:
    hit: bool
    headshot: bool = False

    @classmethod
    def from_payload(cls, data) -> 'ShotReport':
        if not isinstance(data, dict):
            raise InvalidPayload('shot payload must be an object')
        hit = data.get('hit') is True
        # headshot only means something on a hit
        return cls(hit=hit, headshot=hit and data.get('headshot') is True)

from duelrelay import messages
from duelrelay.models import Position
from .channel import Channel
from .registry import ParticipantRegistry, SessionRegistry


class PositionRelay:
    """Pass movement straight through to the opponent. Clients own movement."""

    def __init__(self, sessions: SessionRegistry, participants: ParticipantRegistry, channel: Channel):
        self.sessions = sessions
        self.participants = participants
        self.channel = channel

    def move(self, sid: str, position: Position) -> None:
        player = self.participants.get(sid)
        if not player or not player.session_code:
            return
        player.position = position
        session = self.sessions.get(player.session_code)
        if not session:
            return
        other = session.other(sid)
        if other:
            self.channel.send(other, messages.OPPONENT_MOVED, position.to_dict())

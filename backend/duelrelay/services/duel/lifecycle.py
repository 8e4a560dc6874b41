import logging
from typing import Optional

from duelrelay import messages
from .channel import Channel
from .registry import MatchQueue, ParticipantRegistry, SessionRegistry


class LifecycleManager:
    def __init__(
        self,
        sessions: SessionRegistry,
        participants: ParticipantRegistry,
        queue: MatchQueue,
        channel: Channel,
        logger: Optional[logging.Logger] = None,
    ):
        self.sessions = sessions
        self.participants = participants
        self.queue = queue
        self.channel = channel
        self.logger = logger or logging.getLogger(__name__)

    def _opponent_of(self, sid: str) -> Optional[str]:
        player = self.participants.get(sid)
        if not player or not player.session_code:
            return None
        session = self.sessions.get(player.session_code)
        return session.other(sid) if session else None

    def reload(self, sid: str) -> None:
        other = self._opponent_of(sid)
        if other:
            self.channel.send(other, messages.OPPONENT_RELOADING)

    def disconnect(self, sid: str) -> None:
        """Release everything a connection holds. Safe to call repeatedly."""
        player = self.participants.get(sid)
        if player and player.session_code:
            code = player.session_code
            session = self.sessions.get(code)
            if session:
                other = session.other(sid)
                if other:
                    self.channel.send(other, messages.OPPONENT_LEFT)
                session.vacate(sid)
                if session.is_empty:
                    self.sessions.remove(code)
                    self.logger.info(f"[room-close] code={code}")
            player.session_code = None

        if self.queue.discard(sid):
            self.logger.info(f"[queue-leave] sid={sid}")
        self.participants.remove(sid)

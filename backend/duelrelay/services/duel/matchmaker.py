import logging
from typing import Callable, Optional

from duelrelay import messages
from duelrelay.models import Participant, Session
from .channel import Channel
from .codes import normalize_code, sanitize_name
from .registry import MatchQueue, ParticipantRegistry, SessionRegistry


class Matchmaker:
    """Turn a join request into a session: create, join, or queue."""

    def __init__(
        self,
        sessions: SessionRegistry,
        participants: ParticipantRegistry,
        queue: MatchQueue,
        channel: Channel,
        code_factory: Callable[[], str],
        max_health: int = 100,
        name_max_length: int = 12,
        default_name: str = 'PLAYER',
        fallback_opponent_name: str = 'ENEMY',
        logger: Optional[logging.Logger] = None,
    ):
        self.sessions = sessions
        self.participants = participants
        self.queue = queue
        self.channel = channel
        self.code_factory = code_factory
        self.max_health = max_health
        self.name_max_length = name_max_length
        self.default_name = default_name
        self.fallback_opponent_name = fallback_opponent_name
        self.logger = logger or logging.getLogger(__name__)

    def join(self, sid: str, raw_name, raw_code) -> None:
        name = sanitize_name(raw_name, self.name_max_length, self.default_name)
        code = normalize_code(raw_code)
        if code:
            self._join_private(sid, name, code)
        else:
            self._join_public(sid, name)

    def refuses(self, code: str) -> bool:
        """True when a code join into `code` must be answered with roomFull."""
        session = self.sessions.get(code)
        # Public sessions are born full and never take joiners by code
        return session is not None and (session.public or session.is_full)

    def refuse(self, sid: str, code: str) -> None:
        self.logger.info(f"[room-full] code={code} sid={sid}")
        self.channel.send(sid, messages.ROOM_FULL)

    def _register(self, sid: str, name: str, code: Optional[str]) -> Participant:
        return self.participants.add(
            Participant(sid=sid, name=name, session_code=code, health=self.max_health)
        )

    def _join_private(self, sid: str, name: str, code: str) -> None:
        session = self.sessions.get(code)
        if session is None:
            self.sessions.add(Session(code=code, slot_a=sid))
            self._register(sid, name, code)
            self.channel.send(sid, messages.WAITING_FOR_OPPONENT)
            self.logger.info(f"[room-create] code={code} name={name} sid={sid}")
            return

        if self.refuses(code):
            self.refuse(sid, code)
            return

        session.seat(sid)
        self._register(sid, name, code)
        self.notify_match_ready(session)

    def _join_public(self, sid: str, name: str) -> None:
        me = self._register(sid, name, None)
        while True:
            opponent_sid = self.queue.pop()
            if opponent_sid is None:
                self.queue.push(sid)
                self.channel.send(sid, messages.WAITING_FOR_OPPONENT)
                self.logger.info(f"[queue] name={name} sid={sid} waiting for match")
                return
            opponent = self.participants.get(opponent_sid)
            if opponent is None or opponent.session_code or opponent_sid == sid:
                self.logger.debug(f"[queue-stale] sid={opponent_sid} discarded")
                continue
            break

        code = self._new_public_code()
        session = self.sessions.add(
            Session(code=code, slot_a=opponent_sid, slot_b=sid, public=True)
        )
        opponent.session_code = code
        me.session_code = code
        self.notify_match_ready(session)

    def _new_public_code(self) -> str:
        while True:
            code = self.code_factory()
            if code not in self.sessions:
                return code

    def notify_match_ready(self, session: Session) -> None:
        """Tell each occupant of a full session who they are fighting."""
        a = self.participants.get(session.slot_a)
        b = self.participants.get(session.slot_b)
        self.logger.info(
            f"[match] code={session.code} a={a.name if a else None} b={b.name if b else None}"
        )
        if session.slot_a:
            self.channel.send(session.slot_a, messages.MATCH_READY, {
                'opponentName': b.name if b and b.name else self.fallback_opponent_name,
            })
        if session.slot_b:
            self.channel.send(session.slot_b, messages.MATCH_READY, {
                'opponentName': a.name if a and a.name else self.fallback_opponent_name,
            })

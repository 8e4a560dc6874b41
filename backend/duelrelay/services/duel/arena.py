import logging
import threading
from typing import Any, Callable, Dict, Optional

from duelrelay.messages import ShotReport
from duelrelay.models import Position
from .channel import Channel
from .codes import PublicCodeGenerator, normalize_code
from .combat import CombatResolver
from .lifecycle import LifecycleManager
from .matchmaker import Matchmaker
from .registry import MatchQueue, ParticipantRegistry, SessionRegistry
from .relay import PositionRelay


class Arena:
    """All duel state for one server process.

    Owns the session and participant registries and the public queue, and
    serialises every operation behind a single lock so socket handlers
    running on different threads never interleave their mutations.
    """

    def __init__(
        self,
        channel: Channel,
        *,
        max_health: int = 100,
        body_damage: int = 24,
        headshot_damage: int = 85,
        name_max_length: int = 12,
        default_name: str = 'PLAYER',
        fallback_opponent_name: str = 'ENEMY',
        public_prefix: str = 'PUB_',
        code_factory: Optional[Callable[[], str]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.channel = channel
        self.logger = logger or logging.getLogger(__name__)
        self.sessions = SessionRegistry()
        self.participants = ParticipantRegistry()
        self.queue = MatchQueue()
        self._lock = threading.RLock()

        self.matchmaker = Matchmaker(
            self.sessions, self.participants, self.queue, channel,
            code_factory=code_factory or PublicCodeGenerator(prefix=public_prefix),
            max_health=max_health,
            name_max_length=name_max_length,
            default_name=default_name,
            fallback_opponent_name=fallback_opponent_name,
            logger=self.logger,
        )
        self.relay = PositionRelay(self.sessions, self.participants, channel)
        self.combat = CombatResolver(
            self.sessions, self.participants, channel,
            max_health=max_health,
            body_damage=body_damage,
            headshot_damage=headshot_damage,
            logger=self.logger,
        )
        self.lifecycle = LifecycleManager(
            self.sessions, self.participants, self.queue, channel, logger=self.logger
        )

    @classmethod
    def from_config(cls, config, channel: Channel, logger: Optional[logging.Logger] = None,
                    code_factory: Optional[Callable[[], str]] = None) -> 'Arena':
        prefix = config.get('PUBLIC_CODE_PREFIX', 'PUB_')
        return cls(
            channel,
            max_health=int(config.get('MAX_HEALTH', 100)),
            body_damage=int(config.get('BODY_DAMAGE', 24)),
            headshot_damage=int(config.get('HEADSHOT_DAMAGE', 85)),
            name_max_length=int(config.get('NAME_MAX_LENGTH', 12)),
            default_name=config.get('DEFAULT_PLAYER_NAME', 'PLAYER'),
            fallback_opponent_name=config.get('FALLBACK_OPPONENT_NAME', 'ENEMY'),
            public_prefix=prefix,
            code_factory=code_factory or PublicCodeGenerator(
                prefix=prefix, length=int(config.get('PUBLIC_CODE_LENGTH', 6))
            ),
            logger=logger,
        )

    def join(self, sid: str, raw_name, raw_code) -> None:
        with self._lock:
            code = normalize_code(raw_code)
            if code and self.matchmaker.refuses(code):
                # Refused joins leave every record untouched, including the caller's
                self.matchmaker.refuse(sid, code)
                return
            if sid in self.participants:
                # A second join from the same connection starts over
                self.logger.info(f"[rejoin] sid={sid}")
                self.lifecycle.disconnect(sid)
            self.matchmaker.join(sid, raw_name, raw_code)

    def move(self, sid: str, position: Position) -> None:
        with self._lock:
            self.relay.move(sid, position)

    def shot(self, sid: str, report: ShotReport) -> None:
        with self._lock:
            self.combat.shot(sid, report)

    def reload(self, sid: str) -> None:
        with self._lock:
            self.lifecycle.reload(sid)

    def disconnect(self, sid: str) -> None:
        with self._lock:
            self.lifecycle.disconnect(sid)

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return {
                'sessions': [self._describe(s) for s in self.sessions],
                'queued': len(self.queue),
                'participants': len(self.participants),
            }

    def describe_session(self, raw_code) -> Optional[Dict[str, Any]]:
        with self._lock:
            session = self.sessions.get(normalize_code(raw_code))
            return self._describe(session) if session else None

    def _describe(self, session) -> Dict[str, Any]:
        payload = session.to_dict()
        players = []
        for sid in session.occupants:
            p = self.participants.get(sid)
            if p:
                players.append({'sid': sid, **p.to_dict()})
        payload['players'] = players
        return payload

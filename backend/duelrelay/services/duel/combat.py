import logging
from typing import Optional

from duelrelay import messages
from duelrelay.messages import ShotReport
from .channel import Channel
from .registry import ParticipantRegistry, SessionRegistry


class CombatResolver:
    """Server-side authority for health.

    Shooters report whether they hit and where; the resolver applies damage
    to the opponent, tells both sides, and restarts the round in place when
    the opponent drops to zero. Misses change nothing and are not relayed.
    """

    def __init__(
        self,
        sessions: SessionRegistry,
        participants: ParticipantRegistry,
        channel: Channel,
        max_health: int = 100,
        body_damage: int = 24,
        headshot_damage: int = 85,
        logger: Optional[logging.Logger] = None,
    ):
        self.sessions = sessions
        self.participants = participants
        self.channel = channel
        self.max_health = max_health
        self.body_damage = body_damage
        self.headshot_damage = headshot_damage
        self.logger = logger or logging.getLogger(__name__)

    def damage_for(self, report: ShotReport) -> int:
        return self.headshot_damage if report.headshot else self.body_damage

    def shot(self, sid: str, report: ShotReport) -> None:
        shooter = self.participants.get(sid)
        if not shooter or not shooter.session_code:
            return
        if not report.hit:
            return

        session = self.sessions.get(shooter.session_code)
        if not session:
            return
        opponent_sid = session.other(sid)
        opponent = self.participants.get(opponent_sid)
        if not opponent:
            self.logger.debug(f"[shot-stale] code={session.code} shooter={sid} no opponent")
            return

        dmg = self.damage_for(report)
        current = opponent.health if opponent.health is not None else self.max_health
        opponent.health = max(0, current - dmg)

        self.channel.send(sid, messages.OPPONENT_HIT, {'dmg': dmg, 'headshot': report.headshot})
        self.channel.send(opponent_sid, messages.OPPONENT_SHOT, {'hit': True, 'headshot': report.headshot})

        if opponent.health <= 0:
            for occupant in session.occupants:
                self.channel.send(occupant, messages.ROUND_RESULT, {'winner': sid})
            opponent.health = self.max_health
            shooter.health = self.max_health
            shooter.wins += 1
            session.rounds += 1
            self.logger.info(
                f"[round] code={session.code} round={session.rounds} winner={shooter.name} sid={sid}"
            )

from collections import deque
from typing import Deque, Dict, Iterator, Optional

from duelrelay.models import Participant, Session


class SessionRegistry:
    """Owns every live Session, keyed by session code."""

    def __init__(self) -> None:
        self._sessions: Dict[str, Session] = {}

    def get(self, code: Optional[str]) -> Optional[Session]:
        if not code:
            return None
        return self._sessions.get(code)

    def add(self, session: Session) -> Session:
        self._sessions[session.code] = session
        return session

    def remove(self, code: str) -> Optional[Session]:
        return self._sessions.pop(code, None)

    def __contains__(self, code) -> bool:
        return code in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)

    def __iter__(self) -> Iterator[Session]:
        return iter(list(self._sessions.values()))


class ParticipantRegistry:
    """Per-connection game state, keyed by connection id."""

    def __init__(self) -> None:
        self._participants: Dict[str, Participant] = {}

    def get(self, sid: Optional[str]) -> Optional[Participant]:
        if not sid:
            return None
        return self._participants.get(sid)

    def add(self, participant: Participant) -> Participant:
        self._participants[participant.sid] = participant
        return participant

    def remove(self, sid: str) -> Optional[Participant]:
        return self._participants.pop(sid, None)

    def __contains__(self, sid) -> bool:
        return sid in self._participants

    def __len__(self) -> int:
        return len(self._participants)


class MatchQueue:
    """FIFO of connection ids waiting for a public match."""

    def __init__(self) -> None:
        self._waiting: Deque[str] = deque()

    def push(self, sid: str) -> None:
        if sid not in self._waiting:
            self._waiting.append(sid)

    def pop(self) -> Optional[str]:
        return self._waiting.popleft() if self._waiting else None

    def discard(self, sid: str) -> bool:
        try:
            self._waiting.remove(sid)
        except ValueError:
            return False
        return True

    def __contains__(self, sid) -> bool:
        return sid in self._waiting

    def __len__(self) -> int:
        return len(self._waiting)

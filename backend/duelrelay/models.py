from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Position:
    x: float
    y: float
    z: float
    ry: float

    def to_dict(self):
        return {'x': self.x, 'y': self.y, 'z': self.z, 'ry': self.ry}


@dataclass
class Participant:
    sid: str
    name: str
    session_code: Optional[str] = None
    health: Optional[int] = 100
    position: Optional[Position] = None
    wins: int = 0

    def to_dict(self):
        return {
            'name': self.name,
            'session_code': self.session_code,
            'health': self.health,
            'wins': self.wins,
        }


@dataclass
class Session:
    """A two-slot pairing. Slots hold connection ids, never Participant objects."""
    code: str
    slot_a: Optional[str] = None
    slot_b: Optional[str] = None
    public: bool = False
    rounds: int = 0

    @property
    def occupants(self) -> List[str]:
        return [sid for sid in (self.slot_a, self.slot_b) if sid]

    @property
    def is_full(self) -> bool:
        return len(self.occupants) == 2

    @property
    def is_empty(self) -> bool:
        return not self.occupants

    def other(self, sid: str) -> Optional[str]:
        """Return the occupant that is not `sid`, or None."""
        if self.slot_a == sid:
            return self.slot_b
        if self.slot_b == sid:
            return self.slot_a
        return None

    def seat(self, sid: str) -> bool:
        if self.slot_a is None:
            self.slot_a = sid
            return True
        if self.slot_b is None:
            self.slot_b = sid
            return True
        return False

    def vacate(self, sid: str) -> None:
        if self.slot_a == sid:
            self.slot_a = None
        if self.slot_b == sid:
            self.slot_b = None

    def state(self) -> str:
        if self.is_full:
            return 'full'
        return 'open' if self.occupants else 'empty'

    def to_dict(self):
        return {
            'code': self.code,
            'public': self.public,
            'state': self.state(),
            'rounds': self.rounds,
            'occupants': self.occupants,
        }

import random
import string
from typing import Any


def normalize_code(raw: Any) -> str:
    """Trim and uppercase a room code. Anything that isn't a string is no code."""
    if not isinstance(raw, str):
        return ''
    return raw.strip().upper()


def sanitize_name(raw: Any, max_length: int = 12, default: str = 'PLAYER') -> str:
    name = raw.strip() if isinstance(raw, str) else ''
    return (name or default).upper()[:max_length]


class PublicCodeGenerator:
    """Produce public match codes: a reserved prefix plus random [A-Z0-9]."""

    alphabet = string.ascii_uppercase + string.digits

    def __init__(self, prefix: str = 'PUB_', length: int = 6, rng: random.Random = None):
        self.prefix = prefix
        self.length = length
        self._rng = rng or random.Random()

    def __call__(self) -> str:
        return self.prefix + ''.join(self._rng.choices(self.alphabet, k=self.length))

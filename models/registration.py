"""
Registration record for a team tournament signup.
"""
from __future__ import annotations

import random
import string
import time
from dataclasses import dataclass, fields, replace
from datetime import datetime, timezone

_BASE36 = string.digits + string.ascii_lowercase

# Python attribute -> key used by the collection endpoint
WIRE_NAMES = {
    'id': 'id',
    'timestamp': 'timestamp',
    'team_name': 'teamName',
    'game_name': 'gameName',
    'leader_name': 'leaderName',
    'leader_phone': 'leaderPhone',
    'leader_email': 'leaderEmail',
    'player1': 'player1',
    'player2': 'player2',
    'player3': 'player3',
    'player4': 'player4',
    'discord_username': 'discordUsername',
    'ingame_id': 'ingameId',
    'payment_method': 'paymentMethod',
    'transaction_id': 'transactionId',
    'agreed_to_rules': 'agreedToRules',
}

_TRUE_STRINGS = {'true', '1', 'yes', 'on'}


def _to_base36(number: int) -> str:
    if number == 0:
        return '0'
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return ''.join(reversed(digits))


def new_registration_id() -> str:
    """Millisecond timestamp in base 36 followed by random base-36 characters."""
    suffix = ''.join(random.choices(_BASE36, k=11))
    return _to_base36(int(time.time() * 1000)) + suffix


def coerce_flag(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_STRINGS


def _coerce_text(value) -> str:
    if value is None:
        return ''
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Registration:
    """One team's tournament registration.

    ``id`` and ``timestamp`` stay empty while the record is still a form
    draft; ``stamped()`` fills them at submission time.
    """

    id: str = ''
    timestamp: str = ''

    # Team
    team_name: str = ''
    game_name: str = ''

    # Leader
    leader_name: str = ''
    leader_phone: str = ''
    leader_email: str = ''

    # Players, player1 is the leader
    player1: str = ''
    player2: str = ''
    player3: str = ''
    player4: str = ''

    # Additional
    discord_username: str = ''
    ingame_id: str = ''
    payment_method: str = ''
    transaction_id: str = ''

    agreed_to_rules: bool = False

    def __repr__(self):
        return f'<Registration {self.id or "draft"} {self.team_name!r}>'

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def stamped(self, now: datetime | None = None) -> 'Registration':
        """Return a copy with a fresh identifier and creation timestamp."""
        moment = now or datetime.now(timezone.utc)
        iso = moment.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')
        return replace(self, id=new_registration_id(), timestamp=iso)

    def to_payload(self) -> dict:
        return {wire: getattr(self, attr) for attr, wire in WIRE_NAMES.items()}

    @classmethod
    def from_payload(cls, payload: dict) -> 'Registration':
        """Build a record from an endpoint mapping, tolerating missing keys."""
        values = {}
        for attr, wire in WIRE_NAMES.items():
            raw = payload.get(wire)
            if attr == 'agreed_to_rules':
                values[attr] = coerce_flag(raw)
            else:
                values[attr] = _coerce_text(raw)
        return cls(**values)

    def receipt(self) -> dict:
        """Subset shown on the confirmation page."""
        return {
            'team_name': self.team_name,
            'game_name': self.game_name,
            'leader_name': self.leader_name,
            'transaction_id': self.transaction_id,
        }

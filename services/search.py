"""Substring search over loaded registrations for the admin dashboard."""
from __future__ import annotations

from typing import Iterable

from models.registration import Registration

SEARCH_FIELDS = ('team_name', 'leader_name', 'game_name')


def filter_registrations(records: Iterable[Registration], term: str | None) -> list[Registration]:
    needle = (term or '').strip().lower()
    if not needle:
        return list(records)
    return [
        r for r in records
        if any(needle in (getattr(r, field) or '').lower() for field in SEARCH_FIELDS)
    ]

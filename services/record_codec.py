"""
Export helpers for registrations.

Two text formats share one 15-column projection:
- comma-separated text for the downloadable ``.csv`` file
- tab-separated text for pasting into spreadsheet tools
"""
from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Callable, Iterable, Optional

from models.registration import Registration

logger = logging.getLogger(__name__)

# (label, attribute, escaped in CSV)
COLUMNS = [
    ('ID', 'id', False),
    ('Timestamp', 'timestamp', False),
    ('Team Name', 'team_name', True),
    ('Game', 'game_name', False),
    ('Leader Name', 'leader_name', True),
    ('Leader Phone', 'leader_phone', True),
    ('Leader Email', 'leader_email', True),
    ('Player 1', 'player1', True),
    ('Player 2', 'player2', True),
    ('Player 3', 'player3', True),
    ('Player 4', 'player4', True),
    ('Discord', 'discord_username', True),
    ('In-Game ID', 'ingame_id', True),
    ('Payment', 'payment_method', False),
    ('Trx ID', 'transaction_id', True),
]
HEADERS = [label for label, _attr, _escaped in COLUMNS]

CSV_SPECIAL = (',', '"', '\n', '\r')
CSV_MIMETYPE = 'text/csv; charset=utf-8'


def _raw(value) -> str:
    if value is None:
        return ''
    return str(value)


def escape_csv(value) -> str:
    """Quote a field holding a comma, quote or line break; inner quotes are doubled."""
    if not value:
        return ''
    string_value = str(value)
    if any(ch in string_value for ch in CSV_SPECIAL):
        return '"' + string_value.replace('"', '""') + '"'
    return string_value


def clean_tsv(value) -> str:
    """Replace tabs and line breaks with a space so a value stays in one cell."""
    if not value:
        return ''
    string_value = str(value)
    for ch in ('\t', '\r', '\n'):
        string_value = string_value.replace(ch, ' ')
    return string_value.strip()


def _csv_row(record: Registration) -> str:
    cells = []
    for _label, attr, escaped in COLUMNS:
        value = getattr(record, attr, None)
        cells.append(escape_csv(value) if escaped else _raw(value))
    return ','.join(cells)


def _tsv_row(record: Registration) -> str:
    return '\t'.join(clean_tsv(getattr(record, attr, None)) for _label, attr, _escaped in COLUMNS)


def encode_csv(records: Iterable[Registration]) -> Optional[str]:
    """
    Serialize registrations as CSV.

    Returns None for an empty collection so callers skip the download.
    """
    records = list(records)
    if not records:
        return None
    lines = [','.join(HEADERS)]
    lines.extend(_csv_row(r) for r in records)
    return '\n'.join(lines)


def encode_tsv(records: Iterable[Registration]) -> Optional[str]:
    """Serialize registrations as tab-separated text, or None when empty."""
    records = list(records)
    if not records:
        return None
    lines = ['\t'.join(HEADERS)]
    lines.extend(_tsv_row(r) for r in records)
    return '\n'.join(lines)


def export_filename(today: date | None = None) -> str:
    day = today or datetime.now(timezone.utc).date()
    return f'tournament_registrations_{day.isoformat()}.csv'


def copy_for_sheets(records: Iterable[Registration], write: Callable[[str], object]) -> bool:
    """
    Hand the TSV payload to a clipboard writer.

    Returns False without calling ``write`` when there is nothing to copy,
    and False when the writer fails. Never raises.
    """
    payload = encode_tsv(records)
    if payload is None:
        return False
    try:
        write(payload)
    except Exception:
        logger.exception('Failed to copy registrations to clipboard')
        return False
    return True

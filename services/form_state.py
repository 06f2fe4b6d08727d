"""
Pure state transitions for the signup form.

Each change produces a new ``Registration`` draft. Player 1 is derived from
the leader name on every transition that touches it, so the two can never
drift apart.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace

from models.registration import Registration, coerce_flag

INITIAL_STATE = Registration()

# Set at submission time, never by the form
_STAMPED_FIELDS = {'id', 'timestamp'}
_DERIVED_FIELDS = {'player1'}
EDITABLE_FIELDS = [
    name for name in Registration.field_names()
    if name not in _STAMPED_FIELDS and name not in _DERIVED_FIELDS
]


def apply_change(state: Registration, field: str, value) -> Registration:
    """Return the state after a single field change."""
    if field in _DERIVED_FIELDS:
        return state
    if field not in EDITABLE_FIELDS:
        raise KeyError(field)

    if field == 'agreed_to_rules':
        return replace(state, agreed_to_rules=coerce_flag(value))

    value = '' if value is None else str(value)
    if field == 'leader_name':
        return replace(state, leader_name=value, player1=value)
    return replace(state, **{field: value})


def apply_changes(state: Registration, changes: Mapping) -> Registration:
    for field, value in changes.items():
        state = apply_change(state, field, value)
    return state


def state_from_form(form: Mapping) -> Registration:
    """Build a draft from submitted form data.

    Unknown keys (CSRF token, buttons) are ignored. An unchecked checkbox is
    absent from the form, so ``agreed_to_rules`` is always set explicitly.
    """
    changes = {field: form.get(field, '') for field in EDITABLE_FIELDS if field != 'agreed_to_rules'}
    changes['agreed_to_rules'] = form.get('agreed_to_rules', False)
    return apply_changes(INITIAL_STATE, changes)

"""
Validation service for tournament registrations.

Checks a candidate registration before it is submitted:
- Required team, leader, player and payment fields
- Team name uniqueness against a snapshot of known registrations
- Phone and email formats
- Game and payment method drawn from the configured option lists
- Rules acceptance
"""
import re
from typing import Dict, Iterable, List, Optional
from models.registration import Registration
import config
import strings as text

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
NON_DIGITS = re.compile(r'\D')


class ValidationError:
    """Represents a single validation error."""

    def __init__(self, code: str, message: str, field: str = None):
        self.code = code
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        return {
            'code': self.code,
            'message': self.message,
            'field': self.field,
        }


class ValidationResult:
    """Collection of validation results."""

    def __init__(self):
        self.errors: List[ValidationError] = []

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(self, code: str, field: str, message: str = None):
        self.errors.append(ValidationError(code, message or text.error(code), field))

    def merge(self, other: 'ValidationResult'):
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)

    def field_errors(self) -> Dict[str, str]:
        """One message per field; a later error for the same field replaces an earlier one."""
        return {e.field: e.message for e in self.errors}

    def to_dict(self) -> dict:
        return {
            'is_valid': self.is_valid,
            'error_count': len(self.errors),
            'errors': [e.to_dict() for e in self.errors],
        }


def normalize_team_name(name) -> str:
    return (name or '').strip().casefold()


def phone_digits(phone) -> str:
    return NON_DIGITS.sub('', phone or '')


def is_valid_phone(phone) -> bool:
    digits = phone_digits(phone)
    return config.PHONE_MIN_DIGITS <= len(digits) <= config.PHONE_MAX_DIGITS


def is_valid_email(email) -> bool:
    return bool(EMAIL_PATTERN.match(email or ''))


def _blank(value) -> bool:
    return not (value or '').strip()


class RegistrationValidator:
    """Validates a registration draft before submission."""

    PLAYER_FIELDS = ['player1', 'player2', 'player3', 'player4']

    @classmethod
    def validate_team(cls, candidate: Registration,
                      existing: Optional[Iterable[Registration]] = None) -> ValidationResult:
        result = ValidationResult()

        if _blank(candidate.team_name):
            result.add_error('REQUIRED_TEAM_NAME', 'team_name')
        elif existing is not None:
            wanted = normalize_team_name(candidate.team_name)
            if any(normalize_team_name(r.team_name) == wanted for r in existing):
                result.add_error('TEAM_NAME_TAKEN', 'team_name')

        if not candidate.game_name:
            result.add_error('REQUIRED_GAME', 'game_name')
        elif candidate.game_name not in config.GAME_OPTIONS:
            result.add_error('INVALID_GAME', 'game_name')

        return result

    @classmethod
    def validate_leader(cls, candidate: Registration) -> ValidationResult:
        result = ValidationResult()

        if _blank(candidate.leader_name):
            result.add_error('REQUIRED_LEADER_NAME', 'leader_name')

        # Format is only checked once the phone is present
        if _blank(candidate.leader_phone):
            result.add_error('REQUIRED_PHONE', 'leader_phone')
        elif not is_valid_phone(candidate.leader_phone):
            result.add_error('INVALID_PHONE', 'leader_phone')

        if candidate.leader_email and not is_valid_email(candidate.leader_email):
            result.add_error('INVALID_EMAIL', 'leader_email')

        return result

    @classmethod
    def validate_players(cls, candidate: Registration) -> ValidationResult:
        result = ValidationResult()
        for field in cls.PLAYER_FIELDS:
            if _blank(getattr(candidate, field)):
                result.add_error(f'REQUIRED_{field.upper()}', field)
        return result

    @classmethod
    def validate_payment(cls, candidate: Registration) -> ValidationResult:
        result = ValidationResult()

        if not candidate.payment_method:
            result.add_error('REQUIRED_PAYMENT_METHOD', 'payment_method')
        elif candidate.payment_method not in config.PAYMENT_METHODS:
            result.add_error('INVALID_PAYMENT_METHOD', 'payment_method')

        if _blank(candidate.transaction_id):
            result.add_error('REQUIRED_TRANSACTION_ID', 'transaction_id')

        return result

    @classmethod
    def validate(cls, candidate: Registration,
                 existing: Optional[Iterable[Registration]] = None) -> ValidationResult:
        """
        Validate a full registration.

        ``existing`` is the snapshot of known registrations used for the
        duplicate team name check; ``None`` means no snapshot is available
        and the check is skipped.
        """
        result = ValidationResult()
        if existing is not None:
            existing = list(existing)

        result.merge(cls.validate_team(candidate, existing))
        result.merge(cls.validate_leader(candidate))
        result.merge(cls.validate_players(candidate))
        result.merge(cls.validate_payment(candidate))

        if candidate.agreed_to_rules is not True:
            result.add_error('RULES_NOT_ACCEPTED', 'agreed_to_rules')

        return result


def validate_registration(candidate: Registration,
                          existing: Optional[Iterable[Registration]] = None) -> Dict[str, str]:
    """
    Convenience function returning the field -> message map.

    An empty map means the registration can be submitted.
    """
    return RegistrationValidator.validate(candidate, existing).field_errors()

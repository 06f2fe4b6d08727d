"""
Domain models for the tournament signup app.
"""
from .registration import Registration, new_registration_id
from .user import AdminUser

__all__ = [
    'Registration',
    'new_registration_id',
    'AdminUser',
]

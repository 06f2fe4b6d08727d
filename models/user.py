"""
Admin session principal for the registration dashboard.

There is no user table: a single admin account is described by config
(``ADMIN_USERNAME`` and ``ADMIN_PASSWORD_HASH``) and Flask-Login keeps the
session.
"""
from flask_login import UserMixin
from werkzeug.security import check_password_hash


class AdminUser(UserMixin):
    """The configured tournament admin."""

    def __init__(self, username: str, password_hash: str = ''):
        self.id = username
        self.username = username
        self.password_hash = password_hash

    def __repr__(self):
        return f'<AdminUser {self.username}>'

    @property
    def is_admin(self):
        return True

    @classmethod
    def from_config(cls, app_config) -> 'AdminUser':
        return cls(app_config.get('ADMIN_USERNAME', 'admin'), app_config.get('ADMIN_PASSWORD_HASH', ''))

    def check_password(self, password: str) -> bool:
        if not self.password_hash or not password:
            return False
        return check_password_hash(self.password_hash, password)

from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

import config
from app import create_app
from models.registration import Registration
from services.registry_client import EXTENSION_KEY, RegistryError

ADMIN_PASSWORD = "letmein-please"


class FakeRegistry:
    """In-memory stand-in for the collection endpoint client."""

    def __init__(self, records=None):
        self.records = list(records or [])
        self.created = []
        self.deleted = []
        self.cleared = 0
        self.fail_writes = False

    def list_all(self):
        return list(self.records)

    def create(self, record):
        if self.fail_writes:
            raise RegistryError("boom")
        self.created.append(record)
        self.records.append(record)

    def delete(self, registration_id):
        if self.fail_writes:
            raise RegistryError("boom")
        self.deleted.append(registration_id)
        self.records = [r for r in self.records if r.id != registration_id]

    def clear(self):
        if self.fail_writes:
            raise RegistryError("boom")
        self.cleared += 1
        self.records = []


class _TestConfig(config.TestingConfig):
    SECRET_KEY = "test-secret-key-0123456789"
    ADMIN_USERNAME = "admin"
    ADMIN_PASSWORD_HASH = generate_password_hash(ADMIN_PASSWORD)


def make_registration(**overrides) -> Registration:
    values = {
        "id": "reg1",
        "timestamp": "2026-10-01T12:00:00.000Z",
        "team_name": "Phantom",
        "game_name": "Free Fire",
        "leader_name": "Rahim",
        "leader_phone": "+880 1712-345678",
        "leader_email": "rahim@example.com",
        "player1": "Rahim",
        "player2": "Karim",
        "player3": "Sakib",
        "player4": "Tamim",
        "discord_username": "rahim#0001",
        "ingame_id": "555123",
        "payment_method": "Bkash",
        "transaction_id": "TRX123",
        "agreed_to_rules": True,
    }
    values.update(overrides)
    return Registration(**values)


@pytest.fixture
def registration_factory():
    return make_registration


@pytest.fixture
def registry():
    return FakeRegistry()


@pytest.fixture
def app(registry):
    app = create_app(_TestConfig)
    app.extensions[EXTENSION_KEY] = registry
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    client.post("/admin/login", data={"username": "admin", "password": ADMIN_PASSWORD})
    return client

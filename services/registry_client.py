"""
Client for the remote registration collection endpoint.

The endpoint is a single URL (a spreadsheet-backed web script). Writes are
POSTed as JSON with an ``action`` discriminator; reads are a GET returning
either a JSON array of records or ``{"data": [...]}``.

Writes are not acknowledged by the endpoint, so a successful call only means
the request went out. Callers re-fetch with ``list_all()`` to observe the
resulting state.
"""
from __future__ import annotations

import logging
import time

import requests
from flask import current_app

from models.registration import Registration, new_registration_id

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'registry_client'


class RegistryError(Exception):
    """A write could not be delivered to the collection endpoint."""


def normalize_records(payload) -> list[Registration]:
    """
    Turn a read response into registrations.

    Accepts a bare list or a mapping with a ``data`` list. Anything else
    yields an empty list; entries that are not objects are skipped.
    """
    if isinstance(payload, dict):
        payload = payload.get('data') or []
    if not isinstance(payload, list):
        logger.warning('Unexpected registry response shape: %s', type(payload).__name__)
        return []

    records = []
    for item in payload:
        if not isinstance(item, dict):
            logger.warning('Skipping malformed registry entry: %r', item)
            continue
        records.append(Registration.from_payload(item))
    return records


class RegistryClient:
    """Thin wrapper around the collection endpoint."""

    def __init__(self, url: str, timeout: float | None = None, session: requests.Session | None = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def __repr__(self):
        return f'<RegistryClient {self.url}>'

    def _post(self, payload: dict) -> None:
        try:
            self.session.post(self.url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error('Registry %s request failed: %s', payload.get('action'), exc)
            raise RegistryError(str(exc)) from exc

    def create(self, record: Registration) -> None:
        payload = {'action': 'create', **record.to_payload()}
        payload['id'] = record.id or new_registration_id()
        self._post(payload)
        logger.info('Registration %s submitted for team %r', payload['id'], record.team_name)

    def list_all(self) -> list[Registration]:
        """Fetch every registration; failures give an empty list."""
        try:
            response = self.session.get(
                self.url,
                params={'t': int(time.time() * 1000)},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning('Could not fetch registrations from registry: %s', exc)
            return []
        return normalize_records(payload)

    def delete(self, registration_id: str) -> None:
        self._post({'action': 'delete', 'id': registration_id})
        logger.info('Registration %s delete requested', registration_id)

    def clear(self) -> None:
        self._post({'action': 'clear'})
        logger.info('Registry clear requested')


def init_registry(app) -> RegistryClient:
    client = RegistryClient(app.config.get('REGISTRY_URL', ''), app.config.get('REGISTRY_TIMEOUT_SECONDS'))
    app.extensions[EXTENSION_KEY] = client
    return client


def get_registry() -> RegistryClient:
    """Return the client attached to the current app."""
    client = current_app.extensions.get(EXTENSION_KEY)
    if client is None:
        client = init_registry(current_app)
    return client

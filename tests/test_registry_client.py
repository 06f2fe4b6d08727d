from unittest.mock import MagicMock

import pytest
import requests

from services.registry_client import RegistryClient, RegistryError, normalize_records

URL = "https://registry.test/exec"

RAW_RECORD = {
    "id": "abc",
    "timestamp": "2026-10-01T12:00:00.000Z",
    "teamName": "Phantom",
    "gameName": "Free Fire",
    "leaderName": "Rahim",
    "leaderPhone": 8801712345678,
    "player1": "Rahim",
    "player2": "Karim",
    "player3": "Sakib",
    "player4": "Tamim",
    "paymentMethod": "Bkash",
    "transactionId": "TRX1",
    "agreedToRules": True,
}


def _client_with_response(payload=None, status_error=None, json_error=None):
    session = MagicMock()
    response = MagicMock()
    if status_error:
        response.raise_for_status.side_effect = status_error
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    session.get.return_value = response
    return RegistryClient(URL, session=session), session


def test_list_all_accepts_bare_list_and_wrapped_data():
    bare, _ = _client_with_response([RAW_RECORD])
    wrapped, _ = _client_with_response({"data": [RAW_RECORD]})
    assert bare.list_all() == wrapped.list_all()
    record = bare.list_all()[0]
    assert record.team_name == "Phantom"
    assert record.leader_phone == "8801712345678"
    assert record.leader_email == ""
    assert record.agreed_to_rules is True


def test_list_all_sends_cache_busting_parameter():
    client, session = _client_with_response([])
    client.list_all()
    args, kwargs = session.get.call_args
    assert args == (URL,)
    assert isinstance(kwargs["params"]["t"], int)


def test_list_all_returns_fresh_list_each_call():
    client, _ = _client_with_response([RAW_RECORD])
    first = client.list_all()
    second = client.list_all()
    assert first == second
    assert first is not second


@pytest.mark.parametrize(
    "kwargs",
    [
        {"status_error": requests.HTTPError("500")},
        {"json_error": ValueError("not json")},
        {"payload": "unexpected"},
        {"payload": {"rows": []}},
    ],
)
def test_list_all_degrades_to_empty_list(kwargs):
    client, _ = _client_with_response(**kwargs)
    assert client.list_all() == []


def test_list_all_transport_error_returns_empty():
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("offline")
    assert RegistryClient(URL, session=session).list_all() == []


def test_normalize_records_skips_non_objects():
    records = normalize_records([RAW_RECORD, "junk", 5])
    assert [r.id for r in records] == ["abc"]


def test_create_posts_action_and_payload(registration_factory):
    session = MagicMock()
    client = RegistryClient(URL, timeout=5, session=session)
    client.create(registration_factory())
    _, kwargs = session.post.call_args
    body = kwargs["json"]
    assert body["action"] == "create"
    assert body["id"] == "reg1"
    assert body["teamName"] == "Phantom"
    assert body["agreedToRules"] is True
    assert kwargs["timeout"] == 5


def test_create_fills_missing_id(registration_factory):
    session = MagicMock()
    RegistryClient(URL, session=session).create(registration_factory(id=""))
    assert session.post.call_args.kwargs["json"]["id"]


def test_create_transport_failure_raises(registration_factory):
    session = MagicMock()
    session.post.side_effect = requests.ConnectionError("offline")
    with pytest.raises(RegistryError):
        RegistryClient(URL, session=session).create(registration_factory())


def test_delete_and_clear_payloads():
    session = MagicMock()
    client = RegistryClient(URL, session=session)
    client.delete("abc")
    client.clear()
    bodies = [c.kwargs["json"] for c in session.post.call_args_list]
    assert bodies == [{"action": "delete", "id": "abc"}, {"action": "clear"}]

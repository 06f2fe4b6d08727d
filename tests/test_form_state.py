import pytest
from werkzeug.datastructures import MultiDict

from services.form_state import INITIAL_STATE, apply_change, apply_changes, state_from_form


def test_leader_name_change_rederives_player1():
    state = apply_change(INITIAL_STATE, "leader_name", "Rahim")
    assert state.leader_name == "Rahim"
    assert state.player1 == "Rahim"
    assert INITIAL_STATE.leader_name == ""


def test_direct_player1_edit_is_ignored():
    state = apply_change(INITIAL_STATE, "leader_name", "Rahim")
    assert apply_change(state, "player1", "Someone else") is state


@pytest.mark.parametrize("field", ["id", "timestamp", "not_a_field"])
def test_unknown_or_stamped_fields_raise(field):
    with pytest.raises(KeyError):
        apply_change(INITIAL_STATE, field, "x")


@pytest.mark.parametrize("raw, expected", [("on", True), ("true", True), ("", False), (None, False), (True, True)])
def test_rules_flag_is_coerced(raw, expected):
    assert apply_change(INITIAL_STATE, "agreed_to_rules", raw).agreed_to_rules is expected


def test_apply_changes_folds_in_order():
    state = apply_changes(INITIAL_STATE, {"leader_name": "A", "player2": "B"})
    state = apply_changes(state, {"leader_name": "C"})
    assert (state.leader_name, state.player1, state.player2) == ("C", "C", "B")


def test_state_from_form_ignores_extra_keys_and_missing_checkbox():
    form = MultiDict({"csrf_token": "x", "team_name": "Phantom", "leader_name": "Rahim", "player1": "Mallory"})
    state = state_from_form(form)
    assert state.team_name == "Phantom"
    assert state.player1 == "Rahim"
    assert state.agreed_to_rules is False
    assert state.id == ""

import pytest

from src.otms.otms.holidays.states import (
    NATIONAL,
    all_states,
    all_states_with_national,
    is_valid_state_key,
    state_label,
)
from src.otms.otms.main import create_app


def test_state_lists():
    states = all_states()
    assert len(states) == 16
    assert NATIONAL not in {s.value for s in states}

    with_national = all_states_with_national()
    assert with_national[0].value == NATIONAL
    assert len(with_national) == 17


def test_lookup():
    assert is_valid_state_key("SGR")
    assert is_valid_state_key(NATIONAL)
    assert not is_valid_state_key("XYZ")
    assert state_label("WPKL") == "WP Kuala Lumpur"
    assert state_label("XYZ") is None


class _Container:
    report_service = None


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=_Container()).test_client()


def test_states_endpoint_requires_login(client):
    assert client.get("/api/holidays/states").status_code == 401


def test_states_endpoint(client):
    with client.session_transaction() as sess:
        sess["user_id"] = "u1"
        sess["role"] = "employee"

    states = client.get("/api/holidays/states").get_json()["states"]
    assert len(states) == 16

    states = client.get("/api/holidays/states?national=1").get_json()["states"]
    assert states[0] == {"value": "ALL", "label": "ALL (National)"}

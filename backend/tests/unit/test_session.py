from __future__ import annotations

import json

import pytest

from idcard.core.session import SESSION_KEY, SESSION_TTL_SECONDS, SessionStore
from idcard.models.employee import EmployeeProfile

LOGIN_AT = 1_700_000_000.0


class FakeClock:
    def __init__(self, now: float) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(LOGIN_AT)


@pytest.fixture
def storage() -> dict[str, str]:
    return {}


@pytest.fixture
def store(storage, clock) -> SessionStore:
    return SessionStore(storage, clock=clock)


@pytest.fixture
def employee() -> EmployeeProfile:
    return EmployeeProfile(username="john.doe", first_name="John", employee_no="EMP001")


def test_save_writes_camel_case_json(store, storage, employee):
    session = store.save(employee)

    stored = json.loads(storage[SESSION_KEY])
    assert stored["isAuthenticated"] is True
    assert stored["loginTime"] == int(LOGIN_AT * 1000)
    assert stored["employee"]["username"] == "john.doe"
    assert stored["employee"]["employeeNo"] == "EMP001"
    assert "password" not in stored["employee"]
    assert session.login_time == int(LOGIN_AT * 1000)


def test_get_returns_saved_session(store, employee):
    store.save(employee)

    session = store.get()

    assert session is not None
    assert session.is_authenticated is True
    assert session.employee == employee


def test_get_without_session(store):
    assert store.get() is None
    assert store.is_authenticated() is False
    assert store.current_employee() is None
    assert store.time_remaining_minutes() == 0


def test_session_valid_until_ttl(store, clock, employee):
    store.save(employee)
    clock.advance(SESSION_TTL_SECONDS)

    assert store.get() is not None


def test_expired_session_is_cleared_on_read(store, storage, clock, employee):
    store.save(employee)
    clock.advance(SESSION_TTL_SECONDS + 1)

    assert store.get() is None
    assert SESSION_KEY not in storage


def test_session_older_than_a_day_written_elsewhere(storage, clock):
    storage[SESSION_KEY] = json.dumps(
        {
            "isAuthenticated": True,
            "employee": {"username": "jane.smith"},
            "loginTime": int((LOGIN_AT - 25 * 60 * 60) * 1000),
        }
    )
    store = SessionStore(storage, clock=clock)

    assert store.is_authenticated() is False
    assert SESSION_KEY not in storage


@pytest.mark.parametrize("raw", ["{not json", '{"employee": null}', '"just a string"'])
def test_corrupted_session_is_cleared(store, storage, raw):
    storage[SESSION_KEY] = raw

    assert store.get() is None
    assert SESSION_KEY not in storage


def test_clear_removes_session(store, storage, employee):
    store.save(employee)
    store.clear()

    assert SESSION_KEY not in storage
    store.clear()


def test_is_authenticated_and_current_employee(store, employee):
    store.save(employee)

    assert store.is_authenticated() is True
    assert store.current_employee() == employee


def test_time_remaining_minutes(store, clock, employee):
    store.save(employee)
    assert store.time_remaining_minutes() == 24 * 60

    clock.advance(23 * 60 * 60 + 30)
    assert store.time_remaining_minutes() == 60


def test_custom_ttl_and_key(storage, clock, employee):
    store = SessionStore(storage, clock=clock, ttl_seconds=60, key="otherSlot")
    store.save(employee)
    assert "otherSlot" in storage

    clock.advance(61)
    assert store.get() is None

import json

import pytest

from apps.accounts.domain.entities import Role
from apps.accounts.domain.invites import parse_invite
from apps.accounts.session import SessionManager


@pytest.mark.parametrize('invite, expected', [
    ("ADMIN-Beta-X1Y2Z3", (Role.ADMIN, "Beta")),
    ("admin-gamma-abc", (Role.ADMIN, "gamma")),
    ("MEMBER-Delta-QQQQQQ", (Role.MEMBER, "Delta")),
    ("welcome", (Role.MEMBER, "Alpha")),
    ("ADMIN", (Role.MEMBER, "Alpha")),
    ("", (Role.MEMBER, "Alpha")),
    (None, (Role.MEMBER, "Alpha")),
])
def test_parse_invite(invite, expected):
    assert parse_invite(invite) == expected


def test_login_creates_and_persists_session(store):
    manager = SessionManager(store)
    assert manager.current is None

    user = manager.login_with_invite("ADMIN-Beta-123456", "Marta")

    assert user.is_admin
    assert user.cohort == "Beta"
    assert manager.current == user
    assert SessionManager(store).current == user


def test_blank_name_defaults_to_guest(store):
    user = SessionManager(store).login_with_invite("XYZ", "  ")

    assert user.name == "Guest"
    assert user.role == Role.MEMBER


def test_login_replaces_previous_session(store):
    manager = SessionManager(store)
    first = manager.login_with_invite("A-Alpha-1", "One")
    second = manager.login_with_invite("A-Beta-2", "Two")

    assert first.id != second.id
    assert SessionManager(store).current == second


def test_logout_clears_session(store):
    manager = SessionManager(store)
    manager.login_with_invite("A-Alpha-1", "One")

    manager.logout()

    assert manager.current is None
    assert not manager.is_authenticated
    assert json.loads(store.get('beyond:user')) is None
    assert SessionManager(store).current is None


def test_corrupt_session_starts_logged_out(store):
    store.set('beyond:user', '{"id": 1')

    assert SessionManager(store).current is None


def test_leading_whitespace_is_not_an_admin_code():
    assert parse_invite(" ADMIN-Beta-1") == (Role.MEMBER, "Beta")

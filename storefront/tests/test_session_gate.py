from __future__ import annotations

import json

import pytest

from storefront.application.services.session_gate import SessionGate
from storefront.domain.users.entities import Role, SessionToken
from storefront.domain.users.exceptions import InvalidCredentialsError, MalformedSessionError
from storefront.domain.users.gate import ALLOW, RedirectTo, RouteGate
from storefront.infrastructure.repositories.static_credential_store import StaticCredentialStore
from storefront.infrastructure.security.token_codec import FernetSessionTokenCodec

DAY = 60 * 60 * 24
ISSUED_AT = 1_700_000_000.0


class FrozenClock:
    def __init__(self, now: float) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock(ISSUED_AT)


@pytest.fixture()
def codec(clock: FrozenClock) -> FernetSessionTokenCodec:
    return FernetSessionTokenCodec("unit-secret", ttl_seconds=DAY, clock=clock)


@pytest.fixture()
def gate(codec: FernetSessionTokenCodec) -> SessionGate:
    return SessionGate(
        credentials=StaticCredentialStore(username="admin", password="admin123"),
        codec=codec,
        routes=RouteGate(protected_prefixes=["/admin", "/api/admin"], auth_routes=["/login"]),
    )


def test_authenticate_with_configured_credential(gate: SessionGate) -> None:
    grant = gate.authenticate("admin", "admin123")

    assert grant.credential.role is Role.ADMIN
    assert grant.session == SessionToken(user_id=1, username="admin", role="admin")
    assert grant.token


@pytest.mark.parametrize(
    ("username", "password"),
    [
        ("admin", "wrong"),
        ("root", "admin123"),
        ("Admin", "admin123"),
        ("admin", "admin123 "),
        ("", ""),
    ],
)
def test_authenticate_rejects_everything_else(
    gate: SessionGate, username: str, password: str
) -> None:
    with pytest.raises(InvalidCredentialsError) as exc_info:
        gate.authenticate(username, password)

    assert exc_info.value.to_dict() == {"success": False, "error": "Invalid credentials"}


def test_current_session_round_trips_issued_token(gate: SessionGate) -> None:
    grant = gate.authenticate("admin", "admin123")

    assert gate.current_session(grant.token) == grant.session


def test_current_session_absent_cookie(gate: SessionGate) -> None:
    assert gate.current_session(None) is None
    assert gate.current_session("") is None


@pytest.mark.parametrize(
    "cookie",
    [
        "not-a-token",
        json.dumps({"userId": 1, "username": "admin", "role": "admin"}),
        "gAAAAAB" + "x" * 80,
        "тест",
    ],
)
def test_current_session_treats_garbage_as_no_session(gate: SessionGate, cookie: str) -> None:
    assert gate.current_session(cookie) is None


def test_current_session_rejects_token_from_other_secret(
    gate: SessionGate, clock: FrozenClock
) -> None:
    other = FernetSessionTokenCodec("another-secret", ttl_seconds=DAY, clock=clock)
    forged = other.encode(SessionToken(user_id=1, username="admin", role="admin"))

    assert gate.current_session(forged) is None


def test_session_expires_after_one_day(gate: SessionGate, clock: FrozenClock) -> None:
    token = gate.authenticate("admin", "admin123").token

    clock.now = ISSUED_AT + DAY
    assert gate.current_session(token) is not None

    clock.now = ISSUED_AT + DAY + 1
    assert gate.current_session(token) is None


def test_codec_raises_on_tampered_token(codec: FernetSessionTokenCodec) -> None:
    token = codec.encode(SessionToken(user_id=1, username="admin", role="admin"))
    tampered = token[:-2] + ("A" if token[-2] != "A" else "B") + token[-1]

    with pytest.raises(MalformedSessionError):
        codec.decode(tampered)


def test_guard_delegates_to_route_rules(gate: SessionGate) -> None:
    assert gate.is_protected("/api/admin/stats")
    assert gate.guard("/admin", False) == RedirectTo("/login?redirect=/admin")
    assert gate.guard("/admin", True) == ALLOW
    assert gate.guard("/login", True) == RedirectTo("/admin")
    assert gate.guard("/products", False) == ALLOW

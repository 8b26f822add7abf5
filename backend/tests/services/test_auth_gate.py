"""Auth Gate — header → Principal through a real JWT codec.

Tests cover:
    - Valid token yields the claims' id/name/email
    - Missing, malformed, tampered, wrong-secret and expired tokens → AuthError subclasses
"""

import json
from datetime import datetime, timedelta, timezone

import jwt
import pytest
from jwt.utils import base64url_encode

from app.core.domain_types import Principal, UserId
from app.core.errors import (
    InvalidCredentialError, MalformedCredentialError, MissingCredentialError,
)
from app.infrastructure.security import JwtTokenCodec
from app.services.auth_gate import AuthGate

SECRET = "gate-secret-0123456789abcdef0123456789"
ALICE = Principal(id=UserId("u-alice"), name="Alice", email="a@x.com")


@pytest.fixture
def gate():
    return AuthGate(JwtTokenCodec(SECRET))


def test_issued_token_authenticates(gate):
    token = gate.issue(ALICE)
    assert gate.authenticate(f"Bearer {token}") == ALICE


def test_missing_header(gate):
    with pytest.raises(MissingCredentialError):
        gate.authenticate(None)


def test_single_part_header(gate):
    with pytest.raises(MalformedCredentialError):
        gate.authenticate(gate.issue(ALICE))


def test_tampered_token(gate):
    header, _, signature = gate.issue(ALICE).split(".")
    forged_claims = base64url_encode(json.dumps({"id": "u-mallory"}).encode())
    forged = f"{header}.{forged_claims.decode()}.{signature}"
    with pytest.raises(InvalidCredentialError):
        gate.authenticate(f"Bearer {forged}")


def test_token_signed_with_other_secret(gate):
    foreign = AuthGate(JwtTokenCodec("other-secret-0123456789abcdef012345678")).issue(ALICE)
    with pytest.raises(InvalidCredentialError):
        gate.authenticate(f"Bearer {foreign}")


def test_expired_token(gate):
    expired = jwt.encode(
        {**ALICE.to_claims(), "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
        SECRET, algorithm="HS256",
    )
    with pytest.raises(InvalidCredentialError) as exc:
        gate.authenticate(f"Bearer {expired}")
    assert exc.value.message == "token expired"


def test_garbage_token(gate):
    with pytest.raises(InvalidCredentialError):
        gate.authenticate("Bearer not-a-jwt")


def test_token_without_id_claim(gate):
    token = jwt.encode({"name": "Alice"}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidCredentialError):
        gate.authenticate(f"Bearer {token}")

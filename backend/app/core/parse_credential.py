"""Credential Parsing — pure extraction of bearer tokens and principals.

Invariants:
    - A credential header is exactly "<scheme> <token>" with scheme "Bearer" (any case)
    - Claims must carry a non-empty string "id"; name/email are optional
    - No IO: signature verification happens in the shell (TokenCodec)
"""

from app.core.domain_types import Principal, UserId
from app.core.errors import (
    InvalidCredentialError, MalformedCredentialError, MissingCredentialError,
)

BEARER_SCHEME = "bearer"


def extract_bearer_token(header: str | None) -> str:
    """Return the token part of an Authorization header value."""
    if header is None or not header.strip():
        raise MissingCredentialError()
    parts = header.strip().split(" ")
    if len(parts) != 2:
        raise MalformedCredentialError()
    scheme, token = parts
    if scheme.lower() != BEARER_SCHEME or not token:
        raise MalformedCredentialError()
    return token


def principal_from_claims(claims: dict) -> Principal:
    user_id = claims.get("id")
    if not isinstance(user_id, str) or not user_id:
        raise InvalidCredentialError("token is missing the user id claim")
    return Principal(
        id=UserId(user_id),
        name=claims.get("name"),
        email=claims.get("email"),
    )

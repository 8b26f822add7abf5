"""Security Adapters — bcrypt password hashing and PyJWT token signing.

Invariants:
    - Core sees only hash/verify and sign/verify (repository_protocols.py)
    - Every token failure (bad signature, expired, malformed) → InvalidCredentialError
    - Passwords are UTF-8 encoded and capped at bcrypt's 72-byte input limit

Design Decisions:
    - HS256 with a shared secret from settings
    - exp claim only when a TTL is configured: expiry is optional
"""

import logging
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from app.core.errors import InvalidCredentialError

logger = logging.getLogger(__name__)

_BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class BcryptPasswordHasher:
    """Opaque hash(password) / verify(password, digest) capability."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_password_bytes(password), salt).decode("ascii")

    def verify(self, password: str, digest: str) -> bool:
        try:
            return bcrypt.checkpw(_password_bytes(password), digest.encode("ascii"))
        except ValueError:
            logger.warning("Stored password digest is not a valid bcrypt hash")
            return False


class JwtTokenCodec:
    """Opaque sign(claims) / verify(token) capability."""

    def __init__(
        self, secret: str, algorithm: str = "HS256", ttl_minutes: int | None = None,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.ttl_minutes = ttl_minutes

    def sign(self, claims: dict) -> str:
        payload = dict(claims)
        if self.ttl_minutes is not None:
            payload["exp"] = datetime.now(timezone.utc) + timedelta(
                minutes=self.ttl_minutes,
            )
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise InvalidCredentialError("token expired")
        except jwt.InvalidTokenError:
            raise InvalidCredentialError("invalid token")

"""Account Service — registration and login, returning the public user plus a token.

Invariants:
    - Emails are unique (checked up front, and again via the unique index on commit)
    - Login failures never reveal whether the email exists (InvalidLoginError for both)
    - Passwords are only ever stored as bcrypt digests

Design Decisions:
    - Hashing/verification run in a worker thread: bcrypt is CPU-bound and would
      otherwise stall the event loop
"""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Principal, UserId
from app.core.errors import EmailTakenError, InvalidLoginError
from app.core.repository_protocols import PasswordHasher
from app.models.user import User
from app.schemas.auth import AuthResponse, UserOut
from app.services.auth_gate import AuthGate

logger = logging.getLogger(__name__)


class AccountService:
    def __init__(self, db: AsyncSession, hasher: PasswordHasher, gate: AuthGate):
        self.db = db
        self.hasher = hasher
        self.gate = gate

    async def register(
        self, name: str | None, email: str, password: str,
    ) -> AuthResponse:
        if await self._find_by_email(email):
            raise EmailTakenError()

        digest = await asyncio.to_thread(self.hasher.hash, password)
        user = User(name=name, email=email, password_digest=digest)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise EmailTakenError()

        logger.info("User registered", extra={"user_id": user.id})
        return self._authenticated(user)

    async def login(self, email: str, password: str) -> AuthResponse:
        user = await self._find_by_email(email)
        if not user:
            raise InvalidLoginError()
        ok = await asyncio.to_thread(
            self.hasher.verify, password, user.password_digest,
        )
        if not ok:
            raise InvalidLoginError()
        return self._authenticated(user)

    async def _find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    def _authenticated(self, user: User) -> AuthResponse:
        principal = Principal(id=UserId(user.id), name=user.name, email=user.email)
        return AuthResponse(
            user=UserOut(id=user.id, name=user.name, email=user.email),
            token=self.gate.issue(principal),
        )

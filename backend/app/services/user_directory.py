"""User Directory — author-name lookup capability backed by the users table.

Invariants:
    - Unknown user ids resolve to None, never raise
    - author_names issues one query regardless of how many ids are asked for

Design Decisions:
    - Explicit lookup injected into ViewAssembler instead of ORM population
      (ADR: entities stored independently, no join-like resolution)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Principal
from app.core.errors import ErrorContext, InvalidCredentialError
from app.models.user import User

logger = logging.getLogger(__name__)


class SqlUserDirectory:
    """UserDirectory over the users table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def author_name(self, user_id: str) -> str | None:
        result = await self.db.execute(
            select(User.name).where(User.id == user_id),
        )
        return result.scalar_one_or_none()

    async def author_names(self, user_ids: set[str]) -> dict[str, str | None]:
        if not user_ids:
            return {}
        result = await self.db.execute(
            select(User.id, User.name).where(User.id.in_(user_ids)),
        )
        found = {user_id: name for user_id, name in result}
        return {user_id: found.get(user_id) for user_id in user_ids}

    async def exists(self, user_id: str) -> bool:
        result = await self.db.execute(
            select(User.id).where(User.id == user_id),
        )
        return result.scalar_one_or_none() is not None


async def require_author(db: AsyncSession, principal: Principal) -> None:
    """New posts, comments and likes must reference an existing user."""
    if not await SqlUserDirectory(db).exists(principal.id):
        logger.warning(
            "Credential for unknown account", extra={"user_id": principal.id},
        )
        raise InvalidCredentialError(
            "account no longer exists", ErrorContext(user_id=principal.id),
        )

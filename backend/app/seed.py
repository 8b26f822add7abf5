"""Seed Data — resets the database to two demo users with one post each.

Usage:
    python -m app.seed

Invariants:
    - Existing comments, likes, posts and users are removed first (children before parents)
    - Demo passwords are real bcrypt digests, so the demo accounts can log in
"""

import asyncio
import logging

from sqlalchemy import delete

from app.config import get_settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging
from app.infrastructure.security import BcryptPasswordHasher
from app.models import Comment, Post, PostLike, User

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

DEMO_USERS = [
    ("Alice", "alice@example.com", "Welcome", "Hello from Alice!"),
    ("Bob", "bob@example.com", "Bob's first post", "Bob says hi"),
]


async def seed(db_manager: DatabaseSessionManager, hasher: BcryptPasswordHasher) -> None:
    await db_manager.create_schema()
    async with db_manager.session() as db:
        for model in (Comment, PostLike, Post, User):
            await db.execute(delete(model))

        digest = hasher.hash(DEMO_PASSWORD)
        for name, email, title, body in DEMO_USERS:
            user = User(name=name, email=email, password_digest=digest)
            db.add(user)
            await db.flush()
            db.add(Post(author_id=user.id, title=title, body=body))
        await db.commit()
    logger.info(f"Seeded {len(DEMO_USERS)} users and posts")


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    db_manager = DatabaseSessionManager(settings.database_url)
    try:
        await seed(db_manager, BcryptPasswordHasher(settings.bcrypt_rounds))
    finally:
        await db_manager.close()


if __name__ == "__main__":
    asyncio.run(main())

"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Environment is set before any app module is imported (settings are cached)
    - Every test gets a fresh in-memory SQLite database
    - All sessions of one test share the single in-memory connection (StaticPool)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for store and route tests
      (PostgreSQL-only behavior such as FOR UPDATE is a no-op here)
    - bcrypt at its minimum cost factor: hashing stays real but cheap
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-key-0123456789abcdef0123")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.core.domain_types import Principal, UserId  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.models.user import User  # noqa: E402
import app.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


async def _add_user(db: AsyncSession, name: str, email: str) -> Principal:
    user = User(name=name, email=email, password_digest="not-a-real-digest")
    db.add(user)
    await db.commit()
    return Principal(id=UserId(user.id), name=user.name, email=user.email)


@pytest.fixture
async def alice(test_db) -> Principal:
    return await _add_user(test_db, "Alice", "a@x.com")


@pytest.fixture
async def bob(test_db) -> Principal:
    return await _add_user(test_db, "Bob", "b@x.com")

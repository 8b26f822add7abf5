"""Request Dependencies — wires sessions, security adapters and services per request.

Invariants:
    - One AsyncSession per request: every service in a request shares get_db's session
    - get_principal runs before any mutating route body executes
    - Security adapters are built once per process from settings

Design Decisions:
    - lru_cache'd adapter factories mirror get_settings(): overridable in tests via
      app.dependency_overrides
    - PostLockRegistry lives on app.state so every request of one app shares it
"""

from functools import lru_cache

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.domain_types import Principal
from app.infrastructure.database import get_db
from app.infrastructure.security import BcryptPasswordHasher, JwtTokenCodec
from app.services.account_service import AccountService
from app.services.auth_gate import AuthGate
from app.services.comment_store import CommentStore
from app.services.like_toggle import LikeToggle
from app.services.post_locks import PostLockRegistry
from app.services.post_store import PostStore
from app.services.user_directory import SqlUserDirectory
from app.services.view_assembler import ViewAssembler


@lru_cache
def get_token_codec() -> JwtTokenCodec:
    settings = get_settings()
    return JwtTokenCodec(
        settings.jwt_secret, settings.jwt_algorithm, settings.jwt_ttl_minutes,
    )


@lru_cache
def get_password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_rounds)


def get_auth_gate(codec: JwtTokenCodec = Depends(get_token_codec)) -> AuthGate:
    return AuthGate(codec)


def get_principal(
    authorization: str | None = Header(None),
    gate: AuthGate = Depends(get_auth_gate),
) -> Principal:
    return gate.authenticate(authorization)


def get_post_locks(request: Request) -> PostLockRegistry:
    return request.app.state.post_locks


def get_comment_store(db: AsyncSession = Depends(get_db)) -> CommentStore:
    return CommentStore(db)


def get_post_store(
    db: AsyncSession = Depends(get_db),
    comments: CommentStore = Depends(get_comment_store),
) -> PostStore:
    return PostStore(db, comments)


def get_like_toggle(
    db: AsyncSession = Depends(get_db),
    locks: PostLockRegistry = Depends(get_post_locks),
) -> LikeToggle:
    return LikeToggle(db, locks)


def get_view_assembler(
    db: AsyncSession = Depends(get_db),
    comments: CommentStore = Depends(get_comment_store),
    likes: LikeToggle = Depends(get_like_toggle),
) -> ViewAssembler:
    return ViewAssembler(SqlUserDirectory(db), comments, likes)


def get_account_service(
    db: AsyncSession = Depends(get_db),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    gate: AuthGate = Depends(get_auth_gate),
) -> AccountService:
    return AccountService(db, hasher, gate)

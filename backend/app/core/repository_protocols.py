"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Password hashing and token signing are opaque capabilities behind these contracts
    - Author lookup is an explicit capability, never an embedded document

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Record protocols (PostRecord, CommentRecord) let pure view builders accept
      ORM rows without importing the ORM
"""

from datetime import datetime
from typing import Protocol


class PostRecord(Protocol):
    """Structural contract for stored posts."""
    id: str
    author_id: str
    title: str
    body: str
    created_at: datetime


class CommentRecord(Protocol):
    """Structural contract for stored comments."""
    id: str
    post_id: str
    author_id: str
    body: str
    created_at: datetime


class OwnedEntity(Protocol):
    author_id: str


class UserDirectory(Protocol):
    """Resolves display names for user ids — implemented by shell."""
    async def author_name(self, user_id: str) -> str | None: ...
    async def author_names(self, user_ids: set[str]) -> dict[str, str | None]: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, digest: str) -> bool: ...


class TokenCodec(Protocol):
    def sign(self, claims: dict) -> str: ...
    def verify(self, token: str) -> dict: ...

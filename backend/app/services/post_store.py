"""Post Store — create, fetch, list, update and delete posts with ownership enforcement.

Invariants:
    - create: title/body validated (non-empty after strip) before anything is written
    - update/delete: NotFound → Forbidden (require_owner) → validation, all before mutation
    - created_at and author_id never change after creation
    - list: created_at descending, ties by insertion order; each call is a fresh snapshot
    - delete removes the post's comments first, then its like rows, then the post,
      and commits once

Design Decisions:
    - Cascade in one transaction: storage supports it, so a crash leaves either the whole
      post or nothing (ADR: atomic form of the ordered comment-first cascade)
    - Comment removal stays idempotent so a retried delete after a failed commit is safe
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Principal
from app.core.errors import ErrorContext, ResourceNotFoundError
from app.core.ownership import require_owner
from app.core.validate_content import require_text
from app.models.post import Post
from app.models.post_like import PostLike
from app.services.comment_store import CommentStore
from app.services.user_directory import require_author

logger = logging.getLogger(__name__)


class PostStore:
    """Owns Post entities."""

    def __init__(self, db: AsyncSession, comments: CommentStore):
        self.db = db
        self.comments = comments

    async def create(self, principal: Principal, title: str, body: str) -> Post:
        cleaned = require_text(title=title, body=body)
        await require_author(self.db, principal)

        post = Post(
            author_id=principal.id, title=cleaned["title"], body=cleaned["body"],
        )
        self.db.add(post)
        await self.db.commit()
        logger.info(
            "Post created", extra={"post_id": post.id, "user_id": principal.id},
        )
        return post

    async def get(self, post_id: str) -> Post:
        result = await self.db.execute(select(Post).where(Post.id == post_id))
        post = result.scalar_one_or_none()
        if not post:
            raise ResourceNotFoundError("Post", post_id, ErrorContext(post_id=post_id))
        return post

    async def list_all(self) -> list[Post]:
        result = await self.db.execute(
            select(Post).order_by(Post.created_at.desc(), Post.seq.asc()),
        )
        return list(result.scalars().all())

    async def update(
        self, principal: Principal, post_id: str, title: str, body: str,
    ) -> Post:
        post = await self.get(post_id)
        require_owner(principal, post, "Post", post_id)
        cleaned = require_text(title=title, body=body)

        post.title = cleaned["title"]
        post.body = cleaned["body"]
        await self.db.commit()
        logger.info(
            "Post updated", extra={"post_id": post_id, "user_id": principal.id},
        )
        return post

    async def delete(self, principal: Principal, post_id: str) -> None:
        post = await self.get(post_id)
        require_owner(principal, post, "Post", post_id)

        removed = await self.comments.delete_all_for_post(post_id, commit=False)
        await self.db.execute(
            delete(PostLike)
            .where(PostLike.post_id == post_id)
            .execution_options(synchronize_session=False)
        )
        await self.db.delete(post)
        await self.db.commit()
        logger.info(
            f"Post deleted with {removed} comment(s)",
            extra={"post_id": post_id, "user_id": principal.id},
        )

"""Comment Store — comments scoped to a post, with the cascade half of post deletion.

Invariants:
    - create validates body first, then requires the parent post to exist
    - list_for_post: created_at descending, ties by insertion order
    - Counts are recomputed per call; nothing is denormalized onto the post
    - delete_all_for_post is idempotent: no comments → no-op, returns 0

Design Decisions:
    - delete_all_for_post(commit=False) lets PostStore.delete fold the cascade into its
      own transaction (ADR: ordered cascade inside one commit)
"""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Principal
from app.core.errors import ErrorContext, ResourceNotFoundError
from app.core.validate_content import require_text
from app.models.comment import Comment
from app.models.post import Post
from app.services.user_directory import require_author

logger = logging.getLogger(__name__)


class CommentStore:
    """Owns Comment entities."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, principal: Principal, post_id: str, body: str) -> Comment:
        cleaned = require_text(body=body)
        post_exists = await self.db.execute(
            select(Post.id).where(Post.id == post_id),
        )
        if post_exists.scalar_one_or_none() is None:
            raise ResourceNotFoundError(
                "Post", post_id, ErrorContext(post_id=post_id, user_id=principal.id),
            )
        await require_author(self.db, principal)

        comment = Comment(
            post_id=post_id, author_id=principal.id, body=cleaned["body"],
        )
        self.db.add(comment)
        await self.db.commit()
        logger.info(
            "Comment created",
            extra={"post_id": post_id, "user_id": principal.id},
        )
        return comment

    async def list_for_post(self, post_id: str) -> list[Comment]:
        result = await self.db.execute(
            select(Comment)
            .where(Comment.post_id == post_id)
            .order_by(Comment.created_at.desc(), Comment.seq.asc())
        )
        return list(result.scalars().all())

    async def count_for_post(self, post_id: str) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(Comment)
            .where(Comment.post_id == post_id)
        )
        return result.scalar_one()

    async def count_for_posts(self, post_ids: list[str]) -> dict[str, int]:
        """Comment counts for many posts in one query; absent posts count 0."""
        if not post_ids:
            return {}
        result = await self.db.execute(
            select(Comment.post_id, func.count())
            .where(Comment.post_id.in_(post_ids))
            .group_by(Comment.post_id)
        )
        counts = {post_id: count for post_id, count in result}
        return {post_id: counts.get(post_id, 0) for post_id in post_ids}

    async def delete_all_for_post(self, post_id: str, *, commit: bool = True) -> int:
        result = await self.db.execute(
            delete(Comment)
            .where(Comment.post_id == post_id)
            .execution_options(synchronize_session=False)
        )
        if commit:
            await self.db.commit()
        return result.rowcount or 0

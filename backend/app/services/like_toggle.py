"""Like Toggle — per-post serialized flip of a principal's membership in a like set.

Invariants:
    - toggle raises ResourceNotFoundError when the post does not exist
    - Read-modify-write of a post's like set happens under that post's lock, so concurrent
      toggles from different principals never lose an update
    - Returned like_count is |liked_by| after the mutation, read inside the lock

Design Decisions:
    - Two layers of serialization: PostLockRegistry within the process, and
      SELECT ... FOR UPDATE on the post row across processes (PostgreSQL; SQLite ignores it
      and relies on its single-writer lock)
    - Core insert/delete statements: the like set is never loaded into the identity map,
      so repeated toggles in one session always see storage state
"""

import logging

from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Principal, ToggleOutcome
from app.core.errors import ErrorContext, ResourceNotFoundError
from app.core.toggle_like import flip_membership
from app.models.post import Post
from app.models.post_like import PostLike
from app.services.post_locks import PostLockRegistry
from app.services.user_directory import require_author

logger = logging.getLogger(__name__)


class LikeToggle:
    """Mutates and reads post like sets."""

    def __init__(self, db: AsyncSession, locks: PostLockRegistry):
        self.db = db
        self.locks = locks

    async def toggle(self, principal: Principal, post_id: str) -> ToggleOutcome:
        async with self.locks.hold(post_id):
            locked = await self.db.execute(
                select(Post.id).where(Post.id == post_id).with_for_update(),
            )
            if locked.scalar_one_or_none() is None:
                raise ResourceNotFoundError(
                    "Post", post_id, ErrorContext(post_id=post_id, user_id=principal.id),
                )

            outcome = flip_membership(await self.liked_by(post_id), principal.id)
            if outcome.liked:
                await require_author(self.db, principal)
                await self.db.execute(
                    insert(PostLike).values(post_id=post_id, user_id=principal.id),
                )
            else:
                await self.db.execute(
                    delete(PostLike)
                    .where(PostLike.post_id == post_id)
                    .where(PostLike.user_id == principal.id)
                    .execution_options(synchronize_session=False)
                )
            await self.db.commit()

        logger.info(
            f"Like toggled ({'liked' if outcome.liked else 'unliked'}), "
            f"count={outcome.like_count}",
            extra={"post_id": post_id, "user_id": principal.id},
        )
        return outcome

    async def liked_by(self, post_id: str) -> set[str]:
        result = await self.db.execute(
            select(PostLike.user_id).where(PostLike.post_id == post_id),
        )
        return set(result.scalars().all())

    async def count_for_post(self, post_id: str) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(PostLike)
            .where(PostLike.post_id == post_id)
        )
        return result.scalar_one()

    async def count_for_posts(self, post_ids: list[str]) -> dict[str, int]:
        if not post_ids:
            return {}
        result = await self.db.execute(
            select(PostLike.post_id, func.count())
            .where(PostLike.post_id.in_(post_ids))
            .group_by(PostLike.post_id)
        )
        counts = {post_id: count for post_id, count in result}
        return {post_id: counts.get(post_id, 0) for post_id in post_ids}

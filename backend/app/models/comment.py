"""Comment ORM — a reply scoped to one post.

Invariants:
    - post_id, author_id, created_at immutable; comments are never updated
    - Deleted only as part of its post's deletion (CommentStore.delete_all_for_post)

Design Decisions:
    - ON DELETE CASCADE on post_id as a storage-level backstop; the store still deletes
      comments explicitly before the post
"""

from datetime import datetime, timezone

from sqlalchemy import Text, String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.user import new_id


class Comment(Base):
    """Comment entity."""
    __tablename__ = "comments"

    seq: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    id: Mapped[str] = mapped_column(
        String(36), nullable=False, unique=True, index=True, default=new_id,
    )
    post_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    author_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

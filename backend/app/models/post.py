"""Post ORM — the aggregate owned by its author.

Invariants:
    - id is an opaque UUID4 string; seq is the storage insertion order
    - author_id and created_at are set once at creation
    - title/body non-empty (validated before insert)
    - The like set lives in post_likes (post_like.py): an empty set is simply no rows

Design Decisions:
    - seq as integer primary key: tie-breaker for equal created_at values, so listing
      order is total and stable
    - No ORM relationships to comments/likes: counts and cascades are explicit queries
      issued by the stores (ADR: no join-like population)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.user import new_id


class Post(Base):
    """Post entity."""
    __tablename__ = "posts"

    seq: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    id: Mapped[str] = mapped_column(
        String(36), nullable=False, unique=True, index=True, default=new_id,
    )
    author_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

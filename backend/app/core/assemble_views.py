"""View Builders — pure composition of stored entities with derived display data.

Invariants:
    - author_name may be None (unresolvable author); building a view never fails on it
    - like_count and comment_count are inputs, computed by the caller per request
    - Comment views omit title, like_count and comment_count
    - created_at is always UTC-aware; naive values (SQLite drops the offset) are read as UTC

Design Decisions:
    - Plain dicts out: schemas/ validates the shape at the API boundary
"""

from datetime import datetime, timezone

from app.core.repository_protocols import CommentRecord, PostRecord


def as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def build_post_view(
    post: PostRecord,
    author_name: str | None,
    like_count: int,
    comment_count: int,
) -> dict:
    return {
        "id": post.id,
        "title": post.title,
        "body": post.body,
        "created_at": as_utc(post.created_at),
        "author_id": post.author_id,
        "author_name": author_name,
        "like_count": like_count,
        "comment_count": comment_count,
    }


def build_comment_view(comment: CommentRecord, author_name: str | None) -> dict:
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "body": comment.body,
        "created_at": as_utc(comment.created_at),
        "author_id": comment.author_id,
        "author_name": author_name,
    }

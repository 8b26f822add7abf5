"""Post Store — create/get/list/update/delete against an in-memory database.

Invariants exercised:
    - create then get returns identical title/body/author_id
    - Non-owner update/delete → ForbiddenError and the post is unchanged
    - Validation happens before mutation
    - delete cascades comments and likes; a second delete → NotFound
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from app.core.domain_types import Principal, UserId
from app.core.errors import (
    ForbiddenError, InputValidationError, InvalidCredentialError, ResourceNotFoundError,
)
from app.models.post import Post
from app.models.post_like import PostLike
from app.services.comment_store import CommentStore
from app.services.like_toggle import LikeToggle
from app.services.post_locks import PostLockRegistry
from app.services.post_store import PostStore


@pytest.fixture
def comments(test_db):
    return CommentStore(test_db)


@pytest.fixture
def posts(test_db, comments):
    return PostStore(test_db, comments)


async def test_create_then_get_round_trips(posts, alice):
    created = await posts.create(alice, "Welcome", "hi")
    fetched = await posts.get(created.id)
    assert fetched.title == "Welcome"
    assert fetched.body == "hi"
    assert fetched.author_id == alice.id
    assert fetched.created_at is not None


async def test_create_strips_whitespace(posts, alice):
    post = await posts.create(alice, "  Welcome ", " hi ")
    assert (post.title, post.body) == ("Welcome", "hi")


@pytest.mark.parametrize("title,body", [("", "hi"), ("Welcome", ""), ("  ", "hi")])
async def test_create_rejects_empty_fields(posts, alice, test_db, title, body):
    with pytest.raises(InputValidationError):
        await posts.create(alice, title, body)
    count = await test_db.execute(select(func.count()).select_from(Post))
    assert count.scalar_one() == 0


async def test_create_requires_existing_author(posts):
    ghost = Principal(id=UserId("no-such-user"), name="Ghost", email=None)
    with pytest.raises(InvalidCredentialError) as exc_info:
        await posts.create(ghost, "Welcome", "hi")
    assert exc_info.value.context.user_id == "no-such-user"


async def test_get_missing_post_raises_not_found(posts):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await posts.get("does-not-exist")
    assert exc_info.value.context.post_id == "does-not-exist"


async def test_list_is_newest_first(posts, alice):
    first = await posts.create(alice, "first", "1")
    second = await posts.create(alice, "second", "2")
    listed = await posts.list_all()
    assert [p.id for p in listed] == [second.id, first.id]


async def test_list_ties_keep_insertion_order(posts, alice, test_db):
    same = datetime(2026, 1, 1, tzinfo=timezone.utc)
    a = await posts.create(alice, "a", "1")
    b = await posts.create(alice, "b", "2")
    newer = await posts.create(alice, "newer", "3")
    a.created_at = same
    b.created_at = same
    newer.created_at = same + timedelta(seconds=1)
    await test_db.commit()

    listed = await posts.list_all()
    assert [p.id for p in listed] == [newer.id, a.id, b.id]


async def test_list_empty(posts):
    assert await posts.list_all() == []


async def test_owner_updates_title_and_body(posts, alice):
    post = await posts.create(alice, "Welcome", "hi")
    created_at = post.created_at
    updated = await posts.update(alice, post.id, "Edited", "new body")
    assert (updated.title, updated.body) == ("Edited", "new body")
    assert updated.created_at == created_at
    assert updated.author_id == alice.id


async def test_non_owner_update_forbidden_and_unchanged(posts, alice, bob):
    post = await posts.create(alice, "Welcome", "hi")
    with pytest.raises(ForbiddenError):
        await posts.update(bob, post.id, "Hacked", "pwned")
    fetched = await posts.get(post.id)
    assert (fetched.title, fetched.body) == ("Welcome", "hi")


async def test_update_missing_post_not_found(posts, alice):
    with pytest.raises(ResourceNotFoundError):
        await posts.update(alice, "nope", "t", "b")


async def test_update_validates_before_mutation(posts, alice):
    post = await posts.create(alice, "Welcome", "hi")
    with pytest.raises(InputValidationError):
        await posts.update(alice, post.id, "", "still here")
    fetched = await posts.get(post.id)
    assert fetched.title == "Welcome"


async def test_forbidden_checked_before_validation(posts, alice, bob):
    post = await posts.create(alice, "Welcome", "hi")
    with pytest.raises(ForbiddenError):
        await posts.update(bob, post.id, "", "")


async def test_non_owner_delete_forbidden(posts, alice, bob):
    post = await posts.create(alice, "Welcome", "hi")
    with pytest.raises(ForbiddenError):
        await posts.delete(bob, post.id)
    assert (await posts.get(post.id)).id == post.id


async def test_delete_cascades_comments_and_likes(posts, comments, alice, bob, test_db):
    post = await posts.create(alice, "Welcome", "hi")
    await comments.create(bob, post.id, "nice post")
    await comments.create(alice, post.id, "thanks")
    await LikeToggle(test_db, PostLockRegistry()).toggle(bob, post.id)

    await posts.delete(alice, post.id)

    with pytest.raises(ResourceNotFoundError):
        await posts.get(post.id)
    assert await comments.list_for_post(post.id) == []
    assert await comments.count_for_post(post.id) == 0
    likes = await test_db.execute(
        select(func.count()).select_from(PostLike).where(PostLike.post_id == post.id),
    )
    assert likes.scalar_one() == 0


async def test_delete_twice_reports_not_found(posts, alice):
    post = await posts.create(alice, "Welcome", "hi")
    await posts.delete(alice, post.id)
    with pytest.raises(ResourceNotFoundError):
        await posts.delete(alice, post.id)


async def test_delete_leaves_other_posts_alone(posts, comments, alice, bob):
    doomed = await posts.create(alice, "doomed", "x")
    kept = await posts.create(bob, "kept", "y")
    await comments.create(alice, kept.id, "still here")

    await posts.delete(alice, doomed.id)

    assert [p.id for p in await posts.list_all()] == [kept.id]
    assert await comments.count_for_post(kept.id) == 1

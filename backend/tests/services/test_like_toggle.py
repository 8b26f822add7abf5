"""Like Toggle — idempotent flips and per-post serialization.

Invariants exercised:
    - Toggling twice by the same principal restores like_count and ends liked=False
    - Toggle on a missing post → ResourceNotFoundError
    - Concurrent toggles from different principals on one post both land
"""

import asyncio

import pytest

from app.core.errors import ResourceNotFoundError
from app.services.comment_store import CommentStore
from app.services.like_toggle import LikeToggle
from app.services.post_locks import PostLockRegistry
from app.services.post_store import PostStore


@pytest.fixture
def locks():
    return PostLockRegistry()


@pytest.fixture
def likes(test_db, locks):
    return LikeToggle(test_db, locks)


@pytest.fixture
async def post(test_db, alice):
    return await PostStore(test_db, CommentStore(test_db)).create(alice, "Welcome", "hi")


async def test_first_toggle_likes(likes, post, bob):
    outcome = await likes.toggle(bob, post.id)
    assert outcome.liked is True
    assert outcome.like_count == 1
    assert await likes.liked_by(post.id) == {bob.id}


async def test_second_toggle_unlikes(likes, post, bob):
    before = await likes.count_for_post(post.id)
    await likes.toggle(bob, post.id)
    outcome = await likes.toggle(bob, post.id)
    assert outcome.liked is False
    assert outcome.like_count == before
    assert await likes.liked_by(post.id) == set()


async def test_third_toggle_likes_again(likes, post, bob):
    for _ in range(3):
        outcome = await likes.toggle(bob, post.id)
    assert outcome.liked is True
    assert outcome.like_count == 1


async def test_likes_from_different_users_accumulate(likes, post, alice, bob):
    await likes.toggle(alice, post.id)
    outcome = await likes.toggle(bob, post.id)
    assert outcome.like_count == 2
    assert await likes.liked_by(post.id) == {alice.id, bob.id}


async def test_toggle_missing_post_not_found(likes, bob):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await likes.toggle(bob, "missing")
    assert exc_info.value.context.log_fields() == {"post_id": "missing", "user_id": bob.id}


async def test_count_for_posts_fills_zeroes(likes, post, bob):
    await likes.toggle(bob, post.id)
    assert await likes.count_for_posts([post.id, "other"]) == {post.id: 1, "other": 0}


async def test_lock_released_after_toggle(likes, locks, post, bob):
    await likes.toggle(bob, post.id)
    assert not locks.is_tracked(post.id)


async def test_lock_released_after_not_found(likes, locks, bob):
    with pytest.raises(ResourceNotFoundError):
        await likes.toggle(bob, "missing")
    assert len(locks) == 0


async def test_concurrent_toggles_from_two_users_both_land(
    test_session_factory, locks, post, alice, bob,
):
    async with test_session_factory() as db_a, test_session_factory() as db_b:
        outcomes = await asyncio.gather(
            LikeToggle(db_a, locks).toggle(alice, post.id),
            LikeToggle(db_b, locks).toggle(bob, post.id),
        )

    assert all(o.liked for o in outcomes)
    assert sorted(o.like_count for o in outcomes) == [1, 2]
    async with test_session_factory() as db:
        assert await LikeToggle(db, locks).liked_by(post.id) == {alice.id, bob.id}

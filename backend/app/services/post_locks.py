"""Post Lock Registry — per-post mutual exclusion for like-set read-modify-write.

Invariants:
    - At most one holder of a given post's lock at a time; different posts never contend
    - A post's lock is discarded when its last holder/waiter leaves (no unbounded growth)

Design Decisions:
    - In-process asyncio.Lock keyed by post id: one registry per app (app.state),
      single event loop, so dict bookkeeping needs no extra synchronization
    - Cross-process serialization is the database's job (SELECT ... FOR UPDATE in LikeToggle)
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class PostLockRegistry:
    """Hands out one asyncio.Lock per post id, reference-counted."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, post_id: str) -> AsyncIterator[None]:
        lock = self._locks.get(post_id)
        if lock is None:
            lock = self._locks[post_id] = asyncio.Lock()
        self._users[post_id] = self._users.get(post_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[post_id] -= 1
            if self._users[post_id] == 0:
                del self._users[post_id]
                del self._locks[post_id]

    def is_tracked(self, post_id: str) -> bool:
        return post_id in self._locks

    def __len__(self) -> int:
        return len(self._locks)

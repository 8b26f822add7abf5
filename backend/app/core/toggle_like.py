"""Like Toggle Rule — pure membership flip for a post's like set.

Invariants:
    - Member → removed (liked=False); non-member → added (liked=True)
    - The resulting set never contains duplicates
    - Applying the flip twice for the same user restores the original set

Design Decisions:
    - Pure function: serialization (per-post lock) is the shell's job, the rule is not
"""

from collections.abc import Iterable

from app.core.domain_types import ToggleOutcome


def flip_membership(liked_by: Iterable[str], user_id: str) -> ToggleOutcome:
    members = set(liked_by)
    if user_id in members:
        members.discard(user_id)
        return ToggleOutcome(liked=False, liked_by=frozenset(members))
    members.add(user_id)
    return ToggleOutcome(liked=True, liked_by=frozenset(members))

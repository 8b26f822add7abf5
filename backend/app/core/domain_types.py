"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId is an opaque string — never parsed or ordered by domain logic
    - Principal is immutable for the lifetime of a request
    - ToggleOutcome.like_count always equals len(ToggleOutcome.liked_by)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Principal built from verified token claims only: no user re-fetch per request
      (ADR: identity claims are self-contained)
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Principal:
    """Verified identity of the caller for one request."""
    id: UserId
    name: str | None
    email: str | None

    def to_claims(self) -> dict:
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass(frozen=True)
class ToggleOutcome:
    """Result of flipping one principal's membership in a like set."""
    liked: bool
    liked_by: frozenset[str]

    @property
    def like_count(self) -> int:
        return len(self.liked_by)

"""Domain Types — verifies Principal and ToggleOutcome value semantics.

Tests:
    - Principal is immutable and round-trips to token claims
    - ToggleOutcome.like_count is derived from liked_by
"""

import dataclasses

import pytest

from app.core.domain_types import Principal, ToggleOutcome, UserId


def test_principal_is_frozen():
    p = Principal(id=UserId("u1"), name="Alice", email="a@x.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.id = UserId("u2")


def test_principal_to_claims_has_id_name_email():
    p = Principal(id=UserId("u1"), name="Alice", email="a@x.com")
    assert p.to_claims() == {"id": "u1", "name": "Alice", "email": "a@x.com"}


def test_toggle_outcome_count_matches_set_size():
    outcome = ToggleOutcome(liked=True, liked_by=frozenset({"a", "b"}))
    assert outcome.like_count == 2


def test_toggle_outcome_empty_set_counts_zero():
    assert ToggleOutcome(liked=False, liked_by=frozenset()).like_count == 0

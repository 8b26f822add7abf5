"""Ownership — the single authorization predicate for mutating owned entities.

Invariants:
    - Ownership is decided only by entity.author_id == principal.id
    - update and delete paths call require_owner identically

Design Decisions:
    - Pure function over per-route checks: one place to change the rule
"""

from app.core.domain_types import Principal
from app.core.errors import ErrorContext, ForbiddenError
from app.core.repository_protocols import OwnedEntity


def is_owner(principal: Principal, entity: OwnedEntity) -> bool:
    return entity.author_id == principal.id


def require_owner(
    principal: Principal, entity: OwnedEntity, resource_type: str, resource_id: str,
) -> None:
    """Raise ForbiddenError unless principal owns entity."""
    if not is_owner(principal, entity):
        raise ForbiddenError(
            resource_type, resource_id, ErrorContext(user_id=principal.id),
        )

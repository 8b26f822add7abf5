"""Content Validation — pure checks applied at the boundary of every write.

Invariants:
    - Returned values are stripped; whitespace-only counts as empty
    - Raises before any mutation happens (callers validate first)
"""

from app.core.errors import InputValidationError


def require_text(**fields: str | None) -> dict[str, str]:
    """Strip each field and reject the call if any is empty.

    The error message names every required field, e.g. "title and body required".
    """
    cleaned = {name: (value or "").strip() for name, value in fields.items()}
    empty = [name for name, value in cleaned.items() if not value]
    if empty:
        raise InputValidationError(
            f"{' and '.join(fields)} required", empty,
        )
    return cleaned

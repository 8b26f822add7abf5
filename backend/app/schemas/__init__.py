"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape and size at the system boundary
    - Emptiness of content fields is enforced by the stores (core/validate_content.py),
      so services called outside HTTP get the same checks

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""

"""Infrastructure Layer — database, security adapters and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All storage failures mapped to DatabaseError before leaving this layer

Design Decisions:
    - Thin adapters over raw libraries (ADR: single responsibility)
"""

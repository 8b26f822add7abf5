"""Services Layer — stores, like toggle, view assembly and accounts.

Invariants:
    - One class per component; each receives its AsyncSession (and collaborators) explicitly
    - Services raise FeedError subclasses; they never build HTTP responses

Design Decisions:
    - Pure rules live in core/, services orchestrate IO around them (ADR: impureim sandwich)
"""

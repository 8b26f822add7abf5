"""User ORM — registered accounts that author posts and comments.

Invariants:
    - id is an opaque UUID4 string, assigned at registration
    - email is unique and stored lower-cased
    - password_digest holds a bcrypt digest, never the password

Design Decisions:
    - name nullable: registration requires only email and password
"""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


def new_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """User account."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    password_digest: Mapped[str] = mapped_column(String(100), nullable=False)

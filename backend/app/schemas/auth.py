"""Auth Schemas — registration/login payloads and the {user, token} response.

Invariants:
    - email and password are required and non-blank (400 otherwise)
    - email is stripped and lower-cased before reaching the account service
    - password never appears in any response model
"""

from pydantic import BaseModel, Field, field_validator


class RegisterRequest(BaseModel):
    name: str | None = Field(None, max_length=100)
    email: str = Field("", max_length=255, validate_default=True)
    password: str = Field("", max_length=128, validate_default=True)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("email and password required")
        return v

    @field_validator("password")
    @classmethod
    def require_password(cls, v: str) -> str:
        if not v:
            raise ValueError("email and password required")
        return v

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


class LoginRequest(BaseModel):
    email: str = Field("", max_length=255, validate_default=True)
    password: str = Field("", max_length=128, validate_default=True)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("email and password required")
        return v

    @field_validator("password")
    @classmethod
    def require_password(cls, v: str) -> str:
        if not v:
            raise ValueError("email and password required")
        return v


class UserOut(BaseModel):
    """Public user data — matches the signed token claims."""
    id: str
    name: str | None
    email: str


class AuthResponse(BaseModel):
    user: UserOut
    token: str

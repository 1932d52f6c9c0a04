"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """
    Registration form. Fields are optional here so the identity service can
    report every missing or invalid field at once instead of failing on the first.
    """

    username: str | None = Field(default=None, description="Username (min 3 chars)")
    email: str | None = Field(default=None, description="Email address")
    password: str | None = Field(default=None, description="Password (min 6 chars)")
    confirm_password: str | None = Field(
        default=None,
        alias="confirmPassword",
        description="Must equal password",
    )


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str | None = Field(default=None, description="Username")
    password: str | None = Field(default=None, description="Password")


class UserOut(BaseModel):
    """Sanitized user: never carries the password hash."""

    id: int
    username: str
    email: str
    display_name: str | None = None
    created_at: datetime

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """User plus bearer token returned by register and login."""

    user: UserOut
    token: str = Field(..., description="JWT; send as Authorization: Bearer <token>")


class MeResponse(BaseModel):
    """Response for GET /me."""

    user: UserOut

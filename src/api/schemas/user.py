"""Pydantic schemas for User API."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from api.schemas.common import required
from infrastructure.auth.password import MAX_PASSWORD_BYTES

INVALID_EMAIL = "Please include a valid email"


def _valid_email(value: Any, handler: ValidatorFunctionWrapHandler) -> str:
    """Run ``EmailStr`` validation, lower-case the result and replace its message."""
    if isinstance(value, str):
        value = value.strip()
    try:
        return str(handler(value)).lower()
    except ValidationError:
        raise ValueError(INVALID_EMAIL) from None


class RegisterRequest(BaseModel):
    """Schema for registering an account."""

    name: str = Field("", validate_default=True)
    email: EmailStr = Field("", validate_default=True)
    password: str = Field("", validate_default=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return required(v, "Name is required")

    @field_validator("email", mode="wrap")
    @classmethod
    def validate_email(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> str:
        return _valid_email(v, handler)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if len(v) < 6:
            raise ValueError("Password must be at least 6 characters")
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError("Password must be at most 72 bytes")
        return v


class LoginRequest(BaseModel):
    """Schema for logging in.

    The password only has to be present; an empty one fails as a wrong password.
    """

    email: EmailStr = Field("", validate_default=True)
    password: Optional[str] = Field(None, validate_default=True)

    @field_validator("email", mode="wrap")
    @classmethod
    def validate_email(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> str:
        return _valid_email(v, handler)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("Password is required")
        return v


class TokenResponse(BaseModel):
    """Schema for an issued auth token."""

    token: str


class UserResponse(BaseModel):
    """Schema for User response (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    created_at: datetime

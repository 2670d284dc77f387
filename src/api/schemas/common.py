"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class FieldError(BaseModel):
    """A single failed constraint."""

    field: str | None = None
    msg: str


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error_code: str
    message: str
    errors: list[FieldError]
    details: Any | None = None


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


def required(value: str | None, message: str) -> str:
    """Shared check for mandatory text fields."""
    if value is None or not value.strip():
        raise ValueError(message)
    return value.strip()

"""Helpers for interpreting database driver errors."""

from sqlalchemy.exc import IntegrityError


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the error is a unique-constraint clash rather than NOT NULL, FK, etc."""
    orig = str(exc.orig).lower() if exc.orig else ""
    return "unique" in orig or "duplicate" in orig

"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the naive DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass
class User:
    """Domain entity for a registered account.

    ``password_hash`` is a bcrypt hash; the plaintext is never kept.
    """

    name: str
    email: str
    password_hash: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        """Emails are compared case-insensitively."""
        self.email = self.email.strip().lower()

"""Authentication provider protocol."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol
from uuid import UUID


@dataclass(frozen=True)
class TokenUser:
    """Represents a user extracted from an auth token."""

    id: UUID


class IAuthProvider(Protocol):
    """Protocol for authentication providers."""

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate an authentication token.

        Args:
            token: The token presented by the client

        Returns:
            TokenUser if valid, None if invalid or expired
        """
        ...

    def create_token(self, user_id: UUID, issued_at: Optional[datetime] = None) -> str:
        """
        Create an authentication token for a user.

        Args:
            user_id: The user the token identifies
            issued_at: Issue time; defaults to now

        Returns:
            The generated token string
        """
        ...

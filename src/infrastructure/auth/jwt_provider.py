"""JWT authentication provider implementation.

Tokens are HS256-signed with a shared secret and carry only the user id:

    {
        "sub": "user-uuid",
        "iat": 1234567890,
        "exp": 1234999890
    }
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)


class JWTAuthProvider:
    """JWT-based authentication provider.

    Stateless: there is no revocation list, a token stays valid until it
    expires.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 5 * 24 * 60,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT and extract the user id.

        Args:
            token: The JWT to validate

        Returns:
            TokenUser if valid, None if the signature, expiry or subject is bad
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
            )
        except JWTError as e:
            logger.debug("Token rejected: %s", e)
            return None

        subject = payload.get("sub")
        if not subject:
            return None

        try:
            return TokenUser(id=UUID(subject))
        except ValueError:
            return None

    def create_token(self, user_id: UUID, issued_at: Optional[datetime] = None) -> str:
        """
        Create a signed JWT for a user.

        Args:
            user_id: The user the token identifies
            issued_at: Issue time (aware or naive UTC); defaults to now

        Returns:
            The generated JWT string
        """
        issued = issued_at or datetime.now(timezone.utc)
        if issued.tzinfo is None:
            issued = issued.replace(tzinfo=timezone.utc)
        expire = issued + timedelta(minutes=self._expire_minutes)

        payload: dict = {
            "sub": str(user_id),
            "iat": int(issued.timestamp()),
            "exp": int(expire.timestamp()),
        }

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities.

    Reads fill ``Profile.user_name`` from the owning user.
    """

    async def get_for_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        ...

    async def get_all(self) -> list[Profile]:
        """Get every profile."""
        ...

    async def upsert(self, profile: Profile) -> None:
        """Insert the profile, or overwrite the one stored for its user."""
        ...

    async def update(self, profile: Profile) -> None:
        """Persist changes to an existing profile."""
        ...

    async def delete_for_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user."""
        ...

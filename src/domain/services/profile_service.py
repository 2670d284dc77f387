"""Profile service layer with business logic."""

import asyncio
from datetime import date
from typing import Any, Callable, Optional
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import ProfileNotFoundError
from domain.entities.profile import SOCIAL_PLATFORMS, EducationEntry, ExperienceEntry, Profile
from domain.entities.user import utcnow
from domain.normalization import normalize_skills, normalize_url
from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.database.errors import is_unique_violation
from infrastructure.storage.upload_sink import UploadSink

logger = structlog.get_logger()

# Optional profile fields a request may set; absent ones keep their stored value
DETAIL_FIELDS = ("company", "location", "bio", "githubusername")


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        upload_sink: Optional[UploadSink] = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._upload_sink = upload_sink

    async def upsert(
        self,
        user_id: UUID,
        status: str,
        skills: str | list[str],
        website: Optional[str] = None,
        social: Optional[dict[str, Optional[str]]] = None,
        **details: Any,
    ) -> Profile:
        """Create the user's profile or update it in place.

        Keyed on ``user_id`` so repeating a request leaves one profile with
        the same values. Submitted fields replace stored ones; sub-lists,
        the picture and unsubmitted detail fields are kept.
        """
        unknown = set(details) - set(DETAIL_FIELDS)
        if unknown:
            raise TypeError(f"Unknown profile fields: {sorted(unknown)}")

        website = (website or "").strip()
        links = {
            platform: url.strip()
            for platform, url in (social or {}).items()
            if platform in SOCIAL_PLATFORMS and url and url.strip()
        }

        # A concurrent first upsert may insert between our read and write;
        # the second attempt then finds that row and updates it.
        for attempt in range(2):
            async with self._uow_factory() as uow:
                profile = await uow.profiles.get_for_user(user_id)
                if profile is None:
                    profile = Profile(user_id=user_id, status=status)

                profile.status = status
                profile.skills = normalize_skills(skills)
                profile.website = normalize_url(website) if website else ""
                profile.social = {platform: normalize_url(url) for platform, url in links.items()}
                for key, value in details.items():
                    setattr(profile, key, value)
                profile.updated_at = utcnow()

                try:
                    await uow.profiles.upsert(profile)
                    await uow.commit()
                except IntegrityError as exc:
                    await uow.rollback()
                    if attempt == 0 and is_unique_violation(exc):
                        logger.debug("profile_upsert_retried", user_id=str(user_id))
                        continue
                    raise
                saved = await uow.profiles.get_for_user(user_id)
                break

        logger.info("profile_upserted", user_id=str(user_id))
        return saved  # type: ignore[return-value]

    async def get_for_user(self, user_id: UUID) -> Profile:
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_for_user(user_id)
            if not profile:
                raise ProfileNotFoundError(str(user_id))
            return profile

    async def get_all(self) -> list[Profile]:
        async with self._uow_factory() as uow:
            return await uow.profiles.get_all()  # type: ignore[no-any-return]

    async def delete_account(self, user_id: UUID) -> None:
        """Delete the user's posts, profile and account.

        The three deletions run concurrently, each in its own unit of work.
        There is no rollback: if one fails the others still apply.
        """

        async def delete_posts() -> None:
            async with self._uow_factory() as uow:
                count = await uow.posts.delete_all_for_user(user_id)
                await uow.commit()
                logger.info("posts_deleted", user_id=str(user_id), count=count)

        async def delete_profile() -> None:
            async with self._uow_factory() as uow:
                await uow.profiles.delete_for_user(user_id)
                await uow.commit()

        async def delete_user() -> None:
            async with self._uow_factory() as uow:
                await uow.users.delete(user_id)
                await uow.commit()

        results = await asyncio.gather(
            delete_posts(), delete_profile(), delete_user(), return_exceptions=True
        )
        failures = [r for r in results if isinstance(r, BaseException)]
        for failure in failures:
            logger.error(
                "account_deletion_step_failed",
                user_id=str(user_id),
                error=str(failure),
                error_type=type(failure).__name__,
            )
        if failures:
            raise failures[0]

        logger.info("account_deleted", user_id=str(user_id))

    async def set_picture(self, user_id: UUID, content: bytes) -> Profile:
        """Store the user's profile picture, replacing any previous one."""
        if self._upload_sink is None:
            raise RuntimeError("ProfileService has no upload sink configured")

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_for_user(user_id)
            if not profile:
                raise ProfileNotFoundError(str(user_id))

            profile.profile_pic = await self._upload_sink.save_profile_image(user_id, content)
            profile.updated_at = utcnow()
            await uow.profiles.update(profile)
            await uow.commit()
            return profile

    async def add_experience(
        self,
        user_id: UUID,
        title: str,
        company: str,
        from_date: date,
        location: Optional[str] = None,
        to_date: Optional[date] = None,
        current: bool = False,
        description: Optional[str] = None,
    ) -> Profile:
        """Prepend an experience entry."""
        entry = ExperienceEntry(
            title=title,
            company=company,
            location=location,
            from_date=from_date,
            to_date=to_date,
            current=current,
            description=description,
        )
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_experience(entry)
            await uow.profiles.update(profile)
            await uow.commit()
            return profile

    async def remove_experience(self, user_id: UUID, entry_id: UUID) -> Profile:
        """Drop an experience entry; an unknown id leaves the profile unchanged."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.remove_experience(entry_id)
            await uow.profiles.update(profile)
            await uow.commit()
            return profile

    async def add_education(
        self,
        user_id: UUID,
        school: str,
        degree: str,
        fieldofstudy: str,
        from_date: date,
        to_date: Optional[date] = None,
        current: bool = False,
        description: Optional[str] = None,
    ) -> Profile:
        """Prepend an education entry."""
        entry = EducationEntry(
            school=school,
            degree=degree,
            fieldofstudy=fieldofstudy,
            from_date=from_date,
            to_date=to_date,
            current=current,
            description=description,
        )
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_education(entry)
            await uow.profiles.update(profile)
            await uow.commit()
            return profile

    async def remove_education(self, user_id: UUID, entry_id: UUID) -> Profile:
        """Drop an education entry; an unknown id leaves the profile unchanged."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.remove_education(entry_id)
            await uow.profiles.update(profile)
            await uow.commit()
            return profile

    async def _require_profile(self, uow: IUnitOfWork, user_id: UUID) -> Profile:
        profile = await uow.profiles.get_for_user(user_id)
        if not profile:
            raise ProfileNotFoundError(str(user_id))
        return profile

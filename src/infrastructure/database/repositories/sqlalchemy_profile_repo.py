"""SQLAlchemy implementation of Profile repository."""

from uuid import UUID

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import EducationEntry, ExperienceEntry, Profile
from infrastructure.database.models import ProfileModel, UserModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _select_with_user_name(self) -> Select[tuple[ProfileModel, str | None]]:
        return select(ProfileModel, UserModel.name).outerjoin(
            UserModel, UserModel.id == ProfileModel.user_id
        )

    async def get_for_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user, with the user's name."""
        stmt = self._select_with_user_name().where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        model, user_name = row
        return self._to_entity(model, user_name)

    async def get_all(self) -> list[Profile]:
        """Get every profile, oldest first."""
        stmt = self._select_with_user_name().order_by(ProfileModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(model, user_name) for model, user_name in result]

    async def upsert(self, profile: Profile) -> None:
        """Insert the profile, or overwrite the one stored for its user."""
        model = await self._get_model(profile.user_id)
        if model is None:
            self._session.add(self._to_model(profile))
        else:
            self._apply(model, profile)
        await self._session.flush()

    async def update(self, profile: Profile) -> None:
        """Persist changes to an existing profile."""
        model = await self._get_model(profile.user_id)

        if not model:
            raise ValueError(f"Profile for user {profile.user_id} not found")

        self._apply(model, profile)
        await self._session.flush()

    async def delete_for_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user."""
        stmt = delete(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    async def _get_model(self, user_id: UUID) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _apply(self, model: ProfileModel, entity: Profile) -> None:
        """Copy entity state onto a loaded model.

        JSON columns are reassigned, never mutated in place, so the ORM
        notices the change.
        """
        model.status = entity.status
        model.company = entity.company
        model.website = entity.website
        model.location = entity.location
        model.bio = entity.bio
        model.githubusername = entity.githubusername
        model.skills = list(entity.skills)
        model.social = dict(entity.social)
        model.profile_pic = entity.profile_pic
        model.experience = [e.to_document() for e in entity.experience]
        model.education = [e.to_document() for e in entity.education]
        model.updated_at = entity.updated_at

    def _to_entity(self, model: ProfileModel, user_name: str | None = None) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            status=model.status,
            company=model.company,
            website=model.website or "",
            location=model.location,
            bio=model.bio,
            githubusername=model.githubusername,
            skills=list(model.skills or []),
            social=dict(model.social or {}),
            profile_pic=model.profile_pic,
            experience=[ExperienceEntry.from_document(d) for d in model.experience or []],
            education=[EducationEntry.from_document(d) for d in model.education or []],
            created_at=model.created_at,
            updated_at=model.updated_at,
            user_name=user_name,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        model = ProfileModel(
            id=entity.id,
            user_id=entity.user_id,
            created_at=entity.created_at,
        )
        self._apply(model, entity)
        return model

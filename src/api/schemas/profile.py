"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from api.schemas.common import required
from domain.entities.profile import EducationEntry, ExperienceEntry, Profile
from domain.normalization import normalize_skills

FROM_AFTER_TO = "'From' date must be before 'to' date"


class ProfileUpsert(BaseModel):
    """Schema for creating or updating the caller's profile.

    ``skills`` may be a list or a comma-delimited string.
    """

    status: str = Field("", validate_default=True)
    skills: str | list[str] = Field("", validate_default=True)
    website: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None

    # Social links
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None
    github: Optional[str] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str) -> str:
        return required(v, "Status is required")

    @field_validator("skills")
    @classmethod
    def validate_skills(cls, v: str | list[str]) -> str | list[str]:
        if not normalize_skills(v):
            raise ValueError("Skills is required")
        return v


def _as_date(value: Optional[date]) -> Optional[date]:
    """Keep only the calendar date of a submitted datetime."""
    return value.date() if isinstance(value, datetime) else value


def _check_from_before_to(to_date: Optional[date], info: ValidationInfo) -> Optional[date]:
    to_date = _as_date(to_date)
    from_date = info.data.get("from_date")
    if to_date and from_date and from_date > to_date:
        raise ValueError(FROM_AFTER_TO)
    return to_date


class ExperienceCreate(BaseModel):
    """Schema for adding an experience entry."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field("", validate_default=True)
    company: str = Field("", validate_default=True)
    location: Optional[str] = None
    from_date: Optional[datetime | date] = Field(None, alias="from", validate_default=True)
    to_date: Optional[datetime | date] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return required(v, "Title is required")

    @field_validator("company")
    @classmethod
    def validate_company(cls, v: str) -> str:
        return required(v, "Company is required")

    @field_validator("from_date")
    @classmethod
    def validate_from(cls, v: Optional[date]) -> Optional[date]:
        if v is None:
            raise ValueError("From date is required")
        return _as_date(v)

    @field_validator("to_date")
    @classmethod
    def validate_to(cls, v: Optional[date], info: ValidationInfo) -> Optional[date]:
        return _check_from_before_to(v, info)


class EducationCreate(BaseModel):
    """Schema for adding an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    school: str = Field("", validate_default=True)
    degree: str = Field("", validate_default=True)
    fieldofstudy: str = Field("", validate_default=True)
    from_date: Optional[datetime | date] = Field(None, alias="from", validate_default=True)
    to_date: Optional[datetime | date] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None

    @field_validator("school")
    @classmethod
    def validate_school(cls, v: str) -> str:
        return required(v, "School is required")

    @field_validator("degree")
    @classmethod
    def validate_degree(cls, v: str) -> str:
        return required(v, "Degree is required")

    @field_validator("fieldofstudy")
    @classmethod
    def validate_fieldofstudy(cls, v: str) -> str:
        return required(v, "Field of study is required")

    @field_validator("from_date")
    @classmethod
    def validate_from(cls, v: Optional[date]) -> Optional[date]:
        if v is None:
            raise ValueError("From date is required")
        return _as_date(v)

    @field_validator("to_date")
    @classmethod
    def validate_to(cls, v: Optional[date], info: ValidationInfo) -> Optional[date]:
        return _check_from_before_to(v, info)


class ExperienceResponse(BaseModel):
    """Schema for an experience entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    title: str
    company: str
    location: Optional[str] = None
    from_date: date = Field(alias="from")
    to_date: Optional[date] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: ExperienceEntry) -> "ExperienceResponse":
        return cls(
            id=entry.id,
            title=entry.title,
            company=entry.company,
            location=entry.location,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
        )


class EducationResponse(BaseModel):
    """Schema for an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(alias="from")
    to_date: Optional[date] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: EducationEntry) -> "EducationResponse":
        return cls(
            id=entry.id,
            school=entry.school,
            degree=entry.degree,
            fieldofstudy=entry.fieldofstudy,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
        )


class ProfileUser(BaseModel):
    """The profile's owner, denormalized for display."""

    id: UUID
    name: Optional[str] = None


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "user": {"id": "456e4567-e89b-12d3-a456-426614174000", "name": "Ada"},
                "status": "Developer",
                "website": "https://example.com",
                "skills": ["Python", "SQL"],
                "social": {"github": "https://github.com/ada"},
                "experience": [],
                "education": [],
            }
        },
    )

    id: UUID
    user: ProfileUser
    status: str
    company: Optional[str] = None
    website: str = ""
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    skills: list[str]
    social: dict[str, str]
    profile_pic: Optional[str] = None
    experience: list[ExperienceResponse]
    education: list[EducationResponse]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            id=profile.id,
            user=ProfileUser(id=profile.user_id, name=profile.user_name),
            status=profile.status,
            company=profile.company,
            website=profile.website,
            location=profile.location,
            bio=profile.bio,
            githubusername=profile.githubusername,
            skills=profile.skills,
            social=profile.social,
            profile_pic=profile.profile_pic,
            experience=[ExperienceResponse.from_entry(e) for e in profile.experience],
            education=[EducationResponse.from_entry(e) for e in profile.education],
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )

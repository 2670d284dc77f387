"""Profile domain entity and its embedded entries."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any
from uuid import UUID, uuid4

from domain.entities.user import utcnow

SOCIAL_PLATFORMS = ("youtube", "twitter", "facebook", "linkedin", "instagram", "github")


@dataclass
class ExperienceEntry:
    """A single job held by the profile owner."""

    title: str
    company: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    location: str | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None

    def to_document(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "from": self.from_date.isoformat(),
            "to": self.to_date.isoformat() if self.to_date else None,
            "current": self.current,
            "description": self.description,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "ExperienceEntry":
        return cls(
            id=UUID(doc["id"]),
            title=doc["title"],
            company=doc["company"],
            location=doc.get("location"),
            from_date=date.fromisoformat(doc["from"]),
            to_date=date.fromisoformat(doc["to"]) if doc.get("to") else None,
            current=doc.get("current", False),
            description=doc.get("description"),
        )


@dataclass
class EducationEntry:
    """A single school attended by the profile owner."""

    school: str
    degree: str
    fieldofstudy: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    to_date: date | None = None
    current: bool = False
    description: str | None = None

    def to_document(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "school": self.school,
            "degree": self.degree,
            "fieldofstudy": self.fieldofstudy,
            "from": self.from_date.isoformat(),
            "to": self.to_date.isoformat() if self.to_date else None,
            "current": self.current,
            "description": self.description,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "EducationEntry":
        return cls(
            id=UUID(doc["id"]),
            school=doc["school"],
            degree=doc["degree"],
            fieldofstudy=doc["fieldofstudy"],
            from_date=date.fromisoformat(doc["from"]),
            to_date=date.fromisoformat(doc["to"]) if doc.get("to") else None,
            current=doc.get("current", False),
            description=doc.get("description"),
        )


@dataclass
class Profile:
    """Domain entity for a user's career profile (one per user)."""

    user_id: UUID
    status: str
    skills: list[str] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)
    company: str | None = None
    website: str = ""
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    social: dict[str, str] = field(default_factory=dict)
    profile_pic: str | None = None
    experience: list[ExperienceEntry] = field(default_factory=list)
    education: list[EducationEntry] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    # Display name of the owning user, filled in on reads
    user_name: str | None = None

    def add_experience(self, entry: ExperienceEntry) -> None:
        """Most recent entry goes first."""
        self.experience.insert(0, entry)
        self.updated_at = utcnow()

    def remove_experience(self, entry_id: UUID) -> None:
        self.experience = [e for e in self.experience if e.id != entry_id]
        self.updated_at = utcnow()

    def add_education(self, entry: EducationEntry) -> None:
        """Most recent entry goes first."""
        self.education.insert(0, entry)
        self.updated_at = utcnow()

    def remove_education(self, entry_id: UUID) -> None:
        self.education = [e for e in self.education if e.id != entry_id]
        self.updated_at = utcnow()

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

"""Post domain entity with embedded likes and comments."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from domain.entities.user import utcnow


@dataclass(frozen=True, slots=True)
class Like:
    """Read-only value object: one user's like on a post."""

    user_id: UUID

    def to_document(self) -> dict[str, Any]:
        return {"user": str(self.user_id)}

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Like":
        return cls(user_id=UUID(doc["user"]))


@dataclass
class Comment:
    """A comment left on a post; ``name`` is a snapshot of the commenter."""

    user_id: UUID
    name: str
    text: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utcnow)

    def to_document(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "user": str(self.user_id),
            "name": self.name,
            "text": self.text,
            "date": self.created_at.isoformat(),
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Comment":
        return cls(
            id=UUID(doc["id"]),
            user_id=UUID(doc["user"]),
            name=doc["name"],
            text=doc["text"],
            created_at=datetime.fromisoformat(doc["date"]),
        )


@dataclass
class Post:
    """Domain entity for a Post.

    ``name`` is the author's name at creation time and is not kept in sync.
    """

    user_id: UUID
    name: str
    text: str
    id: UUID = field(default_factory=uuid4)
    pic: str | None = None
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)

    def is_authored_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id

    def is_liked_by(self, user_id: UUID) -> bool:
        return any(like.user_id == user_id for like in self.likes)

    def add_like(self, user_id: UUID) -> None:
        """Prepend a like. Callers check ``is_liked_by`` first."""
        self.likes.insert(0, Like(user_id=user_id))

    def remove_like(self, user_id: UUID) -> None:
        """Remove the single like left by ``user_id``."""
        for index, like in enumerate(self.likes):
            if like.user_id == user_id:
                del self.likes[index]
                return

    def add_comment(self, comment: Comment) -> None:
        self.comments.insert(0, comment)

    def get_comment(self, comment_id: UUID) -> Comment | None:
        return next((c for c in self.comments if c.id == comment_id), None)

    def remove_comment(self, comment_id: UUID) -> None:
        self.comments = [c for c in self.comments if c.id != comment_id]

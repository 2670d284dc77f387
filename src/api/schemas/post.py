"""Pydantic schemas for Post API."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from api.schemas.common import required
from domain.entities.post import Comment, Like, Post


class CommentCreate(BaseModel):
    """Schema for adding a comment."""

    text: str = Field("", validate_default=True)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return required(v, "Text is required")


class LikeResponse(BaseModel):
    """Schema for a like."""

    user: UUID

    @classmethod
    def from_entity(cls, like: Like) -> "LikeResponse":
        return cls(user=like.user_id)


class CommentResponse(BaseModel):
    """Schema for a comment."""

    id: UUID
    user: UUID
    name: str
    text: str
    date: datetime

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            user=comment.user_id,
            name=comment.name,
            text=comment.text,
            date=comment.created_at,
        )


class PostResponse(BaseModel):
    """Schema for Post response."""

    id: UUID
    user: UUID
    name: str
    text: str
    pic: Optional[str] = None
    likes: list[LikeResponse]
    comments: list[CommentResponse]
    date: datetime

    @classmethod
    def from_entity(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            user=post.user_id,
            name=post.name,
            text=post.text,
            pic=post.pic,
            likes=[LikeResponse.from_entity(like) for like in post.likes],
            comments=[CommentResponse.from_entity(c) for c in post.comments],
            date=post.created_at,
        )

"""Post service layer with business logic."""

from typing import Callable, List, Optional
from uuid import UUID

import structlog

from core.exceptions import (
    CommentNotFoundError,
    NotAuthorizedError,
    PostAlreadyLikedError,
    PostNotFoundError,
    PostNotLikedError,
    UserNotFoundError,
)
from domain.entities.post import Comment, Like, Post
from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.storage.upload_sink import UploadSink

logger = structlog.get_logger()


class PostService:
    """Service layer for Post business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        upload_sink: Optional[UploadSink] = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._upload_sink = upload_sink

    async def create(
        self,
        user_id: UUID,
        text: str,
        image: Optional[bytes] = None,
        image_filename: Optional[str] = None,
    ) -> Post:
        """Create a post, snapshotting the author's current name."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))

            pic = None
            if image is not None:
                if self._upload_sink is None:
                    raise RuntimeError("PostService has no upload sink configured")
                pic = await self._upload_sink.save_post_image(user_id, image_filename, image)

            post = Post(user_id=user_id, name=user.name, text=text, pic=pic)
            created = await uow.posts.create(post)
            await uow.commit()

        logger.info("post_created", post_id=str(created.id), user_id=str(user_id))
        return created

    async def get_all(self) -> List[Post]:
        """Get all posts, newest first."""
        async with self._uow_factory() as uow:
            return await uow.posts.get_all()  # type: ignore[no-any-return]

    async def get_by_id(self, post_id: UUID) -> Post:
        async with self._uow_factory() as uow:
            return await self._require_post(uow, post_id)

    async def delete(self, post_id: UUID, user_id: UUID) -> None:
        """Delete a post. Only its author may do so."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            if not post.is_authored_by(user_id):
                raise NotAuthorizedError()

            await uow.posts.delete(post_id)
            await uow.commit()

        logger.info("post_deleted", post_id=str(post_id), user_id=str(user_id))

    async def like(self, post_id: UUID, user_id: UUID) -> List[Like]:
        """Like a post once; a second like is rejected, not ignored."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            if post.is_liked_by(user_id):
                raise PostAlreadyLikedError(str(post_id))

            post.add_like(user_id)
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.likes

    async def unlike(self, post_id: UUID, user_id: UUID) -> List[Like]:
        """Remove the user's like; rejected if there is none."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            if not post.is_liked_by(user_id):
                raise PostNotLikedError(str(post_id))

            post.remove_like(user_id)
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.likes

    async def add_comment(self, post_id: UUID, user_id: UUID, text: str) -> List[Comment]:
        """Any authenticated user may comment on any post."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))
            post = await self._require_post(uow, post_id)

            post.add_comment(Comment(user_id=user_id, name=user.name, text=text))
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.comments

    async def delete_comment(
        self, post_id: UUID, comment_id: UUID, user_id: UUID
    ) -> List[Comment]:
        """Delete a comment. Only the commenter may do so, not the post author."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)

            comment = post.get_comment(comment_id)
            if not comment:
                raise CommentNotFoundError(str(comment_id))
            if comment.user_id != user_id:
                raise NotAuthorizedError()

            post.remove_comment(comment_id)
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.comments

    async def _require_post(self, uow: IUnitOfWork, post_id: UUID) -> Post:
        post = await uow.posts.get(post_id)
        if not post:
            raise PostNotFoundError(str(post_id))
        return post

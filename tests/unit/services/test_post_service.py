"""Unit tests for Post service layer."""

from pathlib import Path
from uuid import UUID, uuid4

import pytest

from core.exceptions import (
    CommentNotFoundError,
    NotAuthorizedError,
    PostAlreadyLikedError,
    PostNotFoundError,
    PostNotLikedError,
    UserNotFoundError,
)
from domain.entities.post import Comment, Like, Post
from domain.entities.user import User
from domain.services.post_service import PostService
from infrastructure.storage.upload_sink import UploadSink

# FakeUnitOfWork is provided by the shared conftest at tests/unit/conftest.py.
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork, tmp_path: Path) -> PostService:
    """Create service with fake UoW; repository writes echo the entity back."""
    uow.posts.create.side_effect = lambda post: post
    uow.posts.update.side_effect = lambda post: post
    return PostService(lambda: uow, upload_sink=UploadSink(tmp_path))


@pytest.fixture
def author(user_id: UUID) -> User:
    return User(id=user_id, name="Ada", email="ada@example.com", password_hash="x")


@pytest.fixture
def sample_post(user_id: UUID) -> Post:
    return Post(user_id=user_id, name="Ada", text="Hello world")


class TestCreate:
    @pytest.mark.asyncio
    async def test_snapshots_author_name(
        self, service: PostService, uow: FakeUnitOfWork, author: User
    ) -> None:
        uow.users.get.return_value = author

        post = await service.create(author.id, "Hello")

        assert post.name == "Ada"
        assert post.user_id == author.id
        assert post.pic is None
        assert uow.committed

    @pytest.mark.asyncio
    async def test_stores_image(
        self, service: PostService, uow: FakeUnitOfWork, author: User, tmp_path: Path
    ) -> None:
        uow.users.get.return_value = author

        post = await service.create(author.id, "Hello", image=b"gif", image_filename="a.gif")

        assert post.pic is not None
        stored = Path(post.pic)
        assert stored.parent == tmp_path / "Posts"
        assert stored.suffix == ".gif"
        assert stored.read_bytes() == b"gif"

    @pytest.mark.asyncio
    async def test_missing_author(self, service: PostService, uow: FakeUnitOfWork) -> None:
        uow.users.get.return_value = None

        with pytest.raises(UserNotFoundError):
            await service.create(uuid4(), "Hello")

        uow.posts.create.assert_not_called()


class TestDelete:
    @pytest.mark.asyncio
    async def test_author_can_delete(
        self, service: PostService, uow: FakeUnitOfWork, sample_post: Post, user_id: UUID
    ) -> None:
        uow.posts.get.return_value = sample_post

        await service.delete(sample_post.id, user_id)

        uow.posts.delete.assert_awaited_once_with(sample_post.id)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_non_author_rejected(
        self,
        service: PostService,
        uow: FakeUnitOfWork,
        sample_post: Post,
        other_user_id: UUID,
    ) -> None:
        uow.posts.get.return_value = sample_post

        with pytest.raises(NotAuthorizedError) as exc_info:
            await service.delete(sample_post.id, other_user_id)

        assert exc_info.value.status_code == 401
        uow.posts.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_post_checked_before_ownership(
        self, service: PostService, uow: FakeUnitOfWork, other_user_id: UUID
    ) -> None:
        uow.posts.get.return_value = None

        with pytest.raises(PostNotFoundError):
            await service.delete(uuid4(), other_user_id)


class TestLikes:
    @pytest.mark.asyncio
    async def test_like_then_duplicate_like(
        self,
        service: PostService,
        uow: FakeUnitOfWork,
        sample_post: Post,
        other_user_id: UUID,
    ) -> None:
        uow.posts.get.return_value = sample_post

        likes = await service.like(sample_post.id, other_user_id)
        assert likes == [Like(user_id=other_user_id)]

        with pytest.raises(PostAlreadyLikedError):
            await service.like(sample_post.id, other_user_id)
        assert sample_post.likes == [Like(user_id=other_user_id)]

    @pytest.mark.asyncio
    async def test_unlike_restores_previous_likes(
        self,
        service: PostService,
        uow: FakeUnitOfWork,
        sample_post: Post,
        user_id: UUID,
        other_user_id: UUID,
    ) -> None:
        sample_post.likes = [Like(user_id=user_id)]
        uow.posts.get.return_value = sample_post

        await service.like(sample_post.id, other_user_id)
        likes = await service.unlike(sample_post.id, other_user_id)

        assert likes == [Like(user_id=user_id)]

    @pytest.mark.asyncio
    async def test_unlike_without_like(
        self,
        service: PostService,
        uow: FakeUnitOfWork,
        sample_post: Post,
        other_user_id: UUID,
    ) -> None:
        uow.posts.get.return_value = sample_post

        with pytest.raises(PostNotLikedError):
            await service.unlike(sample_post.id, other_user_id)

    @pytest.mark.asyncio
    async def test_like_missing_post(self, service: PostService, uow: FakeUnitOfWork) -> None:
        uow.posts.get.return_value = None

        with pytest.raises(PostNotFoundError):
            await service.like(uuid4(), uuid4())


class TestComments:
    @pytest.mark.asyncio
    async def test_add_comment_prepends_with_commenter_name(
        self,
        service: PostService,
        uow: FakeUnitOfWork,
        sample_post: Post,
        other_user_id: UUID,
    ) -> None:
        older = Comment(user_id=uuid4(), name="Cy", text="first")
        sample_post.comments = [older]
        uow.posts.get.return_value = sample_post
        uow.users.get.return_value = User(
            id=other_user_id, name="Bob", email="bob@example.com", password_hash="x"
        )

        comments = await service.add_comment(sample_post.id, other_user_id, "Nice")

        assert [c.text for c in comments] == ["Nice", "first"]
        assert comments[0].name == "Bob"
        assert comments[0].user_id == other_user_id

    @pytest.mark.asyncio
    async def test_only_commenter_may_delete(
        self,
        service: PostService,
        uow: FakeUnitOfWork,
        sample_post: Post,
        user_id: UUID,
        other_user_id: UUID,
    ) -> None:
        comment = Comment(user_id=other_user_id, name="Bob", text="Nice")
        sample_post.comments = [comment]
        uow.posts.get.return_value = sample_post

        # The post's author is not the commenter
        with pytest.raises(NotAuthorizedError):
            await service.delete_comment(sample_post.id, comment.id, user_id)
        assert sample_post.comments == [comment]

        comments = await service.delete_comment(sample_post.id, comment.id, other_user_id)
        assert comments == []

    @pytest.mark.asyncio
    async def test_delete_missing_comment(
        self, service: PostService, uow: FakeUnitOfWork, sample_post: Post, user_id: UUID
    ) -> None:
        uow.posts.get.return_value = sample_post

        with pytest.raises(CommentNotFoundError):
            await service.delete_comment(sample_post.id, uuid4(), user_id)

"""Dependency injection factories for the API."""

from functools import lru_cache
from typing import Callable

from api.dependencies.auth import get_auth_provider
from core.config import settings
from domain.services.auth_service import AuthService
from domain.services.post_service import PostService
from domain.services.profile_service import ProfileService
from infrastructure.auth.password import PasswordHasher
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.storage.upload_sink import UploadSink


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get bcrypt hasher configured with the cost factor from settings."""
    return PasswordHasher(rounds=settings.bcrypt_rounds)


@lru_cache
def get_upload_sink() -> UploadSink:
    """Get the sink writing uploads under the public directory."""
    return UploadSink(
        settings.public_path,
        profile_image_dir=settings.profile_image_dir,
        post_image_dir=settings.post_image_dir,
    )


@lru_cache
def get_auth_service() -> AuthService:
    """Get Auth service instance."""
    return AuthService(
        get_uow_factory(),
        auth_provider=get_auth_provider(),
        password_hasher=get_password_hasher(),
    )


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_uow_factory(), upload_sink=get_upload_sink())


@lru_cache
def get_post_service() -> PostService:
    """Get Post service instance."""
    return PostService(get_uow_factory(), upload_sink=get_upload_sink())

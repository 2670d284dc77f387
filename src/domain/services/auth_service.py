"""Credential flows: registration, login and account lookup."""

from typing import Callable
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    UserAlreadyExistsError,
    UserNotFoundError,
    UserNotRegisteredError,
    WrongPasswordError,
)
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.auth.password import PasswordHasher
from infrastructure.auth.provider import IAuthProvider
from infrastructure.database.errors import is_unique_violation

logger = structlog.get_logger()


class AuthService:
    """Service layer for account credentials.

    Both flows return only a token, never the stored user.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        auth_provider: IAuthProvider,
        password_hasher: PasswordHasher,
    ) -> None:
        self._uow_factory = uow_factory
        self._auth_provider = auth_provider
        self._password_hasher = password_hasher

    async def register(self, name: str, email: str, password: str) -> str:
        """Create an account and return a token for it."""
        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(email):
                raise UserAlreadyExistsError(email)

            user = User(
                name=name,
                email=email,
                password_hash=await self._password_hasher.hash(password),
            )
            try:
                created = await uow.users.create(user)
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                # A concurrent registration claimed the email after the check
                if is_unique_violation(exc):
                    raise UserAlreadyExistsError(email) from exc
                raise

        logger.info("user_registered", user_id=str(created.id))
        return self._auth_provider.create_token(created.id)

    async def login(self, email: str, password: str) -> str:
        """Check credentials and return a fresh token."""
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email)

        if not user:
            raise UserNotRegisteredError()

        if not await self._password_hasher.verify(password, user.password_hash):
            logger.info("login_rejected", user_id=str(user.id))
            raise WrongPasswordError()

        logger.info("user_logged_in", user_id=str(user.id))
        return self._auth_provider.create_token(user.id)

    async def get_user(self, user_id: UUID) -> User:
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))
            return user

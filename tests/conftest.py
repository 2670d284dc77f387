"""Pytest configuration and fixtures."""

import os
import sys
import tempfile
from collections.abc import AsyncGenerator
from pathlib import Path

# Settings are read at import time, so configure them before the app loads
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["PUBLIC_DIR"] = tempfile.mkdtemp(prefix="altinity-public-")

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.password import PasswordHasher
from infrastructure.database.models import Base
from infrastructure.storage.upload_sink import UploadSink

TEST_SECRET = "test-secret-key"


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a file-backed SQLite engine with all tables, one per test.

    A file rather than ``:memory:`` so that concurrent units of work get
    their own connections.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(secret_key=TEST_SECRET, algorithm="HS256")


@pytest.fixture
def upload_sink(tmp_path: Path) -> UploadSink:
    """Uploads land in a per-test public directory."""
    return UploadSink(tmp_path / "public")


@pytest.fixture
def app(
    session_factory: async_sessionmaker[AsyncSession],
    auth_provider: JWTAuthProvider,
    upload_sink: UploadSink,
) -> FastAPI:
    """
    Create the application with database, auth and storage overrides.

    This app:
    - Uses a per-test SQLite database
    - Signs and verifies tokens with the test secret
    - Hashes passwords at the minimum bcrypt cost
    - Writes uploads under the test's temporary directory
    """
    from api.dependencies.auth import get_auth_provider
    from api.dependencies.services import (
        get_auth_service,
        get_post_service,
        get_profile_service,
    )
    from domain.services.auth_service import AuthService
    from domain.services.post_service import PostService
    from domain.services.profile_service import ProfileService
    from infrastructure.database.session import get_async_session
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from main import create_app

    app = create_app()

    # Create a UoW factory that uses the test database
    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    auth_service = AuthService(
        test_uow_factory,
        auth_provider=auth_provider,
        password_hasher=PasswordHasher(rounds=4),
    )
    profile_service = ProfileService(test_uow_factory, upload_sink=upload_sink)
    post_service = PostService(test_uow_factory, upload_sink=upload_sink)

    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_profile_service] = lambda: profile_service
    app.dependency_overrides[get_post_service] = lambda: post_service
    app.dependency_overrides[get_async_session] = override_get_async_session

    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


async def register(client: AsyncClient, name: str, email: str, password: str = "secret123") -> str:
    """Register an account through the API and return its token."""
    response = await client.post(
        "/api/users/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    return str(response.json()["token"])


@pytest.fixture
async def auth_headers(client: AsyncClient) -> dict[str, str]:
    """Token header for a freshly registered user."""
    token = await register(client, "Test User", "test@example.com")
    return {"x-auth-token": token}


@pytest.fixture
async def other_headers(client: AsyncClient) -> dict[str, str]:
    """Token header for a second registered user."""
    token = await register(client, "Other User", "other@example.com")
    return {"x-auth-token": token}

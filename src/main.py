"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from api import router as api_router
from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.routes.health import router as health_router
from core.config import settings
from core.logging import setup_logging

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup/shutdown tasks."""
    for subdir in (settings.profile_image_dir, settings.post_image_dir):
        (settings.public_path / subdir).mkdir(parents=True, exist_ok=True)
    logger.info("server_started", port=settings.port, public_dir=settings.public_dir)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Developer Social Network\n\n"
            "Altinity provides a RESTful API for developer profiles, posts, "
            "comments and likes.\n\n"
            "### Features\n"
            "- **Accounts**: Register and log in with email and password\n"
            "- **Profiles**: Status, skills, social links, experience and education\n"
            "- **Posts**: Text posts with optional images, likes and comments\n\n"
            "### Authentication\n"
            "All endpoints except registration, login and `/health` require the "
            "token returned by registration or login:\n"
            f"```\n{settings.auth_header_name}: <your_token>\n```\n\n"
            "`Authorization: Bearer <your_token>` is accepted as well."
        ),
        version="1.0.0",
        debug=settings.debug,
        contact={
            "name": "Altinity Support",
        },
        license_info={
            "name": "MIT",
        },
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "users",
                "description": "Registration, login and account lookup",
            },
            {
                "name": "profiles",
                "description": "Profile management operations",
            },
            {
                "name": "posts",
                "description": "Posts, likes and comments",
            },
        ],
    )

    # Tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(api_router, prefix="/api")

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def index() -> str:
        return "Hello from Altinity Server"

    # Uploaded images and other public assets; mounted last so API routes win
    app.mount(
        "/",
        StaticFiles(directory=settings.public_path, check_dir=False),
        name="public",
    )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )

"""API router configuration."""

from fastapi import APIRouter

from api.routes.posts import router as posts_router
from api.routes.profiles import router as profiles_router
from api.routes.users import router as users_router

router = APIRouter()
router.include_router(users_router)
router.include_router(profiles_router)
router.include_router(posts_router)

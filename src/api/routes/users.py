"""User account API routes."""

from fastapi import APIRouter, Depends, status

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_auth_service
from api.schemas.common import ErrorResponse
from api.schemas.user import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from domain.services.auth_service import AuthService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Register an account",
    responses={
        200: {"description": "Account created, token issued"},
        400: {
            "model": ErrorResponse,
            "description": "Validation error or email already registered",
        },
    },
)
async def register(
    body: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """Create an account and return a token for it."""
    token = await service.register(name=body.name, email=body.email, password=body.password)
    return TokenResponse(token=token)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in",
    responses={
        200: {"description": "Credentials accepted, token issued"},
        400: {
            "model": ErrorResponse,
            "description": "Validation error, unknown email or wrong password",
        },
    },
)
async def login(
    body: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    token = await service.login(email=body.email, password=body.password or "")
    return TokenResponse(token=token)


@router.get(
    "",
    response_model=UserResponse,
    summary="Get the authenticated user",
    responses={
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        404: {"model": ErrorResponse, "description": "Account no longer exists"},
    },
)
async def get_me(
    user: CurrentUser,
    service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """Return the caller's account without the password hash."""
    account = await service.get_user(user.id)
    return UserResponse.model_validate(account)

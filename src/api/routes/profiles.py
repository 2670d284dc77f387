"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_profile_service
from api.schemas.common import ErrorResponse, MessageResponse
from api.schemas.profile import (
    EducationCreate,
    ExperienceCreate,
    ProfileResponse,
    ProfileUpsert,
)
from core.exceptions import NoFileUploadedError
from domain.entities.profile import SOCIAL_PLATFORMS
from domain.services.profile_service import DETAIL_FIELDS, ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post(
    "",
    response_model=ProfileResponse,
    summary="Create or update my profile",
    responses={
        200: {"description": "Profile stored"},
        400: {"model": ErrorResponse, "description": "Validation error"},
    },
)
async def upsert_profile(
    body: ProfileUpsert,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """
    Create the caller's profile or update it in place.

    Website and social links are stored in canonical `https://` form. Fields
    left out of the request keep their stored value; experience, education
    and the picture are never touched here.
    """
    submitted = body.model_dump(exclude_none=True)
    profile = await service.upsert(
        user.id,
        status=body.status,
        skills=body.skills,
        website=body.website,
        social={platform: submitted.get(platform) for platform in SOCIAL_PLATFORMS},
        **{field: submitted[field] for field in DETAIL_FIELDS if field in submitted},
    )
    return ProfileResponse.from_entity(profile)


@router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Get my profile",
    responses={404: {"model": ErrorResponse, "description": "No profile for this user"}},
)
async def get_my_profile(
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.get_for_user(user.id)
    return ProfileResponse.from_entity(profile)


@router.get(
    "",
    response_model=list[ProfileResponse],
    summary="List all profiles",
)
async def list_profiles(
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> list[ProfileResponse]:
    profiles = await service.get_all()
    return [ProfileResponse.from_entity(p) for p in profiles]


@router.get(
    "/user/{user_id}",
    response_model=ProfileResponse,
    summary="Get a user's profile",
    responses={404: {"model": ErrorResponse, "description": "No profile for this user"}},
)
async def get_user_profile(
    user_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.get_for_user(user_id)
    return ProfileResponse.from_entity(profile)


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete my account",
    responses={500: {"model": ErrorResponse, "description": "One of the deletions failed"}},
)
async def delete_account(
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """
    Delete the caller's posts, profile and account.

    Comments and likes the caller left on other users' posts stay in place.
    """
    await service.delete_account(user.id)
    return MessageResponse(message="User and profile deleted successfully")


@router.post(
    "/upload",
    response_model=ProfileResponse,
    summary="Upload my profile picture",
    responses={
        400: {"model": ErrorResponse, "description": "No file uploaded"},
        404: {"model": ErrorResponse, "description": "No profile for this user"},
    },
)
async def upload_picture(
    user: CurrentUser,
    file: UploadFile | None = File(None),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Store the multipart `file` field as the caller's profile picture."""
    if file is None or not file.filename:
        raise NoFileUploadedError("file")

    content = await file.read()
    profile = await service.set_picture(user.id, content)
    return ProfileResponse.from_entity(profile)


@router.put(
    "/experience",
    response_model=ProfileResponse,
    summary="Add an experience entry",
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        404: {"model": ErrorResponse, "description": "No profile for this user"},
    },
)
async def add_experience(
    body: ExperienceCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Prepend an experience entry; the newest entry is listed first."""
    profile = await service.add_experience(
        user.id,
        title=body.title,
        company=body.company,
        from_date=body.from_date,  # type: ignore[arg-type]
        location=body.location,
        to_date=body.to_date,
        current=body.current,
        description=body.description,
    )
    return ProfileResponse.from_entity(profile)


@router.delete(
    "/experience/{exp_id}",
    response_model=ProfileResponse,
    summary="Remove an experience entry",
    responses={404: {"model": ErrorResponse, "description": "No profile for this user"}},
)
async def remove_experience(
    exp_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.remove_experience(user.id, exp_id)
    return ProfileResponse.from_entity(profile)


@router.put(
    "/education",
    response_model=ProfileResponse,
    summary="Add an education entry",
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        404: {"model": ErrorResponse, "description": "No profile for this user"},
    },
)
async def add_education(
    body: EducationCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Prepend an education entry; the newest entry is listed first."""
    profile = await service.add_education(
        user.id,
        school=body.school,
        degree=body.degree,
        fieldofstudy=body.fieldofstudy,
        from_date=body.from_date,  # type: ignore[arg-type]
        to_date=body.to_date,
        current=body.current,
        description=body.description,
    )
    return ProfileResponse.from_entity(profile)


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileResponse,
    summary="Remove an education entry",
    responses={404: {"model": ErrorResponse, "description": "No profile for this user"}},
)
async def remove_education(
    edu_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.remove_education(user.id, edu_id)
    return ProfileResponse.from_entity(profile)

"""Post API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_post_service
from api.schemas.common import ErrorResponse, MessageResponse
from api.schemas.post import CommentCreate, CommentResponse, LikeResponse, PostResponse
from core.exceptions import ValidationError
from domain.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_200_OK,
    summary="Create a post",
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        404: {"model": ErrorResponse, "description": "Author account no longer exists"},
    },
)
async def create_post(
    user: CurrentUser,
    text: str | None = Form(None),
    image: UploadFile | None = File(None),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """
    Create a post from a multipart form with `text` and an optional `image`.

    The text is checked before the image is written to disk.
    """
    if text is None or not text.strip():
        raise ValidationError([{"field": "text", "msg": "Text is required"}])

    content = None
    filename = None
    if image is not None and image.filename:
        content = await image.read()
        filename = image.filename

    post = await service.create(user.id, text.strip(), image=content, image_filename=filename)
    return PostResponse.from_entity(post)


@router.get(
    "",
    response_model=list[PostResponse],
    summary="List all posts",
    responses={200: {"description": "Posts, newest first"}},
)
async def list_posts(
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    posts = await service.get_all()
    return [PostResponse.from_entity(p) for p in posts]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get a post",
    responses={404: {"model": ErrorResponse, "description": "Post not found"}},
)
async def get_post(
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = await service.get_by_id(post_id)
    return PostResponse.from_entity(post)


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    summary="Delete a post",
    responses={
        401: {"model": ErrorResponse, "description": "Caller is not the author"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
async def delete_post(
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    await service.delete(post_id, user.id)
    return MessageResponse(message="Post removed")


@router.put(
    "/like/{post_id}",
    response_model=list[LikeResponse],
    summary="Like a post",
    responses={
        400: {"model": ErrorResponse, "description": "Post already liked"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
async def like_post(
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[LikeResponse]:
    likes = await service.like(post_id, user.id)
    return [LikeResponse.from_entity(like) for like in likes]


@router.put(
    "/unlike/{post_id}",
    response_model=list[LikeResponse],
    summary="Remove my like from a post",
    responses={
        400: {"model": ErrorResponse, "description": "Post has not yet been liked"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
async def unlike_post(
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[LikeResponse]:
    likes = await service.unlike(post_id, user.id)
    return [LikeResponse.from_entity(like) for like in likes]


@router.post(
    "/comment/{post_id}",
    response_model=list[CommentResponse],
    summary="Comment on a post",
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
async def add_comment(
    post_id: UUID,
    body: CommentCreate,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[CommentResponse]:
    comments = await service.add_comment(post_id, user.id, body.text)
    return [CommentResponse.from_entity(c) for c in comments]


@router.delete(
    "/comment/{post_id}/{comment_id}",
    response_model=list[CommentResponse],
    summary="Delete a comment",
    responses={
        401: {"model": ErrorResponse, "description": "Caller did not write the comment"},
        404: {"model": ErrorResponse, "description": "Post or comment not found"},
    },
)
async def delete_comment(
    post_id: UUID,
    comment_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[CommentResponse]:
    """Only the commenter may delete a comment, not the post's author."""
    comments = await service.delete_comment(post_id, comment_id, user.id)
    return [CommentResponse.from_entity(c) for c in comments]

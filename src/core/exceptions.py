"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    POST_NOT_FOUND = "POST_NOT_FOUND"
    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NO_FILE_UPLOADED = "NO_FILE_UPLOADED"

    # Credential errors (400)
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"
    USER_NOT_REGISTERED = "USER_NOT_REGISTERED"
    WRONG_PASSWORD = "WRONG_PASSWORD"

    # Engagement conflicts (400)
    POST_ALREADY_LIKED = "POST_ALREADY_LIKED"
    POST_NOT_LIKED = "POST_NOT_LIKED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    FILE_STORAGE_ERROR = "FILE_STORAGE_ERROR"


class AppException(Exception):
    """Base application exception.

    ``errors`` is the ordered list of ``{"field", "msg"}`` pairs rendered to
    the client; it defaults to a single entry holding ``message``.
    """

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        self.errors = errors if errors is not None else [{"field": None, "msg": message}]
        super().__init__(self.message)


class ValidationError(AppException):
    """One or more request fields failed validation."""

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="Request validation failed",
            status_code=400,
            errors=errors,
        )


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "No token, authorization denied",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class NotAuthorizedError(AppException):
    """Authenticated user does not own the resource being changed."""

    def __init__(self, message: str = "User not authorized") -> None:
        super().__init__(
            error_code=ErrorCode.NOT_AUTHORIZED,
            message=message,
            status_code=401,
        )


class UserAlreadyExistsError(AppException):
    """An account with this email already exists."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_ALREADY_EXISTS,
            message="User already exists",
            status_code=400,
            details={"email": email},
        )


class UserNotRegisteredError(AppException):
    """No account matches the login email."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_REGISTERED,
            message="User not registered. Please sign up first.",
            status_code=400,
        )


class WrongPasswordError(AppException):
    """Password does not match the stored hash."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.WRONG_PASSWORD,
            message="Wrong password",
            status_code=400,
        )


class UserNotFoundError(AppException):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message="There is no profile for this user",
            status_code=404,
            details={"user_id": user_id},
        )


class PostNotFoundError(AppException):
    """Post not found."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.POST_NOT_FOUND,
            message="Post not found",
            status_code=404,
            details={"post_id": post_id},
        )


class CommentNotFoundError(AppException):
    """Comment not found."""

    def __init__(self, comment_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.COMMENT_NOT_FOUND,
            message="Comment not found",
            status_code=404,
            details={"comment_id": comment_id},
        )


class PostAlreadyLikedError(AppException):
    """User already liked this post."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.POST_ALREADY_LIKED,
            message="Post already liked",
            status_code=400,
            details={"post_id": post_id},
        )


class PostNotLikedError(AppException):
    """User has not liked this post."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.POST_NOT_LIKED,
            message="Post has not yet been liked",
            status_code=400,
            details={"post_id": post_id},
        )


class NoFileUploadedError(AppException):
    """Multipart request carried no file."""

    def __init__(self, field: str = "file") -> None:
        super().__init__(
            error_code=ErrorCode.NO_FILE_UPLOADED,
            message="No file uploaded",
            status_code=400,
            errors=[{"field": field, "msg": "No file uploaded"}],
        )


class FileStorageError(AppException):
    """Writing an uploaded file failed."""

    def __init__(self, message: str = "Failed to save uploaded file") -> None:
        super().__init__(
            error_code=ErrorCode.FILE_STORAGE_ERROR,
            message=message,
            status_code=500,
        )

"""Domain errors raised by the service layer.

Each error carries an :class:`ErrorCode` that fixes its numeric code, default
message and the HTTP status the transport layer answers with.
"""

from enum import Enum


class ErrorCode(Enum):
    UNCATEGORIZED = (9999, "Uncategorized error", 500)
    INVALID_PAYLOAD = (1001, "Invalid request payload", 400)
    INVALID_FILTER = (1002, "Invalid filter value", 400)
    INVALID_STATUS = (1003, "Invalid status", 400)
    UNAUTHENTICATED = (1004, "Unauthenticated", 401)
    FORBIDDEN = (1005, "You do not have permission", 403)
    INVALID_PASSWORD = (1006, "Old password is incorrect", 400)
    INVALID_CREDENTIALS = (1007, "Invalid username or password", 401)
    USER_EXISTED = (1101, "User already exists", 409)
    USER_NOT_EXISTED = (1102, "User does not exist", 404)
    ROLE_NOT_EXISTED = (1103, "Role does not exist", 404)
    PRODUCT_NOT_EXISTED = (1201, "Product does not exist", 404)
    BRAND_NOT_EXISTED = (1202, "Brand does not exist", 404)
    CATEGORY_NOT_EXISTED = (1203, "Category does not exist", 404)
    BRAND_EXISTED = (1204, "Brand already exists", 409)
    CATEGORY_EXISTED = (1205, "Category already exists", 409)
    REFERENCE_IN_USE = (1206, "Still referenced by products", 409)
    SLIDER_NOT_EXISTED = (1207, "Slider does not exist", 404)
    UPLOAD_FAILED = (1301, "Image upload failed", 502)
    REMOVE_FAILED = (1302, "Image removal failed", 502)

    def __init__(self, code: int, message: str, status_code: int) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code


class AppError(Exception):
    """Base class for errors surfaced unmodified to the transport layer."""

    default_code = ErrorCode.UNCATEGORIZED

    def __init__(self, error_code: ErrorCode | None = None, detail: str | None = None) -> None:
        self.error_code = error_code or self.default_code
        self.message = detail or self.error_code.message
        super().__init__(self.message)


class NotFoundError(AppError):
    """An identifier or name does not resolve."""


class ReferenceNotFoundError(NotFoundError):
    """A referenced brand or category name does not resolve."""


class RoleNotFoundError(NotFoundError):
    default_code = ErrorCode.ROLE_NOT_EXISTED


class AlreadyExistsError(AppError):
    """A unique constraint would be violated."""


class ReferenceInUseError(AppError):
    default_code = ErrorCode.REFERENCE_IN_USE


class ForbiddenError(AppError):
    default_code = ErrorCode.FORBIDDEN


class UnauthenticatedError(AppError):
    default_code = ErrorCode.UNAUTHENTICATED


class InvalidFilterError(AppError):
    default_code = ErrorCode.INVALID_FILTER


class InvalidPayloadError(AppError):
    default_code = ErrorCode.INVALID_PAYLOAD


class InvalidCredentialsError(AppError):
    default_code = ErrorCode.INVALID_PASSWORD


class UploadFailedError(AppError):
    default_code = ErrorCode.UPLOAD_FAILED


class RemoveFailedError(AppError):
    default_code = ErrorCode.REMOVE_FAILED

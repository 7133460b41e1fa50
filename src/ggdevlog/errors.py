"""Error taxonomy shared by services, adapters and the HTTP layer.

Every error here carries a user-facing message that never includes secret
material. The HTTP layer maps each class to a status code and the standard
``{success, message, data}`` envelope.
"""

from collections.abc import Iterable
from enum import Enum


class AuthErrorKind(Enum):
    """Reasons an admin request or login can be refused."""

    TOKEN_MISSING = ("Missing auth token", 401)
    TOKEN_INVALID = ("Invalid auth token", 401)
    TOKEN_EXPIRED = ("Expired auth token", 401)
    CREDENTIAL_MISMATCH = ("Login failed", 401)
    RATE_LIMITED = ("Too many login attempts", 429)

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code


class UploadErrorKind(Enum):
    BACKEND_UNAVAILABLE = "backend_unavailable"
    INVALID_FILE = "invalid_file"


class DeleteErrorKind(Enum):
    PARTIAL_FAILURE = "partial_failure"
    BACKEND_UNAVAILABLE = "backend_unavailable"


class AppError(Exception):
    """Base class for errors translated into response envelopes."""

    message = "Operation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class AuthError(AppError):
    """Raised when authentication or login throttling refuses a request."""

    def __init__(self, kind: AuthErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class UploadError(AppError):
    """Raised when an image cannot be stored."""

    message = "Image upload failed"

    def __init__(self, kind: UploadErrorKind, message: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class DeleteError(AppError):
    """Raised when one or more images could not be deleted."""

    message = "Image deletion failed"

    def __init__(
        self,
        kind: DeleteErrorKind,
        failed_names: Iterable[str] = (),
        message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.failed_names = list(failed_names)


class NotFoundError(AppError):
    """Raised when a requested record does not exist."""

    message = "Not found"


class StoreError(AppError):
    """Raised when the record store fails."""

    message = "Database error"

"""Exception handlers translating errors into response envelopes."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response

from ggdevlog.api.responses import fail
from ggdevlog.errors import (
    AuthError,
    AuthErrorKind,
    DeleteError,
    NotFoundError,
    StoreError,
    UploadError,
    UploadErrorKind,
)

logger = logging.getLogger(__name__)


async def auth_error_handler(request: Request, exc: AuthError) -> Response:
    logger.info(
        "Auth refused", extra={"kind": exc.kind.name, "path": request.url.path}
    )
    headers = None
    if exc.kind is AuthErrorKind.RATE_LIMITED:
        retry_after = getattr(request.state, "retry_after", None)
        if retry_after:
            headers = {"Retry-After": str(retry_after)}
    return fail(exc.message, exc.status_code, headers=headers)


async def not_found_handler(_: Request, exc: Exception) -> Response:
    return fail(str(exc), status.HTTP_404_NOT_FOUND)


async def upload_error_handler(_: Request, exc: UploadError) -> Response:
    if exc.kind is UploadErrorKind.INVALID_FILE:
        return fail(exc.message, status.HTTP_400_BAD_REQUEST)
    return fail(UploadError.message, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def delete_error_handler(_: Request, exc: DeleteError) -> Response:
    return fail(
        DeleteError.message,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        data={"failed": exc.failed_names},
    )


async def store_error_handler(request: Request, exc: Exception) -> Response:
    logger.error(
        "Store operation failed: %r",
        exc.__cause__ or exc,
        exc_info=exc,
        extra={"path": request.url.path},
    )
    return fail(StoreError.message, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def validation_error_handler(
    _: Request, exc: RequestValidationError
) -> Response:
    return fail(
        "Invalid request",
        status.HTTP_400_BAD_REQUEST,
        data={"errors": [error["msg"] for error in exc.errors()]},
    )


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    logger.exception("Unexpected error: %s", exc)
    return fail("Operation failed", status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope handlers on the application."""
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(UploadError, upload_error_handler)
    app.add_exception_handler(DeleteError, delete_error_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

"""Admin login, logout and access check endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, Response

from ggdevlog.api.deps import AUTH_COOKIE_NAME, client_key, require_admin
from ggdevlog.api.models import LoginRequest
from ggdevlog.api.responses import success
from ggdevlog.errors import AuthError, AuthErrorKind

if TYPE_CHECKING:
    from ggdevlog.containers import AppContainer

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/accessCheck", dependencies=[Depends(require_admin)])
async def access_check() -> dict[str, object]:
    """Succeed only for requests carrying a valid session cookie."""
    return success("Access granted")


@router.post("/login")
async def login(
    payload: LoginRequest, request: Request, response: Response
) -> dict[str, object]:
    """Exchange the admin password for a session cookie."""
    container: AppContainer = request.app.state.container
    key = client_key(request)
    try:
        token = container.auth_service.login(payload.pw, key)
    except AuthError as exc:
        if exc.kind is AuthErrorKind.RATE_LIMITED:
            request.state.retry_after = container.auth_service.throttle.retry_after(
                key
            )
        raise
    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=token,
        max_age=container.auth_service.session_ttl_seconds,
        httponly=True,
        secure=container.settings.cookie_secure,
        samesite="strict",
    )
    return success("Admin access granted")


@router.post("/logout")
async def logout(request: Request, response: Response) -> dict[str, object]:
    """Clear the session cookie; the token itself stays valid until expiry."""
    container: AppContainer = request.app.state.container
    response.delete_cookie(
        key=AUTH_COOKIE_NAME,
        httponly=True,
        secure=container.settings.cookie_secure,
        samesite="strict",
    )
    return success("Admin access released")

"""Shared request dependencies, including the admin access gate."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from fastapi import Depends, Request
from fastapi.security import APIKeyCookie

from ggdevlog.domain.auth import AdminClaims  # noqa: TC001

if TYPE_CHECKING:
    from ggdevlog.containers import AppContainer

AUTH_COOKIE_NAME = "auth"

auth_cookie_scheme = APIKeyCookie(name=AUTH_COOKIE_NAME, auto_error=False)


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


async def require_admin(
    request: Request,
    token: Annotated[str | None, Depends(auth_cookie_scheme)] = None,
) -> AdminClaims:
    """Allow the request only with a valid admin session cookie.

    Raises ``AuthError`` (translated to a 401 envelope) when the cookie is
    missing, tampered with or expired; otherwise the verified claims are
    stored on ``request.state.admin``.
    """
    container = get_container(request)
    claims = container.auth_service.authorize(token)
    request.state.admin = claims
    return claims


def client_key(request: Request) -> str:
    """Return the best-effort network identity of the caller."""
    return request.client.host if request.client else "unknown"

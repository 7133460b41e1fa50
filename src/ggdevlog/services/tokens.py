"""Signed admin session tokens."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from itsdangerous import BadData, URLSafeSerializer

from ggdevlog.domain.auth import ADMIN_ROLE, AdminClaims
from ggdevlog.errors import AuthError, AuthErrorKind

SESSION_TTL = timedelta(hours=6)
_SALT = "ggdevlog-admin-session"


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class SessionTokenService:
    """Issues and verifies signed, time-limited admin session tokens.

    Tokens are not stored anywhere: a token is valid while its signature
    checks out and its ``exp`` claim lies in the future.
    """

    secret: str
    ttl: timedelta = SESSION_TTL
    clock: Callable[[], datetime] = _utcnow
    _serializer: URLSafeSerializer = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.secret:
            raise ValueError("A session signing secret is required")
        self._serializer = URLSafeSerializer(self.secret, salt=_SALT)

    def issue(self) -> str:
        """Create a token for the admin identity."""
        issued_at = self.clock()
        expires_at = issued_at + self.ttl
        return self._serializer.dumps(
            {
                "role": ADMIN_ROLE,
                "iat": int(issued_at.timestamp()),
                "exp": int(expires_at.timestamp()),
            }
        )

    def verify(self, token: str | None) -> AdminClaims:
        """Return the token claims or raise an ``AuthError``."""
        if not token:
            raise AuthError(AuthErrorKind.TOKEN_MISSING)
        try:
            payload = self._serializer.loads(token)
        except BadData as exc:
            raise AuthError(AuthErrorKind.TOKEN_INVALID) from exc
        if not isinstance(payload, dict) or payload.get("role") != ADMIN_ROLE:
            raise AuthError(AuthErrorKind.TOKEN_INVALID)
        try:
            issued_at = datetime.fromtimestamp(int(payload["iat"]), tz=UTC)
            expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=UTC)
        except (KeyError, TypeError, ValueError) as exc:
            raise AuthError(AuthErrorKind.TOKEN_INVALID) from exc
        if self.clock() >= expires_at:
            raise AuthError(AuthErrorKind.TOKEN_EXPIRED)
        return AdminClaims(role=ADMIN_ROLE, issued_at=issued_at, expires_at=expires_at)

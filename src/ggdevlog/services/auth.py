"""Admin login and request authorization."""

import logging
from dataclasses import dataclass

from ggdevlog.domain.auth import AdminClaims
from ggdevlog.errors import AuthError, AuthErrorKind
from ggdevlog.services.credentials import CredentialVerifier
from ggdevlog.services.throttle import LoginThrottle
from ggdevlog.services.tokens import SessionTokenService

logger = logging.getLogger(__name__)


@dataclass
class AuthService:
    """Application service for the single admin identity."""

    credentials: CredentialVerifier
    tokens: SessionTokenService
    throttle: LoginThrottle

    @property
    def session_ttl_seconds(self) -> int:
        return int(self.tokens.ttl.total_seconds())

    def login(self, submitted_secret: str | None, client_key: str) -> str:
        """Check the secret and return a fresh session token."""
        if not self.throttle.attempt(client_key):
            logger.info("Login throttled", extra={"client": client_key})
            raise AuthError(AuthErrorKind.RATE_LIMITED)
        if not self.credentials.verify(submitted_secret):
            logger.info("Login rejected", extra={"client": client_key})
            raise AuthError(AuthErrorKind.CREDENTIAL_MISMATCH)
        return self.tokens.issue()

    def authorize(self, token: str | None) -> AdminClaims:
        """Return the claims of a valid session token."""
        return self.tokens.verify(token)

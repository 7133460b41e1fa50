"""Admin password verification."""

import logging
from dataclasses import dataclass

import bcrypt

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes; newer releases reject longer input.
BCRYPT_MAX_SECRET_BYTES = 72


@dataclass
class CredentialVerifier:
    """Checks a submitted secret against the configured bcrypt hash."""

    password_hash: str

    def verify(self, submitted_secret: str | None) -> bool:
        """Return true only when the secret matches the stored hash."""
        if not submitted_secret:
            return False
        secret = submitted_secret.encode("utf-8")
        if len(secret) > BCRYPT_MAX_SECRET_BYTES:
            logger.info(
                "Rejected login secret longer than %d bytes", BCRYPT_MAX_SECRET_BYTES
            )
            return False
        try:
            return bcrypt.checkpw(secret, self.password_hash.encode("utf-8"))
        except (ValueError, TypeError):
            logger.error("Admin password hash is malformed")
            return False

"""Domain models for admin authentication."""

from dataclasses import dataclass
from datetime import datetime

ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class AdminClaims:
    """Verified claims carried by an admin session token."""

    role: str
    issued_at: datetime
    expires_at: datetime

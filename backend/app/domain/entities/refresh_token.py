"""Domain entity for server-side refresh tokens."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class RefreshToken:
    """Opaque single-use token; deleted on rotation or logout."""

    token: str
    user_id: int
    expires_at: datetime
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(timezone.utc)
        expires_at = self.expires_at
        # SQLite hands back naive datetimes; they are stored as UTC.
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at <= now

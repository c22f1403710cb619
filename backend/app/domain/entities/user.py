"""Domain entities for platform users and their roles."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Role(str, Enum):
    """Platform roles. Every authorization decision is made against these."""

    ADMIN = "ADMIN"
    STORE_OWNER = "STORE_OWNER"
    USER = "USER"


@dataclass(frozen=True)
class UserIdentity:
    """Public identity of a user — safe to attach to any response."""

    id: int
    name: str
    email: str


@dataclass
class User:
    """A registered account. The password hash never leaves the application layer."""

    name: str
    email: str
    password_hash: str
    role: Role = Role.USER
    address: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def identity(self) -> UserIdentity:
        return UserIdentity(id=self.id, name=self.name, email=self.email)

    def change_password(self, password_hash: str) -> None:
        """Replace the stored hash and refresh the updated_at timestamp."""
        self.password_hash = password_hash
        self.updated_at = datetime.now(timezone.utc)

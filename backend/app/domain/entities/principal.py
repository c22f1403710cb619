"""The authenticated identity attached to a request."""

from dataclasses import dataclass

from app.domain.entities.user import Role


@dataclass(frozen=True)
class Principal:
    """Claims extracted from a verified access token."""

    user_id: int
    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

"""Role checks shared by every use case and endpoint."""

from collections.abc import Iterable

from app.domain.entities import Principal, Role
from app.domain.exceptions import ForbiddenError


def authorize(principal: Principal, allowed_roles: Iterable[Role]) -> None:
    """Raise ForbiddenError unless the principal holds one of ``allowed_roles``."""
    allowed = frozenset(allowed_roles)
    if principal.role not in allowed:
        raise ForbiddenError(
            f"Role {principal.role.value} is not allowed to perform this action"
        )


def can_view_store_ratings(principal: Principal, owner_id: int | None) -> bool:
    """Admins see every store's ratings; anyone else only the stores they own."""
    return principal.is_admin or (owner_id is not None and owner_id == principal.user_id)

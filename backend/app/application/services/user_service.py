"""Application service (use case) for the signed-in user's own profile."""

import logging

from app.application.interfaces import PasswordHasher, UnitOfWork
from app.domain.entities import User
from app.domain.exceptions import DomainValidationError, EntityNotFoundError

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, uow: UnitOfWork, password_hasher: PasswordHasher):
        self._uow = uow
        self._hasher = password_hasher

    async def get_profile(self, user_id: int) -> User:
        async with self._uow as uow:
            user = await uow.users.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def update_password(self, user_id: int, current_password: str, new_password: str) -> None:
        """Replace the password after verifying the current one."""
        async with self._uow as uow:
            user = await uow.users.get_by_id(user_id)
            if user is None:
                raise EntityNotFoundError("User", user_id)
            if not self._hasher.verify(user.password_hash, current_password):
                raise DomainValidationError("current_password", "is incorrect")
            user.change_password(self._hasher.hash(new_password))
            await uow.users.update_password(user)
        logger.info("User %s changed their password", user_id)

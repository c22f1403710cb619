"""Transaction boundary port — one ``async with`` block is one atomic transaction."""

from abc import ABC, abstractmethod
from types import TracebackType

from .audit_log_repository import AuditLogRepository
from .rating_repository import RatingRepository
from .refresh_token_repository import RefreshTokenRepository
from .store_repository import StoreRepository
from .user_repository import UserRepository


class UnitOfWork(ABC):
    """Groups repository calls into a single transaction.

    Usage:
        async with uow:
            store = await uow.stores.get_for_update(store_id)
            ...

    Leaving the block normally commits; leaving it with an exception rolls
    everything back and re-raises. An instance must not be entered by two
    tasks at the same time.
    """

    users: UserRepository
    stores: StoreRepository
    ratings: RatingRepository
    audit_logs: AuditLogRepository
    refresh_tokens: RefreshTokenRepository

    async def __aenter__(self) -> "UnitOfWork":
        await self._begin()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if exc_type is None:
                await self.commit()
            else:
                await self.rollback()
        finally:
            await self._close()

    @abstractmethod
    async def _begin(self) -> None:
        """Open the underlying transaction and bind the repositories to it."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...

    async def _close(self) -> None:
        """Release resources held by the transaction."""
        return None

"""SQLAlchemy implementation of the UnitOfWork port."""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.interfaces import UnitOfWork
from app.infrastructure.database.repositories import (
    SQLAlchemyAuditLogRepository,
    SQLAlchemyRatingRepository,
    SQLAlchemyRefreshTokenRepository,
    SQLAlchemyStoreRepository,
    SQLAlchemyUserRepository,
)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Opens one AsyncSession per ``async with`` block and binds every repository to it."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    async def _begin(self) -> None:
        session = self._session_factory()
        self._session = session
        self.users = SQLAlchemyUserRepository(session)
        self.stores = SQLAlchemyStoreRepository(session)
        self.ratings = SQLAlchemyRatingRepository(session)
        self.audit_logs = SQLAlchemyAuditLogRepository(session)
        self.refresh_tokens = SQLAlchemyRefreshTokenRepository(session)

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()

    async def _close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

"""Concrete refresh token repository backed by SQLAlchemy."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import RefreshTokenRepository
from app.domain.entities import RefreshToken
from app.infrastructure.database.models import RefreshTokenModel
from app.infrastructure.database.repositories.mappers import refresh_token_to_entity


class SQLAlchemyRefreshTokenRepository(RefreshTokenRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, token: str) -> RefreshToken | None:
        result = await self._session.execute(
            select(RefreshTokenModel).where(RefreshTokenModel.token == token)
        )
        model = result.scalar_one_or_none()
        return refresh_token_to_entity(model) if model else None

    async def create(self, refresh_token: RefreshToken) -> RefreshToken:
        model = RefreshTokenModel(
            token=refresh_token.token,
            user_id=refresh_token.user_id,
            expires_at=refresh_token.expires_at,
            created_at=refresh_token.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return refresh_token_to_entity(model)

    async def delete(self, token: str) -> bool:
        # Bulk DELETE so the affected row count comes from the database, not the identity map.
        result = await self._session.execute(
            delete(RefreshTokenModel)
            .where(RefreshTokenModel.token == token)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

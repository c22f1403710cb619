"""Concrete rating repository backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.interfaces import RatingRepository
from app.domain.entities import Rating
from app.infrastructure.database.models import RatingModel, UserModel
from app.infrastructure.database.repositories.mappers import rating_to_entity


class SQLAlchemyRatingRepository(RatingRepository):
    """Implements the RatingRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _with_rater(self, model: RatingModel) -> Rating:
        rater = await self._session.get(UserModel, model.user_id)
        return rating_to_entity(model, rater=rater)

    async def get_for_user_and_store(self, user_id: int, store_id: int) -> Rating | None:
        result = await self._session.execute(
            select(RatingModel).where(
                RatingModel.user_id == user_id,
                RatingModel.store_id == store_id,
            )
        )
        model = result.scalar_one_or_none()
        return rating_to_entity(model) if model else None

    async def create(self, rating: Rating) -> Rating:
        model = RatingModel(
            user_id=rating.user_id,
            store_id=rating.store_id,
            score=rating.score,
            comment=rating.comment,
            created_at=rating.created_at,
            updated_at=rating.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return await self._with_rater(model)

    async def update(self, rating: Rating) -> Rating:
        model = await self._session.get(RatingModel, rating.id)
        if model is None:
            raise ValueError(f"Rating {rating.id} not found in database")
        model.score = rating.score
        model.comment = rating.comment
        model.updated_at = rating.updated_at
        await self._session.flush()
        return await self._with_rater(model)

    async def list_for_store(self, store_id: int) -> list[Rating]:
        result = await self._session.execute(
            select(RatingModel)
            .options(selectinload(RatingModel.user))
            .where(RatingModel.store_id == store_id)
            .order_by(RatingModel.created_at.desc(), RatingModel.id.desc())
        )
        return [rating_to_entity(m, rater=m.user) for m in result.scalars().all()]

    async def count(self) -> int:
        return await self._session.scalar(select(func.count()).select_from(RatingModel)) or 0

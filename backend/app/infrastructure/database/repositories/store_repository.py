"""Concrete store repository backed by SQLAlchemy."""

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.interfaces import StoreRepository
from app.domain.entities import Page, PageRequest, Store, StoreDetail
from app.infrastructure.database.models import RatingModel, StoreModel
from app.infrastructure.database.repositories.mappers import rating_to_entity, store_to_entity


class SQLAlchemyStoreRepository(StoreRepository):
    """Implements the StoreRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, store_id: int) -> Store | None:
        result = await self._session.execute(
            select(StoreModel)
            .options(selectinload(StoreModel.owner))
            .where(StoreModel.id == store_id)
        )
        model = result.scalar_one_or_none()
        return store_to_entity(model, with_owner=True) if model else None

    async def get_for_update(self, store_id: int) -> Store | None:
        # No joins here: FOR UPDATE may not touch the nullable side of an outer join.
        result = await self._session.execute(
            select(StoreModel)
            .where(StoreModel.id == store_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()
        return store_to_entity(model) if model else None

    async def create(self, store: Store) -> Store:
        model = StoreModel(
            name=store.name,
            email=store.email,
            address=store.address,
            owner_id=store.owner_id,
            avg_rating=store.avg_rating,
            rating_count=store.rating_count,
            created_at=store.created_at,
            updated_at=store.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model, attribute_names=["owner"])
        return store_to_entity(model, with_owner=True)

    async def save_aggregate(self, store: Store) -> Store:
        model = await self._session.get(StoreModel, store.id)
        if model is None:
            raise ValueError(f"Store {store.id} not found in database")
        model.avg_rating = store.avg_rating
        model.rating_count = store.rating_count
        model.updated_at = store.updated_at
        await self._session.flush()
        return store_to_entity(model)

    async def search(
        self, page_request: PageRequest, *, search: str | None = None
    ) -> Page[Store]:
        conditions = []
        if search:
            conditions.append(
                or_(
                    StoreModel.name.icontains(search, autoescape=True),
                    StoreModel.email.icontains(search, autoescape=True),
                    StoreModel.address.icontains(search, autoescape=True),
                )
            )

        total = await self._session.scalar(
            select(func.count()).select_from(StoreModel).where(*conditions)
        )
        result = await self._session.execute(
            select(StoreModel)
            .options(selectinload(StoreModel.owner))
            .where(*conditions)
            .order_by(StoreModel.created_at.desc(), StoreModel.id.desc())
            .offset(page_request.skip)
            .limit(page_request.limit)
        )
        items = [store_to_entity(m, with_owner=True) for m in result.scalars().all()]
        return Page(items=items, page=page_request.page, limit=page_request.limit, total=total or 0)

    async def list_by_owner(self, owner_id: int) -> list[Store]:
        result = await self._session.execute(
            select(StoreModel)
            .where(StoreModel.owner_id == owner_id)
            .order_by(StoreModel.created_at.desc(), StoreModel.id.desc())
        )
        return [store_to_entity(m) for m in result.scalars().all()]

    async def get_detail(self, store_id: int, recent: int = 10) -> StoreDetail | None:
        store = await self.get_by_id(store_id)
        if store is None:
            return None
        result = await self._session.execute(
            select(RatingModel)
            .options(selectinload(RatingModel.user))
            .where(RatingModel.store_id == store_id)
            .order_by(RatingModel.created_at.desc(), RatingModel.id.desc())
            .limit(recent)
        )
        ratings = [rating_to_entity(r, rater=r.user) for r in result.scalars().all()]
        return StoreDetail(store=store, recent_ratings=ratings)

    async def count(self) -> int:
        return await self._session.scalar(select(func.count()).select_from(StoreModel)) or 0

"""Concrete user repository backed by SQLAlchemy."""

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.interfaces import UserRepository
from app.domain.entities import Page, PageRequest, Role, User, UserDetail, UserOverview
from app.domain.exceptions import DuplicateEntityError
from app.infrastructure.database.models import RatingModel, StoreModel, UserModel
from app.infrastructure.database.repositories.mappers import (
    rating_to_entity,
    store_to_entity,
    user_to_entity,
)


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _rating_count():
        return (
            select(func.count(RatingModel.id))
            .where(RatingModel.user_id == UserModel.id)
            .correlate(UserModel)
            .scalar_subquery()
        )

    @staticmethod
    def _owned_store_count():
        return (
            select(func.count(StoreModel.id))
            .where(StoreModel.owner_id == UserModel.id)
            .correlate(UserModel)
            .scalar_subquery()
        )

    async def get_by_id(self, user_id: int) -> User | None:
        model = await self._session.get(UserModel, user_id)
        return user_to_entity(model) if model else None

    async def get_by_email(self, email: str) -> User | None:
        result = await self._session.execute(select(UserModel).where(UserModel.email == email))
        model = result.scalar_one_or_none()
        return user_to_entity(model) if model else None

    async def create(self, user: User) -> User:
        model = UserModel(
            name=user.name,
            email=user.email,
            address=user.address,
            password_hash=user.password_hash,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise DuplicateEntityError("User", "email", user.email) from exc
        return user_to_entity(model)

    async def update_password(self, user: User) -> User:
        model = await self._session.get(UserModel, user.id)
        if model is None:
            raise ValueError(f"User {user.id} not found in database")
        model.password_hash = user.password_hash
        model.updated_at = user.updated_at
        await self._session.flush()
        return user_to_entity(model)

    async def search(
        self,
        page_request: PageRequest,
        *,
        search: str | None = None,
        role: Role | None = None,
    ) -> Page[UserOverview]:
        conditions = []
        if search:
            conditions.append(
                or_(
                    UserModel.name.icontains(search, autoescape=True),
                    UserModel.email.icontains(search, autoescape=True),
                    UserModel.address.icontains(search, autoescape=True),
                )
            )
        if role is not None:
            conditions.append(UserModel.role == role.value)

        total = await self._session.scalar(
            select(func.count()).select_from(UserModel).where(*conditions)
        )
        stmt = (
            select(UserModel, self._rating_count(), self._owned_store_count())
            .where(*conditions)
            .order_by(UserModel.created_at.desc(), UserModel.id.desc())
            .offset(page_request.skip)
            .limit(page_request.limit)
        )
        result = await self._session.execute(stmt)
        items = [
            UserOverview(
                user=user_to_entity(model),
                rating_count=rating_count,
                owned_store_count=owned_store_count,
            )
            for model, rating_count, owned_store_count in result.all()
        ]
        return Page(items=items, page=page_request.page, limit=page_request.limit, total=total or 0)

    async def get_detail(self, user_id: int, recent: int = 10) -> UserDetail | None:
        result = await self._session.execute(
            select(UserModel, self._rating_count(), self._owned_store_count())
            .where(UserModel.id == user_id)
        )
        row = result.one_or_none()
        if row is None:
            return None
        model, rating_count, owned_store_count = row

        ratings = await self._session.execute(
            select(RatingModel)
            .options(selectinload(RatingModel.store))
            .where(RatingModel.user_id == user_id)
            .order_by(RatingModel.created_at.desc(), RatingModel.id.desc())
            .limit(recent)
        )
        stores = await self._session.execute(
            select(StoreModel)
            .where(StoreModel.owner_id == user_id)
            .order_by(StoreModel.created_at.desc(), StoreModel.id.desc())
        )
        return UserDetail(
            user=user_to_entity(model),
            rating_count=rating_count,
            owned_store_count=owned_store_count,
            recent_ratings=[rating_to_entity(r, with_store=True) for r in ratings.scalars().all()],
            owned_stores=[store_to_entity(s) for s in stores.scalars().all()],
        )

    async def count(self) -> int:
        return await self._session.scalar(select(func.count()).select_from(UserModel)) or 0

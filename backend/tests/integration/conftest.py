"""Fixtures backed by a throwaway SQLite file per test."""

import pytest_asyncio

from app.domain.entities import Role, Store, User
from app.infrastructure.database import (
    Base,
    SQLAlchemyUnitOfWork,
    create_engine_for,
    create_session_factory,
)
from app.infrastructure.security import BcryptPasswordHasher

TEST_PASSWORD = "password123"


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = create_engine_for(f"sqlite:///{tmp_path / 'ratings.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return create_session_factory(db_engine)


@pytest_asyncio.fixture
async def make_uow(session_factory):
    def _make() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return _make


@pytest_asyncio.fixture
async def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest_asyncio.fixture
async def create_user(make_uow, hasher):
    async def _create(name: str, role: Role = Role.USER) -> User:
        async with make_uow() as uow:
            return await uow.users.create(
                User(
                    name=name,
                    email=f"{name.lower()}@example.com",
                    password_hash=hasher.hash(TEST_PASSWORD),
                    role=role,
                )
            )

    return _create


@pytest_asyncio.fixture
async def create_store(make_uow):
    async def _create(name: str, owner_id: int | None = None) -> Store:
        async with make_uow() as uow:
            return await uow.stores.create(Store(name=name, owner_id=owner_id))

    return _create

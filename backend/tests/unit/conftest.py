"""In-memory fakes for the application ports, shared by the unit tests."""

import copy
import math
from dataclasses import dataclass, field

import pytest

from app.application.interfaces import (
    AuditLogRepository,
    PasswordHasher,
    RatingRepository,
    RefreshTokenRepository,
    StoreRepository,
    TokenIssuer,
    UnitOfWork,
    UserRepository,
)
from app.domain.entities import (
    AuditEntity,
    AuditLogEntry,
    Page,
    PageRequest,
    Principal,
    Rating,
    RefreshToken,
    Role,
    Store,
    StoreDetail,
    User,
    UserDetail,
    UserOverview,
)
from app.domain.exceptions import AuthenticationError, DuplicateEntityError


@dataclass
class FakeDatabase:
    """Rows kept by id. Repositories hand out copies, like a real database would."""

    users: dict[int, User] = field(default_factory=dict)
    stores: dict[int, Store] = field(default_factory=dict)
    ratings: dict[int, Rating] = field(default_factory=dict)
    audit_logs: list[AuditLogEntry] = field(default_factory=list)
    refresh_tokens: dict[str, RefreshToken] = field(default_factory=dict)
    next_id: int = 1

    def allocate_id(self) -> int:
        value = self.next_id
        self.next_id += 1
        return value


def _matches(term: str | None, *values: str | None) -> bool:
    if not term:
        return True
    needle = term.lower()
    return any(v is not None and needle in v.lower() for v in values)


def _page(items: list, page_request: PageRequest) -> Page:
    start = page_request.skip
    return Page(
        items=items[start : start + page_request.limit],
        page=page_request.page,
        limit=page_request.limit,
        total=len(items),
    )


class FakeUserRepository(UserRepository):

    def __init__(self, db: FakeDatabase):
        self._db = db

    async def get_by_id(self, user_id: int) -> User | None:
        return copy.deepcopy(self._db.users.get(user_id))

    async def get_by_email(self, email: str) -> User | None:
        for user in self._db.users.values():
            if user.email == email:
                return copy.deepcopy(user)
        return None

    async def create(self, user: User) -> User:
        if any(u.email == user.email for u in self._db.users.values()):
            raise DuplicateEntityError("User", "email", user.email)
        user.id = self._db.allocate_id()
        self._db.users[user.id] = copy.deepcopy(user)
        return user

    async def update_password(self, user: User) -> User:
        stored = self._db.users[user.id]
        stored.password_hash = user.password_hash
        stored.updated_at = user.updated_at
        return copy.deepcopy(stored)

    def _overview(self, user: User) -> UserOverview:
        return UserOverview(
            user=copy.deepcopy(user),
            rating_count=sum(1 for r in self._db.ratings.values() if r.user_id == user.id),
            owned_store_count=sum(1 for s in self._db.stores.values() if s.owner_id == user.id),
        )

    async def search(
        self,
        page_request: PageRequest,
        *,
        search: str | None = None,
        role: Role | None = None,
    ) -> Page[UserOverview]:
        users = [
            u
            for u in sorted(self._db.users.values(), key=lambda u: u.id, reverse=True)
            if _matches(search, u.name, u.email, u.address) and (role is None or u.role == role)
        ]
        return _page([self._overview(u) for u in users], page_request)

    async def get_detail(self, user_id: int, recent: int = 10) -> UserDetail | None:
        user = self._db.users.get(user_id)
        if user is None:
            return None
        overview = self._overview(user)
        ratings = sorted(
            (r for r in self._db.ratings.values() if r.user_id == user_id),
            key=lambda r: r.id,
            reverse=True,
        )
        return UserDetail(
            user=overview.user,
            rating_count=overview.rating_count,
            owned_store_count=overview.owned_store_count,
            recent_ratings=copy.deepcopy(ratings[:recent]),
            owned_stores=[copy.deepcopy(s) for s in self._db.stores.values() if s.owner_id == user_id],
        )

    async def count(self) -> int:
        return len(self._db.users)


class FakeStoreRepository(StoreRepository):

    def __init__(self, db: FakeDatabase):
        self._db = db

    async def get_by_id(self, store_id: int) -> Store | None:
        return copy.deepcopy(self._db.stores.get(store_id))

    async def get_for_update(self, store_id: int) -> Store | None:
        return copy.deepcopy(self._db.stores.get(store_id))

    async def create(self, store: Store) -> Store:
        store.id = self._db.allocate_id()
        self._db.stores[store.id] = copy.deepcopy(store)
        return store

    async def save_aggregate(self, store: Store) -> Store:
        stored = self._db.stores[store.id]
        stored.avg_rating = store.avg_rating
        stored.rating_count = store.rating_count
        stored.updated_at = store.updated_at
        return copy.deepcopy(stored)

    async def search(
        self, page_request: PageRequest, *, search: str | None = None
    ) -> Page[Store]:
        stores = [
            copy.deepcopy(s)
            for s in sorted(self._db.stores.values(), key=lambda s: s.id, reverse=True)
            if _matches(search, s.name, s.email, s.address)
        ]
        return _page(stores, page_request)

    async def list_by_owner(self, owner_id: int) -> list[Store]:
        return [copy.deepcopy(s) for s in self._db.stores.values() if s.owner_id == owner_id]

    async def get_detail(self, store_id: int, recent: int = 10) -> StoreDetail | None:
        store = self._db.stores.get(store_id)
        if store is None:
            return None
        ratings = sorted(
            (r for r in self._db.ratings.values() if r.store_id == store_id),
            key=lambda r: r.id,
            reverse=True,
        )
        return StoreDetail(store=copy.deepcopy(store), recent_ratings=copy.deepcopy(ratings[:recent]))

    async def count(self) -> int:
        return len(self._db.stores)


class FakeRatingRepository(RatingRepository):

    def __init__(self, db: FakeDatabase):
        self._db = db

    async def get_for_user_and_store(self, user_id: int, store_id: int) -> Rating | None:
        for rating in self._db.ratings.values():
            if rating.user_id == user_id and rating.store_id == store_id:
                return copy.deepcopy(rating)
        return None

    async def create(self, rating: Rating) -> Rating:
        if await self.get_for_user_and_store(rating.user_id, rating.store_id) is not None:
            raise DuplicateEntityError("Rating", "user_id,store_id", f"{rating.user_id},{rating.store_id}")
        rating.id = self._db.allocate_id()
        rating.rater = self._db.users[rating.user_id].identity
        self._db.ratings[rating.id] = copy.deepcopy(rating)
        return rating

    async def update(self, rating: Rating) -> Rating:
        self._db.ratings[rating.id] = copy.deepcopy(rating)
        return rating

    async def list_for_store(self, store_id: int) -> list[Rating]:
        ratings = sorted(
            (r for r in self._db.ratings.values() if r.store_id == store_id),
            key=lambda r: r.id,
            reverse=True,
        )
        return copy.deepcopy(ratings)

    async def count(self) -> int:
        return len(self._db.ratings)


class FakeAuditLogRepository(AuditLogRepository):

    def __init__(self, db: FakeDatabase):
        self._db = db

    async def append(self, entry: AuditLogEntry) -> AuditLogEntry:
        entry.id = self._db.allocate_id()
        self._db.audit_logs.append(copy.deepcopy(entry))
        return entry

    async def list_for_entity(self, entity: AuditEntity, entity_id: int) -> list[AuditLogEntry]:
        return [
            copy.deepcopy(e)
            for e in self._db.audit_logs
            if e.entity == entity and e.entity_id == entity_id
        ]


class FakeRefreshTokenRepository(RefreshTokenRepository):

    def __init__(self, db: FakeDatabase):
        self._db = db

    async def get(self, token: str) -> RefreshToken | None:
        return copy.deepcopy(self._db.refresh_tokens.get(token))

    async def create(self, refresh_token: RefreshToken) -> RefreshToken:
        self._db.refresh_tokens[refresh_token.token] = copy.deepcopy(refresh_token)
        return refresh_token

    async def delete(self, token: str) -> bool:
        return self._db.refresh_tokens.pop(token, None) is not None


class FakeUnitOfWork(UnitOfWork):
    """Snapshots the fake database on entry and restores it on rollback."""

    def __init__(self, db: FakeDatabase | None = None):
        self.db = db or FakeDatabase()
        self._snapshot: FakeDatabase | None = None
        self.commits = 0
        self.rollbacks = 0
        self.users = FakeUserRepository(self.db)
        self.stores = FakeStoreRepository(self.db)
        self.ratings = FakeRatingRepository(self.db)
        self.audit_logs = FakeAuditLogRepository(self.db)
        self.refresh_tokens = FakeRefreshTokenRepository(self.db)

    async def _begin(self) -> None:
        self._snapshot = copy.deepcopy(self.db)

    async def commit(self) -> None:
        self.commits += 1
        self._snapshot = None

    async def rollback(self) -> None:
        self.rollbacks += 1
        snapshot = self._snapshot
        self.db.users = snapshot.users
        self.db.stores = snapshot.stores
        self.db.ratings = snapshot.ratings
        self.db.audit_logs = snapshot.audit_logs
        self.db.refresh_tokens = snapshot.refresh_tokens
        self.db.next_id = snapshot.next_id
        self._snapshot = None


class FakePasswordHasher(PasswordHasher):
    """Reversible stand-in for bcrypt; keeps unit tests fast."""

    def hash(self, plaintext: str) -> str:
        return f"hashed::{plaintext}"

    def verify(self, digest: str, plaintext: str) -> bool:
        return digest == f"hashed::{plaintext}"


class FakeTokenIssuer(TokenIssuer):

    def issue_access_token(self, principal: Principal) -> str:
        return f"access::{principal.user_id}::{principal.email}::{principal.role.value}"

    def verify_access_token(self, token: str) -> Principal:
        parts = token.split("::")
        if len(parts) != 4 or parts[0] != "access":
            raise AuthenticationError("Invalid token")
        return Principal(user_id=int(parts[1]), email=parts[2], role=Role(parts[3]))


class Seeder:
    """Writes fixture rows straight through the fake repositories."""

    def __init__(self, uow: FakeUnitOfWork):
        self._uow = uow

    async def user(self, name: str, role: Role = Role.USER, password: str = "password123") -> User:
        return await self._uow.users.create(
            User(
                name=name,
                email=f"{name.lower()}@example.com",
                password_hash=f"hashed::{password}",
                role=role,
            )
        )

    async def store(self, name: str, owner_id: int | None = None) -> Store:
        return await self._uow.stores.create(
            Store(name=name, email=f"{name.lower()}@shop.example", owner_id=owner_id)
        )

    @staticmethod
    def principal(user: User) -> Principal:
        return Principal(user_id=user.id, email=user.email, role=user.role)

    def live_aggregate(self, store_id: int) -> tuple[float, int]:
        """Recompute (mean, count) from the stored rating rows."""
        scores = [r.score for r in self._uow.db.ratings.values() if r.store_id == store_id]
        if not scores:
            return 0.0, 0
        return math.fsum(scores) / len(scores), len(scores)


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def token_issuer() -> FakeTokenIssuer:
    return FakeTokenIssuer()


@pytest.fixture
def seed(uow: FakeUnitOfWork) -> Seeder:
    return Seeder(uow)

"""Admin console use cases — user/store management and platform counts."""

import logging
import secrets
from dataclasses import dataclass

from app.application.interfaces import PasswordHasher, UnitOfWork
from app.application.schemas import AdminStoreCreate, AdminUserCreate
from app.application.services.store_query_service import normalize_search
from app.domain.entities import (
    AuditAction,
    AuditEntity,
    AuditLogEntry,
    Page,
    PageRequest,
    Principal,
    Role,
    Store,
    StoreDetail,
    User,
    UserDetail,
    UserOverview,
)
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)

TEMPORARY_PASSWORD_BYTES = 8


@dataclass(frozen=True)
class Dashboard:
    total_users: int
    total_stores: int
    total_ratings: int


@dataclass(frozen=True)
class CreatedUser:
    user: User
    temporary_password: str | None = None


class AdminService:
    """Every method assumes the caller already passed an ADMIN role check."""

    def __init__(self, uow: UnitOfWork, password_hasher: PasswordHasher):
        self._uow = uow
        self._hasher = password_hasher

    async def get_dashboard(self) -> Dashboard:
        async with self._uow as uow:
            return Dashboard(
                total_users=await uow.users.count(),
                total_stores=await uow.stores.count(),
                total_ratings=await uow.ratings.count(),
            )

    async def create_user(self, admin: Principal, data: AdminUserCreate) -> CreatedUser:
        """Create a user of any role; generate a temporary password if none was given."""
        temporary_password = None
        password = data.password
        if not password:
            temporary_password = password = secrets.token_hex(TEMPORARY_PASSWORD_BYTES)

        password_hash = self._hasher.hash(password)
        async with self._uow as uow:
            if await uow.users.get_by_email(data.email) is not None:
                raise DuplicateEntityError("User", "email", data.email)
            user = await uow.users.create(
                User(
                    name=data.name,
                    email=data.email,
                    address=data.address,
                    password_hash=password_hash,
                    role=data.role,
                )
            )
            await uow.audit_logs.append(
                AuditLogEntry(
                    user_id=admin.user_id,
                    action=AuditAction.CREATE,
                    entity=AuditEntity.USER,
                    entity_id=user.id,
                    details={"name": user.name, "email": user.email, "role": user.role.value},
                )
            )
        logger.info("Admin %s created user %s (%s)", admin.user_id, user.id, user.role.value)
        return CreatedUser(user=user, temporary_password=temporary_password)

    async def create_store(self, admin: Principal, data: AdminStoreCreate) -> Store:
        """Create a store with an empty aggregate, optionally bound to an existing owner."""
        async with self._uow as uow:
            if data.owner_id is not None and await uow.users.get_by_id(data.owner_id) is None:
                raise EntityNotFoundError("User", data.owner_id)
            store = await uow.stores.create(
                Store(
                    name=data.name,
                    email=data.email,
                    address=data.address,
                    owner_id=data.owner_id,
                )
            )
            await uow.audit_logs.append(
                AuditLogEntry(
                    user_id=admin.user_id,
                    action=AuditAction.CREATE,
                    entity=AuditEntity.STORE,
                    entity_id=store.id,
                    details={"name": store.name, "email": store.email, "owner_id": store.owner_id},
                )
            )
        logger.info("Admin %s created store %s", admin.user_id, store.id)
        return store

    async def list_users(
        self,
        page_request: PageRequest,
        search: str | None = None,
        role: Role | None = None,
    ) -> Page[UserOverview]:
        async with self._uow as uow:
            return await uow.users.search(
                page_request, search=normalize_search(search), role=role
            )

    async def get_user(self, user_id: int) -> UserDetail:
        async with self._uow as uow:
            detail = await uow.users.get_detail(user_id)
        if detail is None:
            raise EntityNotFoundError("User", user_id)
        return detail

    async def list_stores(self, page_request: PageRequest, search: str | None = None) -> Page[Store]:
        async with self._uow as uow:
            return await uow.stores.search(page_request, search=normalize_search(search))

    async def get_store(self, store_id: int) -> StoreDetail:
        async with self._uow as uow:
            detail = await uow.stores.get_detail(store_id)
        if detail is None:
            raise EntityNotFoundError("Store", store_id)
        return detail

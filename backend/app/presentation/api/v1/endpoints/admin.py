"""Admin console endpoints. Every route requires the ADMIN role."""

from fastapi import APIRouter, Depends, Query, status

from app.application.schemas import (
    AdminStoreCreate,
    AdminUserCreate,
    AdminUserCreateResponse,
    DashboardResponse,
    PaginationMeta,
    StoreDetailResponse,
    StoreListResponse,
    StoreResponse,
    UserDetailResponse,
    UserListResponse,
    UserOverviewResponse,
    UserResponse,
)
from app.application.services import AdminService
from app.domain.entities import DEFAULT_LIMIT, PageRequest, Principal, Role
from app.domain.exceptions import DomainError
from app.infrastructure.dependencies import get_admin_service, require_roles
from app.presentation.api.v1.errors import to_http_exception

router = APIRouter(prefix="/admin", tags=["Admin"])

require_admin = require_roles(Role.ADMIN)


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    _: Principal = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> DashboardResponse:
    """Platform-wide user, store and rating counts."""
    dashboard = await service.get_dashboard()
    return DashboardResponse(
        total_users=dashboard.total_users,
        total_stores=dashboard.total_stores,
        total_ratings=dashboard.total_ratings,
    )


@router.get("/users", response_model=UserListResponse)
async def list_users(
    page: int = Query(1),
    limit: int = Query(DEFAULT_LIMIT),
    search: str | None = Query(None),
    role: Role | None = Query(None),
    _: Principal = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> UserListResponse:
    try:
        result = await service.list_users(PageRequest.of(page, limit), search, role)
    except DomainError as e:
        raise to_http_exception(e)
    return UserListResponse(
        users=[UserOverviewResponse.from_overview(o) for o in result.items],
        pagination=PaginationMeta.from_page(result),
    )


@router.post("/users", response_model=AdminUserCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: AdminUserCreate,
    admin: Principal = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> AdminUserCreateResponse:
    """Create a user of any role. The generated password is returned only once."""
    try:
        created = await service.create_user(admin, data)
    except DomainError as e:
        raise to_http_exception(e)
    return AdminUserCreateResponse(
        user=UserResponse.model_validate(created.user),
        temporary_password=created.temporary_password,
    )


@router.get("/users/{user_id}", response_model=UserDetailResponse)
async def get_user(
    user_id: int,
    _: Principal = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> UserDetailResponse:
    try:
        detail = await service.get_user(user_id)
    except DomainError as e:
        raise to_http_exception(e)
    return UserDetailResponse.from_detail(detail)


@router.get("/stores", response_model=StoreListResponse)
async def list_stores(
    page: int = Query(1),
    limit: int = Query(DEFAULT_LIMIT),
    search: str | None = Query(None),
    _: Principal = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> StoreListResponse:
    try:
        result = await service.list_stores(PageRequest.of(page, limit), search)
    except DomainError as e:
        raise to_http_exception(e)
    return StoreListResponse(
        stores=[StoreResponse.model_validate(s) for s in result.items],
        pagination=PaginationMeta.from_page(result),
    )


@router.post("/stores", response_model=StoreResponse, status_code=status.HTTP_201_CREATED)
async def create_store(
    data: AdminStoreCreate,
    admin: Principal = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> StoreResponse:
    try:
        store = await service.create_store(admin, data)
    except DomainError as e:
        raise to_http_exception(e)
    return StoreResponse.model_validate(store)


@router.get("/stores/{store_id}", response_model=StoreDetailResponse)
async def get_store(
    store_id: int,
    _: Principal = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> StoreDetailResponse:
    try:
        detail = await service.get_store(store_id)
    except DomainError as e:
        raise to_http_exception(e)
    return StoreDetailResponse.from_detail(detail)

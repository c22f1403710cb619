"""Pydantic DTOs for the admin console."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from app.domain.entities import Role, StoreDetail, UserDetail, UserOverview

from .pagination import PaginationMeta
from .rating import RatingResponse, StoreIdentityResponse
from .store import StoreResponse
from .user import NewPassword, UserResponse


class AdminUserCreate(BaseModel):
    """Create a user of any role. A temporary password is generated when omitted."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    address: str | None = Field(None, max_length=400)
    password: NewPassword | None = None
    role: Role


class AdminUserCreateResponse(BaseModel):
    user: UserResponse
    temporary_password: str | None = None


class AdminStoreCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr | None = None
    address: str | None = Field(None, max_length=400)
    owner_id: int | None = None


class UserOverviewResponse(UserResponse):
    rating_count: int
    owned_store_count: int

    @classmethod
    def from_overview(cls, overview: UserOverview) -> "UserOverviewResponse":
        base = UserResponse.model_validate(overview.user).model_dump()
        return cls(
            **base,
            rating_count=overview.rating_count,
            owned_store_count=overview.owned_store_count,
        )


class UserListResponse(BaseModel):
    users: list[UserOverviewResponse]
    pagination: PaginationMeta


class UserRatingResponse(BaseModel):
    """A rating as listed on a user's detail page — with the store it targets."""

    id: int
    score: int
    comment: str | None
    created_at: datetime
    store: StoreIdentityResponse | None = None

    model_config = {"from_attributes": True}


class UserDetailResponse(UserOverviewResponse):
    recent_ratings: list[UserRatingResponse]
    owned_stores: list[StoreResponse]

    @classmethod
    def from_detail(cls, detail: UserDetail) -> "UserDetailResponse":
        overview = UserOverviewResponse.from_overview(detail)
        return cls(
            **overview.model_dump(),
            recent_ratings=[UserRatingResponse.model_validate(r) for r in detail.recent_ratings],
            owned_stores=[StoreResponse.model_validate(s) for s in detail.owned_stores],
        )


class StoreDetailResponse(StoreResponse):
    updated_at: datetime
    recent_ratings: list[RatingResponse]

    @classmethod
    def from_detail(cls, detail: StoreDetail) -> "StoreDetailResponse":
        base = StoreResponse.model_validate(detail.store).model_dump()
        return cls(
            **base,
            updated_at=detail.store.updated_at,
            recent_ratings=[RatingResponse.from_entity(r) for r in detail.recent_ratings],
        )


class DashboardResponse(BaseModel):
    total_users: int
    total_stores: int
    total_ratings: int

from .auth import (
    AuthResponse,
    LoginRequest,
    LogoutRequest,
    RefreshRequest,
    SignupRequest,
    TokenPairResponse,
)
from .user import MessageResponse, PasswordUpdateRequest, UserIdentityResponse, UserResponse
from .pagination import PaginationMeta
from .rating import (
    MyRatingResponse,
    RatingCreate,
    RatingResponse,
    StoreIdentityResponse,
    StoreRatingsResponse,
    StoreSummaryResponse,
)
from .store import StoreListResponse, StoreResponse, StoreWithUserRatingResponse
from .admin import (
    AdminStoreCreate,
    AdminUserCreate,
    AdminUserCreateResponse,
    DashboardResponse,
    StoreDetailResponse,
    UserDetailResponse,
    UserListResponse,
    UserOverviewResponse,
    UserRatingResponse,
)

__all__ = [
    "AuthResponse",
    "LoginRequest",
    "LogoutRequest",
    "RefreshRequest",
    "SignupRequest",
    "TokenPairResponse",
    "MessageResponse",
    "PasswordUpdateRequest",
    "UserIdentityResponse",
    "UserResponse",
    "PaginationMeta",
    "MyRatingResponse",
    "RatingCreate",
    "RatingResponse",
    "StoreIdentityResponse",
    "StoreRatingsResponse",
    "StoreSummaryResponse",
    "StoreListResponse",
    "StoreResponse",
    "StoreWithUserRatingResponse",
    "AdminStoreCreate",
    "AdminUserCreate",
    "AdminUserCreateResponse",
    "DashboardResponse",
    "StoreDetailResponse",
    "UserDetailResponse",
    "UserListResponse",
    "UserOverviewResponse",
    "UserRatingResponse",
]

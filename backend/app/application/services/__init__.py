from .access_control import authorize, can_view_store_ratings
from .admin_service import AdminService, CreatedUser, Dashboard
from .auth_service import AuthResult, AuthService, SessionTokens
from .rating_service import RatingService, StoreRatings, StoreSummary
from .store_query_service import StoreQueryService, StoreView
from .user_service import UserService

__all__ = [
    "authorize",
    "can_view_store_ratings",
    "AdminService",
    "CreatedUser",
    "Dashboard",
    "AuthResult",
    "AuthService",
    "SessionTokens",
    "RatingService",
    "StoreRatings",
    "StoreSummary",
    "StoreQueryService",
    "StoreView",
    "UserService",
]

from .user import Role, User, UserIdentity
from .store import Store, StoreIdentity
from .rating import MAX_SCORE, MIN_SCORE, Rating, is_valid_score
from .audit_log import AuditAction, AuditEntity, AuditLogEntry
from .refresh_token import RefreshToken
from .principal import Principal
from .pagination import DEFAULT_LIMIT, MAX_LIMIT, Page, PageRequest
from .overview import StoreDetail, UserDetail, UserOverview

__all__ = [
    "Role",
    "User",
    "UserIdentity",
    "Store",
    "StoreIdentity",
    "MIN_SCORE",
    "MAX_SCORE",
    "Rating",
    "is_valid_score",
    "AuditAction",
    "AuditEntity",
    "AuditLogEntry",
    "RefreshToken",
    "Principal",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "Page",
    "PageRequest",
    "StoreDetail",
    "UserDetail",
    "UserOverview",
]

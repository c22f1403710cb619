from .user import UserModel
from .store import StoreModel
from .rating import RatingModel
from .audit_log import AuditLogModel
from .refresh_token import RefreshTokenModel

__all__ = [
    "UserModel",
    "StoreModel",
    "RatingModel",
    "AuditLogModel",
    "RefreshTokenModel",
]

from .user_repository import UserRepository
from .store_repository import StoreRepository
from .rating_repository import RatingRepository
from .audit_log_repository import AuditLogRepository
from .refresh_token_repository import RefreshTokenRepository
from .unit_of_work import UnitOfWork
from .password_hasher import PasswordHasher
from .token_issuer import TokenIssuer

__all__ = [
    "UserRepository",
    "StoreRepository",
    "RatingRepository",
    "AuditLogRepository",
    "RefreshTokenRepository",
    "UnitOfWork",
    "PasswordHasher",
    "TokenIssuer",
]

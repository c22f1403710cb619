from .user_repository import SQLAlchemyUserRepository
from .store_repository import SQLAlchemyStoreRepository
from .rating_repository import SQLAlchemyRatingRepository
from .audit_log_repository import SQLAlchemyAuditLogRepository
from .refresh_token_repository import SQLAlchemyRefreshTokenRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyStoreRepository",
    "SQLAlchemyRatingRepository",
    "SQLAlchemyAuditLogRepository",
    "SQLAlchemyRefreshTokenRepository",
]

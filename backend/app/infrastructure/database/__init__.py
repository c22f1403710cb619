from .base import Base
from .session import async_session_factory, create_engine_for, create_session_factory, engine
from .unit_of_work import SQLAlchemyUnitOfWork
from . import models  # noqa: F401  (registers tables on Base.metadata)

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "create_engine_for",
    "create_session_factory",
    "SQLAlchemyUnitOfWork",
]

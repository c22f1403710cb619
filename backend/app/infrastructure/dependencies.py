"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from datetime import timedelta
from functools import lru_cache

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from app.config import get_settings
from app.application.interfaces import PasswordHasher, TokenIssuer, UnitOfWork
from app.application.services import (
    AdminService,
    AuthService,
    RatingService,
    StoreQueryService,
    UserService,
    authorize,
)
from app.domain.entities import Principal, Role
from app.domain.exceptions import AuthenticationError, ForbiddenError
from app.infrastructure.database import SQLAlchemyUnitOfWork, async_session_factory
from app.infrastructure.security import BcryptPasswordHasher, JoseTokenIssuer

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login", auto_error=False)

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def get_unit_of_work() -> UnitOfWork:
    """A fresh unit of work per request; each ``async with`` is one transaction."""
    return SQLAlchemyUnitOfWork(async_session_factory)


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher()


@lru_cache
def get_token_issuer() -> TokenIssuer:
    settings = get_settings()
    return JoseTokenIssuer(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )


async def get_auth_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> AsyncGenerator[AuthService, None]:
    """Provides an AuthService with hashing, signing and session storage wired up."""
    settings = get_settings()
    yield AuthService(
        uow=uow,
        password_hasher=password_hasher,
        token_issuer=token_issuer,
        refresh_token_ttl=timedelta(days=settings.refresh_token_expire_days),
    )


async def get_rating_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> AsyncGenerator[RatingService, None]:
    yield RatingService(uow)


async def get_store_query_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> AsyncGenerator[StoreQueryService, None]:
    yield StoreQueryService(uow)


async def get_user_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> AsyncGenerator[UserService, None]:
    yield UserService(uow, password_hasher)


async def get_admin_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> AsyncGenerator[AdminService, None]:
    yield AdminService(uow, password_hasher)


async def get_current_principal(
    token: str | None = Depends(oauth2_scheme),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> Principal:
    """Resolve the bearer token into a Principal, or fail with 401."""
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers=_BEARER_CHALLENGE,
        )
    try:
        return token_issuer.verify_access_token(token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers=_BEARER_CHALLENGE,
        )


def require_roles(*roles: Role):
    """Dependency factory: the current principal, provided it holds one of ``roles``."""

    async def _principal_with_role(
        principal: Principal = Depends(get_current_principal),
    ) -> Principal:
        try:
            authorize(principal, roles)
        except ForbiddenError as e:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)
        return principal

    return _principal_with_role

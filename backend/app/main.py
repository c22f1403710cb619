"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.domain.entities import Role, User
from app.infrastructure.database import Base, SQLAlchemyUnitOfWork, async_session_factory, engine
from app.infrastructure.dependencies import get_password_hasher
from app.infrastructure.logging.log_config import setup_logging
from app.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _seed_bootstrap_admin() -> None:
    """Ensure the configured bootstrap admin exists.

    Does nothing unless both ``BOOTSTRAP_ADMIN_EMAIL`` and
    ``BOOTSTRAP_ADMIN_PASSWORD`` are set. An existing account with that
    email is left untouched, so this is safe to call on every startup.
    """
    settings = get_settings()
    email = settings.bootstrap_admin_email.strip()
    if not email or not settings.bootstrap_admin_password:
        logger.debug("No bootstrap admin configured")
        return

    password_hash = get_password_hasher().hash(settings.bootstrap_admin_password)
    try:
        async with SQLAlchemyUnitOfWork(async_session_factory) as uow:
            if await uow.users.get_by_email(email) is not None:
                logger.debug("Bootstrap admin %s already exists", email)
                return
            user = await uow.users.create(
                User(
                    name=settings.bootstrap_admin_name,
                    email=email,
                    password_hash=password_hash,
                    role=Role.ADMIN,
                )
            )
        logger.info("Seeded bootstrap admin %s (id=%s)", email, user.id)
    except Exception as exc:
        logger.warning("Could not seed bootstrap admin: %s", exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables, seed the first admin, dispose the pool."""
    setup_logging()

    # 1. Create all database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Seed the bootstrap admin (if configured)
    await _seed_bootstrap_admin()

    yield

    # Shutdown
    await engine.dispose()


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies and query params are reported as 400, not 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, _validation_exception_handler)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )

"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from commerce_api.config import get_settings
from commerce_api.application.services import UserService
from commerce_api.infrastructure.database import Base, engine
from commerce_api.infrastructure.database.repositories import SQLAlchemyUserRepository
from commerce_api.infrastructure.database.session import async_session_factory
from commerce_api.infrastructure.logging.log_config import setup_logging
from commerce_api.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _seed_admin_user() -> None:
    """Ensure a bootstrap ADMIN user exists.

    Idempotent — safe to call on every startup. Does nothing when an admin
    is already present or ``ADMIN_PASSWORD`` is not configured.
    """
    settings = get_settings()
    try:
        async with async_session_factory() as session:
            service = UserService(SQLAlchemyUserRepository(session))
            await service.ensure_admin(settings.admin_email, settings.admin_password)
            await session.commit()
    except Exception as exc:
        logger.warning("Could not seed admin user: %s", exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables and seed the admin user."""
    setup_logging()

    # 1. Create all database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Seed the bootstrap administrator
    await _seed_admin_user()

    yield

    await engine.dispose()


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

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "commerce_api.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )

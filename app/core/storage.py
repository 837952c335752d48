"""Database connection and storage utilities."""

from __future__ import annotations

import logging

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Build the pooled async engine described by ``settings``."""
    return create_async_engine(
        settings.sqlalchemy_url,
        echo=settings.sql_echo,
        pool_pre_ping=True,
        connect_args=settings.engine_connect_args,
    )


class Database:
    """Engine and session factory owned by one running application."""

    def __init__(self, settings: Settings, engine: AsyncEngine | None = None):
        self.settings = settings
        self.engine = engine or create_engine_from_settings(settings)
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def init_models(self) -> None:
        """Create any missing tables."""
        import app.models  # noqa: F401  registers tables on Base.metadata

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ready")

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """Dependency returning the database attached to the running app."""
    return request.app.state.database

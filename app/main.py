"""Recruitment tracker - application workflow API for applicants and recruiters."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, settings
from app.core.storage import Database
from app.routers import applications_router, system_router
from app.services.greeting_service import GreetingService

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    app_settings: Settings = app.state.settings
    database: Database = app.state.database

    logger.info("Initializing application...")
    await database.init_models()

    if app_settings.seed_greeting:
        await GreetingService(
            database.session_factory,
            default_message=app_settings.default_greeting,
        ).seed()

    logger.info(f"Environment: {app_settings.environment}")
    logger.info(f"Database: {app_settings.database_name}")
    logger.info("Application initialized")

    yield

    logger.info("Shutting down...")
    await database.dispose()
    logger.info("Shutdown complete")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the API from an explicit settings object."""
    app_settings = app_settings or settings

    app = FastAPI(
        title="Recruitment Tracker",
        description="Job application workflow for applicants and recruiters",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.database = Database(app_settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(system_router)
    app.include_router(applications_router)

    return app


app = create_app()


def run() -> None:
    """Serve the API on all interfaces."""
    logger.info(f"Backend API running on port: {settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()

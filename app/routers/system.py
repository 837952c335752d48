"""Hello and health endpoints."""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Depends, Request
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import service_unavailable_exception
from app.core.storage import Database, get_database
from app.schemas.system import HealthResponse, HelloResponse
from app.services.greeting_service import GreetingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["system"])


async def get_greeting_service(
    request: Request,
    database: Database = Depends(get_database),
) -> GreetingService:
    """Create greeting service with dependencies."""
    return GreetingService(
        database.session_factory,
        default_message=request.app.state.settings.default_greeting,
    )


@router.get("/hello", response_model=HelloResponse)
async def get_hello(service: GreetingService = Depends(get_greeting_service)):
    """Greeting read from the database."""
    try:
        return await service.get_hello()
    except SQLAlchemyError as e:
        logger.error(f"Database error reading greeting: {e}")
        raise service_unavailable_exception()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Health check endpoint."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(UTC),
        service=request.app.state.settings.service_name,
    )

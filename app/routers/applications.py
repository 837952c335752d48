"""API routes for job applications."""

import logging

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import (
    ApplicationNotFoundError,
    StatusTransitionError,
    conflict_exception,
    not_found_exception,
    service_unavailable_exception,
)
from app.core.storage import Database, get_database
from app.schemas.application import (
    ApplicationCreate,
    ApplicationRead,
    ApplicationStats,
    ApplicationUpdate,
)
from app.services.application_service import (
    ApplicationService,
    create_application_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/applications", tags=["applications"])


async def get_application_service(
    request: Request,
    database: Database = Depends(get_database),
) -> ApplicationService:
    """Create application service with dependencies."""
    return create_application_service(database, request.app.state.settings)


@router.post(
    "",
    response_model=ApplicationRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_application(
    payload: ApplicationCreate,
    service: ApplicationService = Depends(get_application_service),
):
    """Submit a new application (applicant view)."""
    try:
        return await service.create(payload)
    except SQLAlchemyError as e:
        logger.error(f"Database error creating application: {e}")
        raise service_unavailable_exception()


@router.get("", response_model=list[ApplicationRead])
async def list_applications(
    email: str | None = Query(
        default=None, description="Only applications submitted with this email"
    ),
    service: ApplicationService = Depends(get_application_service),
):
    """List applications, optionally filtered by candidate email."""
    try:
        if email:
            return await service.list_by_email(email)
        return await service.list_all()
    except SQLAlchemyError as e:
        logger.error(f"Database error listing applications: {e}")
        raise service_unavailable_exception()


@router.get("/stats/summary", response_model=ApplicationStats)
async def get_stats_summary(
    service: ApplicationService = Depends(get_application_service),
):
    """Application counts per status (recruiter dashboard)."""
    try:
        return await service.stats()
    except SQLAlchemyError as e:
        logger.error(f"Database error computing stats: {e}")
        raise service_unavailable_exception()


@router.get("/{application_id}", response_model=ApplicationRead)
async def get_application(
    application_id: int,
    service: ApplicationService = Depends(get_application_service),
):
    """Get a single application."""
    try:
        return await service.get_by_id(application_id)
    except ApplicationNotFoundError as e:
        raise not_found_exception(e.message)
    except SQLAlchemyError as e:
        logger.error(f"Database error loading application {application_id}: {e}")
        raise service_unavailable_exception()


@router.put("/{application_id}", response_model=ApplicationRead)
async def update_application(
    application_id: int,
    payload: ApplicationUpdate,
    service: ApplicationService = Depends(get_application_service),
):
    """Update status and/or notes (recruiter view)."""
    try:
        return await service.update(application_id, payload)
    except ApplicationNotFoundError as e:
        raise not_found_exception(e.message)
    except StatusTransitionError as e:
        logger.warning(f"Rejected status change for {application_id}: {e.message}")
        raise conflict_exception(e.message)
    except SQLAlchemyError as e:
        logger.error(f"Database error updating application {application_id}: {e}")
        raise service_unavailable_exception()

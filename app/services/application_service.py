"""Application service for the recruitment workflow."""

import logging
from datetime import datetime, timedelta

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.config import Settings
from app.core.exceptions import ApplicationNotFoundError, StatusTransitionError
from app.core.storage import Database
from app.models.application import Application, ApplicationStatus, utc_now
from app.schemas.application import (
    ApplicationCreate,
    ApplicationStats,
    ApplicationUpdate,
    StatusCounts,
)
from app.utils.validators import validate_status_transition

logger = logging.getLogger(__name__)

# StatusCounts field for each stored status value.
_STATUS_COUNT_FIELDS = {
    ApplicationStatus.SUBMITTED: "submitted",
    ApplicationStatus.UNDER_REVIEW: "under_review",
    ApplicationStatus.INTERVIEW: "interview",
    ApplicationStatus.ACCEPTED: "accepted",
    ApplicationStatus.REJECTED: "rejected",
}


def _next_timestamp(previous: datetime) -> datetime:
    """Current time, nudged past ``previous`` so updates always move forward."""
    now = utc_now()
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now


class ApplicationService:
    """Owns application state transitions and derived statistics."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        enforce_status_workflow: bool = False,
    ):
        self.session_factory = session_factory
        self.enforce_status_workflow = enforce_status_workflow

    async def create(self, data: ApplicationCreate) -> Application:
        """Store a new application in the ``submitted`` state."""
        now = utc_now()
        async with self.session_factory() as session:
            application = Application(
                **data.model_dump(),
                status=ApplicationStatus.SUBMITTED,
                created_at=now,
                updated_at=now,
            )
            session.add(application)
            await session.commit()
            await session.refresh(application)

        logger.info(
            f"Application {application.id} created for {application.candidate_email} "
            f"({application.position})"
        )
        return application

    async def list_all(self) -> list[Application]:
        """All applications, most recent first."""
        async with self.session_factory() as session:
            query = select(Application).order_by(
                Application.created_at.desc(), Application.id.desc()
            )
            result = await session.execute(query)
            return list(result.scalars().all())

    async def list_by_email(self, email: str) -> list[Application]:
        """Applications whose candidate email matches ``email`` exactly."""
        async with self.session_factory() as session:
            query = (
                select(Application)
                .where(Application.candidate_email == email)
                .order_by(Application.created_at.desc(), Application.id.desc())
            )
            result = await session.execute(query)
            applications = list(result.scalars().all())

        logger.debug(f"Found {len(applications)} applications for {email}")
        return applications

    async def get_by_id(self, application_id: int) -> Application:
        """Return the application or raise ApplicationNotFoundError."""
        async with self.session_factory() as session:
            application = await session.get(Application, application_id)

        if application is None:
            raise ApplicationNotFoundError(application_id)
        return application

    async def update(
        self, application_id: int, changes: ApplicationUpdate
    ) -> Application:
        """Apply the provided status and/or notes and refresh ``updated_at``.

        The last concurrent writer wins; no version column is checked.
        """
        fields = changes.model_dump(exclude_unset=True)

        async with self.session_factory() as session:
            application = await session.get(Application, application_id)
            if application is None:
                raise ApplicationNotFoundError(application_id)

            new_status = fields.get("status")
            if new_status is not None:
                validation = validate_status_transition(
                    application.status,
                    new_status,
                    enforce_workflow=self.enforce_status_workflow,
                )
                if not validation.is_valid:
                    raise StatusTransitionError(
                        application.status.value, new_status.value
                    )
                application.status = new_status

            if "notes" in fields:
                application.notes = fields["notes"]

            application.updated_at = _next_timestamp(application.updated_at)
            await session.commit()
            await session.refresh(application)

        logger.info(
            f"Application {application_id} updated: status={application.status.value}"
        )
        return application

    async def stats(self) -> ApplicationStats:
        """Count applications per status; total is the sum of the counts."""
        async with self.session_factory() as session:
            query = select(Application.status, func.count(Application.id)).group_by(
                Application.status
            )
            result = await session.execute(query)
            rows = result.all()

        counts = StatusCounts()
        for status, count in rows:
            setattr(counts, _STATUS_COUNT_FIELDS[ApplicationStatus(status)], count)

        total = (
            counts.submitted
            + counts.under_review
            + counts.interview
            + counts.accepted
            + counts.rejected
        )
        return ApplicationStats(total=total, by_status=counts)


# Factory function for dependency injection
def create_application_service(
    database: Database, settings: Settings
) -> ApplicationService:
    """Factory function to create ApplicationService with dependencies."""
    return ApplicationService(
        database.session_factory,
        enforce_status_workflow=settings.enforce_status_workflow,
    )

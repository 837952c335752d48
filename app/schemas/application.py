"""Schemas for job application requests and responses."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from app.models.application import ApplicationStatus


class CamelModel(BaseModel):
    """Base model exchanging camelCase keys with the web client."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ApplicationCreate(CamelModel):
    """Applicant submission. Only presence of the required fields is checked."""

    candidate_name: str = Field(..., description="Short handle or username")
    candidate_email: str = Field(..., description="Applicant lookup key")
    candidate_full_name: str = Field(..., description="Display name")
    position: str = Field(..., description="Position applied for")
    cv_filename: str | None = Field(
        default=None, description="Name of the simulated CV upload"
    )
    cover_letter: str | None = Field(default=None, description="Free text")


class ApplicationUpdate(CamelModel):
    """Recruiter update; omitted fields keep their stored value."""

    status: ApplicationStatus | None = Field(default=None, description="New status")
    notes: str | None = Field(default=None, description="Recruiter notes")


class ApplicationRead(CamelModel):
    """Application as returned by the API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    candidate_name: str
    candidate_email: str
    candidate_full_name: str
    position: str
    cv_filename: str | None = None
    cover_letter: str | None = None
    status: ApplicationStatus
    notes: str | None = None
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamps(self, value: datetime) -> datetime:
        """Stored timestamps are naive UTC; send them with an explicit offset."""
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class StatusCounts(CamelModel):
    """Number of applications in each status."""

    submitted: int = 0
    under_review: int = 0
    interview: int = 0
    accepted: int = 0
    rejected: int = 0


class ApplicationStats(CamelModel):
    """Stats summary shown on the recruiter dashboard."""

    total: int
    by_status: StatusCounts

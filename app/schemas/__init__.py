"""Pydantic schemas for request/response validation."""

from app.schemas.application import (
    ApplicationCreate,
    ApplicationRead,
    ApplicationStats,
    ApplicationUpdate,
    StatusCounts,
)
from app.schemas.system import HealthResponse, HelloResponse

__all__ = [
    "ApplicationCreate",
    "ApplicationRead",
    "ApplicationStats",
    "ApplicationUpdate",
    "HealthResponse",
    "HelloResponse",
    "StatusCounts",
]

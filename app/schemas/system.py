"""Schemas for the hello and health endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class HelloResponse(BaseModel):
    """Greeting read from the seeded table."""

    message: str
    source: str
    timestamp: datetime


class HealthResponse(BaseModel):
    """Liveness check payload."""

    status: Literal["ok"] = "ok"
    timestamp: datetime
    service: str

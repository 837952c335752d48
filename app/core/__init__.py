"""Core application components."""

from app.core.config import Settings, settings
from app.core.exceptions import (
    ApplicationError,
    ApplicationNotFoundError,
    StatusTransitionError,
)
from app.core.storage import Base, Database

__all__ = [
    "ApplicationError",
    "ApplicationNotFoundError",
    "Base",
    "Database",
    "Settings",
    "StatusTransitionError",
    "settings",
]

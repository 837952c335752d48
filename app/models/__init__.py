"""Database models."""

from app.models.application import Application, ApplicationStatus
from app.models.greeting import HelloWorld

__all__ = [
    "Application",
    "ApplicationStatus",
    "HelloWorld",
]

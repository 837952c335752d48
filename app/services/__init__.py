"""Application services."""

from app.services.application_service import (
    ApplicationService,
    create_application_service,
)
from app.services.greeting_service import GreetingService

__all__ = ["ApplicationService", "GreetingService", "create_application_service"]

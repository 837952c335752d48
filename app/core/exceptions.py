"""Custom exceptions for the application."""

from fastapi import HTTPException, status


class ApplicationError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ApplicationNotFoundError(ApplicationError):
    """Raised when no job application has the requested id."""

    def __init__(self, application_id: int):
        self.application_id = application_id
        super().__init__(f"Application {application_id} not found")


class StatusTransitionError(ApplicationError):
    """Raised when the status workflow forbids the requested change."""

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(
            f"Cannot move application from '{current}' to '{requested}'"
        )


def not_found_exception(detail: str = "Resource not found") -> HTTPException:
    """Return a 404 Not Found exception."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=detail,
    )


def conflict_exception(detail: str = "Request conflicts with current state") -> HTTPException:
    """Return a 409 Conflict exception."""
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=detail,
    )


def service_unavailable_exception(
    detail: str = "Database unavailable",
) -> HTTPException:
    """Return a 503 Service Unavailable exception."""
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=detail,
    )

"""Validation logic for application status changes."""

from dataclasses import dataclass

from app.models.application import ApplicationStatus

# Allowed moves when the strict workflow is enabled. Rejected and accepted
# are terminal.
STATUS_TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    ApplicationStatus.SUBMITTED: frozenset(
        {ApplicationStatus.UNDER_REVIEW, ApplicationStatus.REJECTED}
    ),
    ApplicationStatus.UNDER_REVIEW: frozenset(
        {
            ApplicationStatus.INTERVIEW,
            ApplicationStatus.ACCEPTED,
            ApplicationStatus.REJECTED,
        }
    ),
    ApplicationStatus.INTERVIEW: frozenset(
        {
            ApplicationStatus.UNDER_REVIEW,
            ApplicationStatus.ACCEPTED,
            ApplicationStatus.REJECTED,
        }
    ),
    ApplicationStatus.REJECTED: frozenset(),
    ApplicationStatus.ACCEPTED: frozenset(),
}


@dataclass
class ValidationResult:
    """Result of validation process."""

    is_valid: bool
    error: str | None = None


def allowed_next_statuses(current: ApplicationStatus) -> frozenset[ApplicationStatus]:
    """Statuses reachable from ``current`` under the strict workflow."""
    return STATUS_TRANSITIONS[current] | {current}


def validate_status_transition(
    current: ApplicationStatus,
    requested: ApplicationStatus,
    enforce_workflow: bool = False,
) -> ValidationResult:
    """Validate a status change.

    Without ``enforce_workflow`` every status may follow every other one.
    """
    if not enforce_workflow:
        return ValidationResult(is_valid=True)

    if requested in allowed_next_statuses(current):
        return ValidationResult(is_valid=True)

    return ValidationResult(
        is_valid=False,
        error=f"Cannot move application from '{current.value}' to '{requested.value}'",
    )

"""Utility functions and helpers."""

from app.utils.validators import (
    STATUS_TRANSITIONS,
    ValidationResult,
    validate_status_transition,
)

__all__ = ["STATUS_TRANSITIONS", "ValidationResult", "validate_status_transition"]

"""API request/response models."""

from stayquote_api.models.common import (
    ValidationErrorDetail,
    ValidationErrorResponse,
    format_validation_errors,
)

__all__ = [
    "ValidationErrorDetail",
    "ValidationErrorResponse",
    "format_validation_errors",
]

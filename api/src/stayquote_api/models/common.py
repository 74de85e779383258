"""Shared API response models.

Domain models (outcomes, errors) live in stayquote.models. This module
only covers HTTP-layer concerns such as request validation failures.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ValidationErrorDetail(BaseModel):
    """Detail of a single validation error."""

    model_config = ConfigDict(strict=True)

    loc: list[str] = Field(
        ...,
        description="Path to the field that failed validation",
        examples=[["body", "guests"]],
    )
    msg: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Input should be a valid integer"],
    )
    type: str = Field(
        ...,
        description="Error type identifier",
        examples=["int_parsing"],
    )


class ValidationErrorResponse(BaseModel):
    """Response body for malformed request bodies (HTTP 400)."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: str = "ERR_VALIDATION"
    message: str = "Request validation failed"
    details: list[ValidationErrorDetail] = Field(default_factory=list)


def format_validation_errors(errors: Any) -> ValidationErrorResponse:
    """Convert Pydantic validation errors to ValidationErrorResponse.

    Args:
        errors: Error dicts from ValidationError.errors()

    Returns:
        ValidationErrorResponse ready for JSON serialization.
    """
    details = [
        ValidationErrorDetail(
            loc=[str(loc) for loc in error.get("loc", [])],
            msg=error.get("msg", ""),
            type=error.get("type", ""),
        )
        for error in errors
    ]
    return ValidationErrorResponse(details=details)

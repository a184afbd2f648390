"""Pydantic schema for API error responses."""

from typing import List

from pydantic import Field

from .base import CamelSchema


class ErrorResponseSchema(CamelSchema):
    """Standard error response format for all API errors."""

    title: str = Field(
        ...,
        description="Short human-readable summary",
        examples=["Bad Request! Consult the documentation"],
    )
    timestamp: str = Field(
        ...,
        description="ISO 8601 time the error was produced",
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[400],
    )
    exception: str = Field(
        ...,
        description="Error classification",
        examples=["RequestValidationException"],
    )
    details: List[str] = Field(
        default_factory=list,
        description="One entry per problem found",
        examples=[["numberOfInstallments: must be less than or equal to 48"]],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

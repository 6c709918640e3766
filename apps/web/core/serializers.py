"""
Pydantic schemas shared by the JSON API.
"""

from typing import Literal

from pydantic import BaseModel


class ValidationErrorDetail(BaseModel):
    """A single validation error."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Response for validation errors."""

    error: Literal["validation_error"]
    details: list[ValidationErrorDetail]


class ClockResponse(BaseModel):
    """Response for GET /api/clock."""

    time: str
    timestamp: int

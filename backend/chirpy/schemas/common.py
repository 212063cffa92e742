"""
Chirpy Backend — Shared Response Schemas
=========================================

What:  Error and confirmation bodies shared by every JSON endpoint.

Every error, whatever its status code, has the same shape:
    {"error": "Invalid request body"}
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standardized error body for all API errors."""
    error: str = Field(description="Human-readable error description")


class MessageResponse(BaseModel):
    """Confirmation body for operations that return no resource."""
    message: str = Field(description="Human-readable confirmation")

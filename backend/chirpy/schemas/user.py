"""
Chirpy Backend — User Request/Response Schemas
===============================================

What:  Pydantic models for POST /api/users.
How:   routes/users.py validates the decoded JSON body against
       UserCreateRequest. A missing `email` reads as "", while a wrong type
       or a non-object body becomes a 400 MalformedRequestError.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class UserCreateRequest(BaseModel):
    """Client-supplied fields. The server generates everything else."""
    email: str = Field(default="", description="Email address of the new user")


class UserResponse(BaseModel):
    """
    What:  Full representation of a created user.
    Who:   Returned by POST /api/users with HTTP 201.

    `id` serializes as the canonical UUID string and both timestamps as
    ISO 8601.
    """
    id: uuid.UUID = Field(description="Unique user identifier (UUID)")
    email: str = Field(description="Email address")
    created_at: datetime = Field(description="Creation time (UTC ISO 8601)")
    updated_at: datetime = Field(description="Last update time (UTC ISO 8601)")

    model_config = {"from_attributes": True}

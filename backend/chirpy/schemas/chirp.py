"""
Chirpy Backend — Chirp Schemas
===============================

What:  Request shape and response bodies for POST /api/validate_chirp.
"""

from pydantic import BaseModel, Field


class ChirpRequest(BaseModel):
    """Transient chirp payload; never persisted. A missing `body` reads as ""."""
    body: str = Field(default="", description="Chirp text to validate and censor")


class CleanedChirpResponse(BaseModel):
    """Accepted chirp with forbidden words masked."""
    cleaned_body: str = Field(description="Chirp body after censoring")

"""
Chirpy Backend — Chirp Route Handlers
======================================

What:  POST /api/validate_chirp.
How:   The body is decoded as raw JSON whatever the Content-Type, so the
       chirp validator, not FastAPI, decides whether it has the right shape.
       Undecodable bodies raise MalformedRequestError (400).

Responses:
    200  {"cleaned_body": "..."}
    400  {"error": "Invalid request body"} | {"error": "Chirp is too long"}
"""

from fastapi import APIRouter, Request

from chirpy.routes.body import json_request_body, read_json_body
from chirpy.schemas.chirp import ChirpRequest, CleanedChirpResponse
from chirpy.schemas.common import ErrorResponse
from chirpy.services.chirp_service import Accepted, validate_chirp

router = APIRouter(prefix="/api", tags=["Chirps"])


@router.post(
    "/validate_chirp",
    response_model=CleanedChirpResponse,
    responses={400: {"description": "Invalid or too long", "model": ErrorResponse}},
    openapi_extra=json_request_body(ChirpRequest),
    summary="Validate a chirp and mask forbidden words",
)
async def validate_chirp_handler(request: Request) -> CleanedChirpResponse:
    payload = await read_json_body(request)
    result = validate_chirp(payload)
    if not isinstance(result, Accepted):
        raise result.to_exception()
    return CleanedChirpResponse(cleaned_body=result.cleaned_body)

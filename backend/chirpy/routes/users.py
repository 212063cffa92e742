"""
Chirpy Backend — User Route Handlers
=====================================

What:  POST /api/users creates a user from `{"email": "..."}`.

Responses:
    201  {"id", "email", "created_at", "updated_at"}
    400  {"error": "Invalid request body"}   (bad JSON or wrong shape)
    500  {"error": "Failed to create user"}  (storage failure)
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.database import get_db_session
from chirpy.routes.body import json_request_body, read_json_model
from chirpy.schemas.common import ErrorResponse
from chirpy.schemas.user import UserCreateRequest, UserResponse
from chirpy.services.user_repository import user_repository

router = APIRouter(prefix="/api", tags=["Users"])


@router.post(
    "/users",
    status_code=201,
    response_model=UserResponse,
    responses={
        400: {"description": "Malformed request body", "model": ErrorResponse},
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    openapi_extra=json_request_body(UserCreateRequest),
    summary="Create a user",
)
async def create_user(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    payload = await read_json_model(request, UserCreateRequest)
    user = await user_repository.create(db, payload.email)
    return UserResponse.model_validate(user)

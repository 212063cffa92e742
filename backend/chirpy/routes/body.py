"""
Chirpy Backend — JSON Request Bodies
=====================================

What:  Decodes a request body as JSON whatever its Content-Type says.
Why:   `curl -d '{"body": "hi"}'` sends application/x-www-form-urlencoded.
       FastAPI's typed body parameters only decode JSON content types, so
       the JSON routes read the body themselves.
"""

from typing import Any, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from chirpy.exceptions import MalformedRequestError

ModelT = TypeVar("ModelT", bound=BaseModel)


async def read_json_body(request: Request) -> Any:
    """
    Return the decoded JSON value of the request body.

    Raises:
        MalformedRequestError: empty body, invalid UTF-8, or invalid JSON
    """
    try:
        return await request.json()
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise MalformedRequestError(
            context={
                "content_type": request.headers.get("content-type", ""),
                "reason": type(e).__name__,
            }
        ) from e


async def read_json_model(request: Request, model: Type[ModelT]) -> ModelT:
    """Decode the body and validate it against `model`."""
    payload = await read_json_body(request)
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise MalformedRequestError(
            context={"model": model.__name__, "errors": e.error_count()}
        ) from e


def json_request_body(model: Type[BaseModel]) -> dict:
    """OpenAPI `requestBody` for routes that read the body themselves."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }

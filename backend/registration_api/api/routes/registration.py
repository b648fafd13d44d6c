"""Registration Route — POST /register over the pure registration handler.

Invariants:
    - The raw body goes to core.registration untouched; no FastAPI body parsing
    - Rejections propagate as RegistrationError to the global handler
    - The password is never logged or returned

Design Decisions:
    - Raw body over a typed Body parameter: FastAPI would answer bad payloads
      itself, and malformed JSON must map to 400 "Invalid request" like every
      other deserialization failure
    - openapi_extra keeps the request schema in the generated docs
"""

import logging

from fastapi import APIRouter, Request, status

from registration_api.core.registration import handle_registration
from registration_api.schemas.registration import (
    ErrorResponse,
    RegistrationRequest,
    RegistrationResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["registration"])


@router.post(
    "/register",
    response_model=RegistrationResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": RegistrationRequest.model_json_schema(),
                },
            },
        },
    },
)
async def register_user(request: Request) -> RegistrationResponse:
    """Validate a registration and echo the public user fields."""
    raw_body = await request.body()
    response = handle_registration(raw_body)
    logger.info("User registration accepted", extra={"path": request.url.path})
    return response

"""
sigauth.api.routers.verify

Signature verification endpoint.

Responsibilities:
- Accept `{userId, challenge, signature}` and delegate to `SignatureAuthHandler`.
- Map result error codes to HTTP statuses and the `{code, message}` error body.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from sigauth.api.deps import signature_auth_handler
from sigauth.observability.logging import get_logger
from sigauth.services.errors import AuthError, ErrorCode
from sigauth.services.signature_auth import SignatureAuthHandler

router = APIRouter(prefix="/v1/auth", tags=["auth"])
log = get_logger(__name__)

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.invalid_argument: HTTP_400_BAD_REQUEST,
    ErrorCode.not_found: HTTP_404_NOT_FOUND,
    ErrorCode.unauthenticated: HTTP_401_UNAUTHORIZED,
    ErrorCode.internal: HTTP_500_INTERNAL_SERVER_ERROR,
}


class TokenResponse(BaseModel):
    token: str


class ErrorResponse(BaseModel):
    code: str
    message: str


def error_response(error: AuthError) -> JSONResponse:
    return JSONResponse(
        status_code=STATUS_BY_CODE[error.code],
        content=ErrorResponse(code=str(error.code), message=error.message).model_dump(),
    )


@router.post(
    "/verify-signature",
    response_model=TokenResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def verify_signature(
    payload: Any = Body(default=None),
    handler: SignatureAuthHandler = Depends(signature_auth_handler),
) -> Any:
    # The body is validated by the handler so malformed input yields `invalid-argument`.
    try:
        result = await handler.handle(payload)
    except Exception:
        # Unexpected failures still answer with the `internal` envelope.
        log.exception("verify_failed")
        return error_response(AuthError.internal())

    if result.error is not None:
        return error_response(result.error)
    if result.credential is None:
        log.error("verify_failed", reason="result without credential")
        return error_response(AuthError.internal())
    return TokenResponse(token=result.credential.token)

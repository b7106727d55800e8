"""
Translation of service errors into HTTP responses.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..services.errors import (
    CharterError,
    CostEstimationError,
    InvalidAircraftError,
    InvalidStateError,
    NotFoundError,
    ReferentialConflictError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# First match wins
ERROR_STATUS_CODES = [
    (NotFoundError, 404),
    (ReferentialConflictError, 409),
    (InvalidStateError, 409),
    (ValidationError, 400),
    (CostEstimationError, 400),
    (InvalidAircraftError, 400),
]


def status_code_for(exc: CharterError) -> int:
    for error_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 500


def register_error_handlers(app: FastAPI) -> None:
    """Install handlers mapping service and request-validation errors to JSON bodies."""

    @app.exception_handler(CharterError)
    async def charter_error_handler(request: Request, exc: CharterError) -> JSONResponse:
        status_code = status_code_for(exc)
        body = {"error": exc.kind, "detail": exc.message}
        if isinstance(exc, ReferentialConflictError):
            body["trip_ids"] = exc.trip_ids
        logger.info(f"{request.method} {request.url.path} -> {status_code} {exc.kind}: {exc.message}")
        return JSONResponse(status_code=status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"error": ValidationError.kind, "detail": jsonable_encoder(exc.errors())},
        )

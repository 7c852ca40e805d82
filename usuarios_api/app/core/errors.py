"""
Error types and their JSON representation.

``ClientError`` and ``NotFound`` carry a human readable ``message``
and are rendered as ``{"message": ...}``.  ``StoreError`` wraps any
failure reported by the database layer and is rendered as
``{"error": ...}`` with status 500.  FastAPI's own validation errors
(malformed JSON, wrong types, non-integer ids) are treated as client
errors and answered with 400.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Datos de entrada no válidos"


class ClientError(Exception):
    """Malformed or incomplete input supplied by the caller."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFound(ClientError):
    """The requested record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreError(Exception):
    """Failure reported by the underlying store or its driver."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def register_error_handlers(app: FastAPI) -> None:
    """Attach the exception handlers to ``app``."""

    @app.exception_handler(ClientError)
    async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": INVALID_INPUT_MESSAGE},
        )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error("Store error on %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": exc.message},
        )

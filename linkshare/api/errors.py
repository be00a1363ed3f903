"""Uniform error envelope: {"error": <kind>, "message": <text>}."""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from linkshare.services.errors import ServiceError

logger = logging.getLogger(__name__)


class APIError(HTTPException):
    """HTTPException that also carries a stable error kind."""

    def __init__(self, status_code: int, kind: str, message: str):
        super().__init__(status_code=status_code, detail=message)
        self.kind = kind

    @classmethod
    def from_service_error(cls, status_code: int, exc: ServiceError) -> "APIError":
        """Wrap a domain error with the status code chosen by the endpoint."""
        return cls(status_code, exc.kind, exc.message)


def error_response(status_code: int, kind: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": kind, "message": message})


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return error_response(exc.status_code, exc.kind, exc.detail)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return error_response(
        status.HTTP_400_BAD_REQUEST, "validation_error", "Request body or query is invalid"
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", "Internal server error"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope handlers on the application."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

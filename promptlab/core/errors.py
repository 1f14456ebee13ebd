"""Translate exceptions into `{"error": ...}` JSON bodies."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from promptlab.core.exceptions import AppError, InvalidGenerationFormat, ProviderError

logger = logging.getLogger(__name__)


async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, (ProviderError, InvalidGenerationFormat)):
        # Vendor details stay in the log
        logger.error(
            f"{type(exc).__name__}: {exc.message} "
            f"Path: {request.url.path}, Method: {request.method}"
        )
        message = exc.public_message
    else:
        logger.warning(
            f"{type(exc).__name__} - {exc.status_code}: {exc.message} "
            f"Path: {request.url.path}, Method: {request.method}"
        )
        message = exc.message

    return JSONResponse(status_code=exc.status_code, content={"error": message})


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request format", "details": jsonable_encoder(exc.errors())},
    )


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(AppError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

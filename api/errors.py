"""
Exception handlers.

Every failure leaves the API as {"error": <message>} with the status of
its exception class. Internal detail stays in the logs.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import GatewayError

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    """Render a domain error with its mapped status and public message."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.code)
    else:
        logger.info(
            "%s %s rejected with %d: %s",
            request.method, request.url.path, exc.status_code, exc.code,
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.public_message).model_dump(),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are a 400, not FastAPI's default 422."""
    logger.info("%s %s malformed body: %d error(s)", request.method, request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="Invalid request").model_dump(),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Failures outside the dispatcher, e.g. a misconfigured container."""
    logger.error("%s %s crashed", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Internal server error").model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the gateway's exception handlers to an app."""
    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

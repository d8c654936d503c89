"""
Custom exception handlers for FastAPI.

Every error leaves the API as a short ``text/plain`` message with the
matching status code: 400 for bodies that do not decode into a receipt,
404/405 (and any other ``HTTPException``) with their detail text, 500
for anything unexpected.
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from receipt_points.core.observability import sentry_capture

logger = logging.getLogger(__name__)

RECEIPT_DECODE_ERROR = "Failed to parse receipt JSON"


def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return PlainTextResponse(RECEIPT_DECODE_ERROR, status_code=HTTP_400_BAD_REQUEST)


def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def generic_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    sentry_capture(exc)
    return PlainTextResponse("Internal server error", status_code=HTTP_500_INTERNAL_SERVER_ERROR)

# event_planner/errors.py
"""
Error taxonomy shared by the services and the HTTP layer.

Services raise one of the ``PlannerError`` subclasses below; the handlers
registered by ``register_exception_handlers`` turn them (and FastAPI's own
request validation errors) into ``{"error": ...}`` or ``{"errors": [...]}``
JSON bodies with the matching status code.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


class PlannerError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class BadRequestError(PlannerError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(PlannerError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(PlannerError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(PlannerError):
    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(PlannerError):
    status_code = 422

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        super().__init__("; ".join(e["message"] for e in errors) or "Validation failed")

    def to_body(self) -> Dict[str, Any]:
        return {"errors": self.errors}


class StoreError(PlannerError):
    """The store could not be read or written (not an authorization outcome)."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def _clean_message(message: str) -> str:
    # Pydantic prefixes messages from custom validators with "Value error, "
    prefix = "Value error, "
    return message[len(prefix):] if message.startswith(prefix) else message


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    formatted = []
    for err in errors:
        loc = list(err.get("loc", ()))
        location = str(loc[0]) if loc else "body"
        field = ".".join(str(part) for part in loc[1:]) or location
        formatted.append({
            "field": field,
            "message": _clean_message(err.get("msg", "Invalid value")),
            "location": location,
        })
    return formatted


async def planner_error_handler(request: Request, exc: PlannerError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(exc.to_body(), status_code=exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    # Unparseable JSON is a malformed body, not a field-level validation failure
    if any(err.get("type") == "json_invalid" for err in errors):
        return JSONResponse({"error": "Malformed request body"}, status_code=status.HTTP_400_BAD_REQUEST)
    return JSONResponse(
        {"errors": format_validation_errors(errors)},
        status_code=ValidationError.status_code,
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    headers: Optional[Dict[str, str]] = getattr(exc, "headers", None)
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=headers)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        {"error": "Something went wrong"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PlannerError, planner_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

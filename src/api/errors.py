"""
Exception handlers - keep every error body in the APIResponse shape.

FastAPI's defaults answer with ``{"detail": ...}``; clients of this API
always receive ``{"ok": false, "message": ...}`` instead.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.models import APIResponse

INVALID_BODY_MESSAGE = "invalid json"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a failure response in the APIResponse shape."""
    body = APIResponse(ok=False, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed body (bad JSON, wrong types): rejected before the pipeline runs."""
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Routing errors such as 404 and 405."""
    response = error_response(exc.status_code, str(exc.detail).lower())
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def install_exception_handlers(app: FastAPI) -> None:
    """Register the APIResponse-shaped handlers on the application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

"""
Error types raised by the service layer.

Each error carries the HTTP status code and the JSON payload that is
returned to the caller verbatim.  The handler registered in
``main.create_app`` turns any ``DemoAPIError`` into a ``JSONResponse``.
Router-level 404 and 405 responses get the same endpoint directory as
the catch-all route.
"""

from typing import Any, Dict

from fastapi import Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from crud_demo_api.app.services.route_directory import not_found_payload


class DemoAPIError(Exception):
    """Base error with a status code and a structured body."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, payload: Dict[str, Any]) -> None:
        super().__init__(payload.get("error", self.__class__.__name__))
        self.payload = payload


class ValidationError(DemoAPIError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthorizationError(DemoAPIError):
    """Input is well formed but the caller's role is not allowed."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(DemoAPIError):
    """No route matches the request."""

    status_code = status.HTTP_404_NOT_FOUND


async def demo_api_error_handler(request: Request, exc: DemoAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.payload)


async def unrouted_request_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer router-level 404/405 with the endpoint directory.

    The catch-all route covers the usual methods; this handles the
    rest (``TRACE``, custom verbs).  Other HTTP errors keep FastAPI's
    default rendering.
    """
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return await demo_api_error_handler(request, NotFoundError(not_found_payload()))
    return await http_exception_handler(request, exc)

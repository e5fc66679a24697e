"""
Catch-all route.

Registered last, so it only sees requests that no other route
matched, including known paths called with the wrong method.  It
always answers 404 with the endpoint directory.
"""

from fastapi import APIRouter

from crud_demo_api.app.core.errors import NotFoundError
from crud_demo_api.app.services.route_directory import not_found_payload

router = APIRouter()

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


@router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
async def not_found(path: str) -> None:
    raise NotFoundError(not_found_payload())

"""
Secure delete endpoint.

Demonstrates reading a request header::

    DELETE /secure/resource
    x-role: admin
"""

from typing import Optional

from fastapi import APIRouter, Header

from crud_demo_api.app.schemas.secure import DeleteResponse
from crud_demo_api.app.services.access_service import AccessService

router = APIRouter()


@router.delete("/resource", response_model=DeleteResponse)
async def delete_resource(x_role: Optional[str] = Header(None)) -> DeleteResponse:
    """Pretend to delete a resource when ``x-role`` is an allowed role."""
    return await AccessService.delete_resource(x_role)

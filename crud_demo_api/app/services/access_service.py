"""
Service layer for the secure delete endpoint.

Access control is a plain comparison of the ``x-role`` header against
``settings.allowed_roles``.  There is no token and no user lookup; the
endpoint only shows how a handler reads request headers.
"""

import logging
from typing import List, Optional

from crud_demo_api.app.core.config import settings
from crud_demo_api.app.core.errors import AuthorizationError, ValidationError
from crud_demo_api.app.schemas.secure import DeleteInput, DeleteResponse

logger = logging.getLogger(__name__)

ROLE_HEADER = "x-role"

DELETE_RESULT = "Resource deleted successfully (not really, this is just a demo)."
DELETE_INFO = "This endpoint demonstrates reading data from request headers."


def missing_role_payload() -> dict:
    return {
        "error": f'Missing required header: "{ROLE_HEADER}".',
        "how_to_use": f'Send a DELETE request with a header named "{ROLE_HEADER}".',
        "expected_header": {ROLE_HEADER: 'string (e.g. "admin", "editor", "viewer")'},
        "example_curl": f'curl -X DELETE {settings.public_url}/secure/resource -H "{ROLE_HEADER}: admin"',
    }


def forbidden_payload(role: str, allowed_roles: List[str]) -> dict:
    quoted = ", ".join(f'"{r}"' for r in allowed_roles)
    return {
        "error": f"Forbidden: only role {quoted} can delete this resource.",
        "your_role": role,
        "allowed_roles": list(allowed_roles),
    }


class AccessService:
    """Role checks for protected demo resources."""

    @classmethod
    async def delete_resource(cls, role: Optional[str]) -> DeleteResponse:
        if not role:
            logger.info("Rejected delete: missing %s header", ROLE_HEADER)
            raise ValidationError(missing_role_payload())
        if role not in settings.allowed_roles:
            logger.info("Rejected delete: role %r is not allowed", role)
            raise AuthorizationError(forbidden_payload(role, settings.allowed_roles))
        logger.info("Resource delete accepted for role %r", role)
        return DeleteResponse(
            input=DeleteInput(role=role),
            result=DELETE_RESULT,
            info=DELETE_INFO,
        )

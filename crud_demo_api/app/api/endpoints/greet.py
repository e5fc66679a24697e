"""
Greeting endpoint.

Demonstrates reading query parameters::

    GET /greet?name=David&lang=he
"""

from typing import Optional

from fastapi import APIRouter, Query

from crud_demo_api.app.schemas.greet import GreetResponse
from crud_demo_api.app.services.greeting_service import GreetingService

router = APIRouter()


@router.get("", response_model=GreetResponse)
async def greet(
    name: Optional[str] = Query(None, description="Name to greet (required)"),
    lang: Optional[str] = Query(None, description='Language code: "en", "he" or "es"'),
) -> GreetResponse:
    """Return a greeting for ``name`` in ``lang``.

    ``name`` is declared optional so that a missing value reaches the
    service and produces the usage payload instead of FastAPI's 422.
    """
    return await GreetingService.greet(name, lang)

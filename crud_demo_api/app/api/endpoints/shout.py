"""
Shout endpoint.

Demonstrates reading a path parameter::

    PUT /shout/hello
"""

from fastapi import APIRouter

from crud_demo_api.app.schemas.shout import ShoutResponse
from crud_demo_api.app.services.text_service import TextService

router = APIRouter()


@router.put("/{word}", response_model=ShoutResponse)
async def shout(word: str) -> ShoutResponse:
    return await TextService.shout(word)

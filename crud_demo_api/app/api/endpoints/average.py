"""
Average endpoint.

Demonstrates reading a JSON body::

    POST /math/average
    {"numbers": [10, 20, 30, 40]}

The body is decoded by hand so that malformed JSON is answered with the
same 400 usage payload as a missing ``numbers`` field.
"""

import logging

from fastapi import APIRouter, Request

from crud_demo_api.app.schemas.average import AverageResponse
from crud_demo_api.app.services.math_service import MathService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/average", response_model=AverageResponse)
async def average(request: Request) -> AverageResponse:
    try:
        body = await request.json()
    except ValueError:
        logger.info("Request body is not valid JSON")
        body = None
    return await MathService.average(body)

"""
Top-level router.

Aggregates the demo routes.  The fallback router must stay last:
its ``/{path:path}`` pattern matches every request.
"""

from fastapi import APIRouter

from .endpoints import average, fallback, greet, secure, shout

router = APIRouter()

router.include_router(greet.router, prefix="/greet", tags=["greet"])
router.include_router(average.router, prefix="/math", tags=["math"])
router.include_router(shout.router, prefix="/shout", tags=["shout"])
router.include_router(secure.router, prefix="/secure", tags=["secure"])
router.include_router(fallback.router)

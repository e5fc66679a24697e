"""
Main entrypoint for the CRUD Demo API.

This module assembles the FastAPI application, sets up logging and
includes the demo router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app`` so it can be served directly, e.g.::

    uvicorn crud_demo_api.app.main:app --port 3000

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import settings
from .core.errors import DemoAPIError, demo_api_error_handler, unrouted_request_handler
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, registers the handlers that render service
    errors and unrouted requests as JSON and includes the demo routes.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging()

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.add_exception_handler(DemoAPIError, demo_api_error_handler)
    app.add_exception_handler(StarletteHTTPException, unrouted_request_handler)
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        logging.getLogger(__name__).info(
            "%s %s listening on %s", settings.project_name, settings.api_version, settings.public_url
        )

    return app


app = create_app()

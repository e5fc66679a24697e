"""Entry point for the CRUD demo API server.

Serves ``crud_demo_api.app.main:app`` with Uvicorn.  Host and port come
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from crud_demo_api.app.core.config import settings
from crud_demo_api.app.main import app


async def run_api() -> None:
    """Start the API server using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass

"""Entry point for serving the Showcase API.

Starts the FastAPI application with Uvicorn.  Host, port and log level
come from the same environment variables as the application settings
(``HOST``, ``PORT``, ``LOG_LEVEL``); defaults are ``0.0.0.0``, ``8000``
and ``INFO``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from showcase_api.app.core.config import settings
from showcase_api.app.main import app


async def serve() -> None:
    """Run the API server until it is stopped."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        pass

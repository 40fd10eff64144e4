"""
Main entrypoint for the Showcase API.

``create_app`` assembles the FastAPI application: it sets up logging,
creates the services, registers the error handler and mounts the API
router under ``settings.api_prefix``.  An instance is created at
import time as ``app`` so it can be served with::

    uvicorn showcase_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .services.time_service import TimeService
from .services.user_service import UserService


def create_app(
    settings: Optional[Settings] = None,
    user_service: Optional[UserService] = None,
    time_service: Optional[TimeService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment-derived
        module settings.
    user_service : Optional[UserService]
        Directory to serve.  A fresh, seeded directory is created when
        omitted, so every application starts from the seed data.
    time_service : Optional[TimeService]
        Clock wrapper for ``/time``; defaults to the real clock in
        ``settings.timezone``.

    Returns
    -------
    FastAPI
        A configured application instance.
    """
    settings = settings or default_settings
    # Logging first so that service construction can already log.
    setup_logging(settings.log_level, settings.log_file, debug=settings.debug)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.user_service = user_service if user_service is not None else UserService()
    app.state.time_service = time_service if time_service is not None else TimeService(settings.timezone)

    register_error_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_app()

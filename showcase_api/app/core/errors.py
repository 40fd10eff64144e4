"""
Error type shared by all services.

Every failure this API can report is a caller input problem, so there
is a single exception class.  ``register_error_handlers`` installs a
FastAPI handler that turns it into ``400 {"error": "..."}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)

INVALID_JSON = "Invalid JSON in request body"


class InvalidArgumentError(ValueError):
    """Raised when a request carries missing, malformed or unusable input."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    """Attach the ``InvalidArgumentError`` handler to ``app``."""
    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)

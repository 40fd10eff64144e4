"""
Application package initializer.

The API is split into small pieces: ``core`` holds configuration,
logging and the error type, ``schemas`` the pydantic payload models,
``services`` the business logic and ``api`` the HTTP routes.  Each
service (time, calculator, users) is independent of the others.
"""

from .main import app  # noqa: F401

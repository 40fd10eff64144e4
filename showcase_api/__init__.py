"""
Top‑level package for the Showcase API.

The package itself has no public exports; the application lives in
``showcase_api.app`` and can be served with::

    uvicorn showcase_api.app.main:app --reload
"""

__all__ = []

"""
Top‑level API router.

Aggregates the per-service routers.  Paths are relative to the API
prefix, so ``time.router`` ends up at ``/api/time``.
"""

from fastapi import APIRouter

from .endpoints import calculate, hello, time, users

router = APIRouter()

router.include_router(hello.router, prefix="/hello", tags=["hello"])
router.include_router(time.router, prefix="/time", tags=["time"])
router.include_router(calculate.router, prefix="/calculate", tags=["calculator"])
router.include_router(users.router, prefix="/users", tags=["users"])

"""Minimal greeting route, the smallest possible API endpoint."""

from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("", response_model=Dict[str, str])
async def hello() -> Dict[str, str]:
    """Return a fixed greeting; useful as a liveness check."""
    return {"message": "Hello from API!"}

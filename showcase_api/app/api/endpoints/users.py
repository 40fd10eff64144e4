"""
User directory endpoints.

Listing supports an optional, case-insensitive ``role`` filter.
Creation appends to the in-memory directory; nothing survives a
restart and users are never updated or deleted.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, status

from showcase_api.app.api.deps import get_user_service, read_json_object
from showcase_api.app.schemas.user import UserCreate, UserCreated, UserList
from showcase_api.app.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=UserList, response_model_exclude_none=True)
async def list_users(
    role: Optional[str] = Query(None, description="Only return users with this role (case-insensitive)"),
    service: UserService = Depends(get_user_service),
) -> UserList:
    """List users in insertion order.

    The response echoes the filter back in ``filter`` and sets
    ``filtered`` when a non-empty role was given.
    """
    return service.list_users(role)


@router.post("", response_model=UserCreated, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: Dict[str, Any] = Depends(read_json_object),
    service: UserService = Depends(get_user_service),
) -> UserCreated:
    """Create a user from ``name``, ``email`` and ``role``.

    All three must be non-empty strings, otherwise 400 is returned and
    the directory is left untouched.
    """
    data = UserCreate.from_payload(payload)
    user = service.create_user(data)
    return UserCreated(user=user)

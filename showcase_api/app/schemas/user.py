"""
Pydantic models for user directory data.

``UserCreate`` requires ``name``, ``email`` and ``role`` as non-empty
strings.  E-mail addresses are free text and are not validated.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, StrictStr, ValidationError

from showcase_api.app.core.errors import InvalidArgumentError

FIELDS_REQUIRED = "Name, email, and role are required"


class UserBase(BaseModel):
    name: StrictStr = Field(..., min_length=1, examples=["Zoe Walker"])
    email: StrictStr = Field(..., min_length=1, examples=["zoe@example.com"])
    role: StrictStr = Field(..., min_length=1, examples=["Designer"])


class UserCreate(UserBase):
    """Schema for creating a user."""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "UserCreate":
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise InvalidArgumentError(FIELDS_REQUIRED) from exc


class UserRead(UserBase):
    """Schema for a stored user."""

    id: int

    model_config = {
        "from_attributes": True,
    }


class UserList(BaseModel):
    """Listing response; ``filter`` is only set when a role filter applied."""

    users: List[UserRead]
    total: int
    filtered: bool
    filter: Optional[str] = None


class UserCreated(BaseModel):
    message: str = "User created successfully"
    user: UserRead

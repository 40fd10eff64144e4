"""
FastAPI dependencies shared by the endpoints.

Services live on ``app.state`` so that each application built by
``create_app`` owns its own user directory.  Request bodies are parsed
by hand instead of through a pydantic body parameter: any decoding
problem has to become ``400 {"error": "Invalid JSON in request body"}``
rather than FastAPI's default 422 response.
"""

import json
import math
from typing import Any, Dict

from fastapi import Request

from showcase_api.app.core.errors import INVALID_JSON, InvalidArgumentError
from showcase_api.app.services.time_service import TimeService
from showcase_api.app.services.user_service import UserService


def _reject_constant(token: str) -> Any:
    # NaN and Infinity are not valid JSON
    raise ValueError(f"Invalid JSON constant {token}")


def _parse_finite_float(text: str) -> float:
    # literals such as 1e400 overflow to inf
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range {text}")
    return value


async def read_json_object(request: Request) -> Dict[str, Any]:
    """Decode the request body, which must be a JSON object."""
    body = await request.body()
    try:
        payload = json.loads(body, parse_constant=_reject_constant, parse_float=_parse_finite_float)
    except ValueError as exc:
        raise InvalidArgumentError(INVALID_JSON) from exc
    if not isinstance(payload, dict):
        raise InvalidArgumentError(INVALID_JSON)
    return payload


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_time_service(request: Request) -> TimeService:
    return request.app.state.time_service
